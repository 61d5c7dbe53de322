import openai
from typing import Any, Dict, List, Optional
import logging
from pydantic import ValidationError
from priisme.core.config import settings
from priisme.core.exceptions import (
    ServiceNotConfiguredError,
    UpstreamRateLimitError,
    UpstreamCreditsExhaustedError,
    UpstreamServiceError,
)
from priisme.models.style_analysis import StyleAnalysis
from priisme.services.analysis_parser import parse_analysis_content

logger = logging.getLogger(__name__)

STYLE_ANALYST_SYSTEM_PROMPT = """You are PRIISME's AI Style Analyst, an expert in fashion, beauty, and personal styling. You analyze photos to provide personalized style recommendations.

When analyzing a photo, you must provide a comprehensive style analysis in the following JSON format:

{
  "face_shape": "oval | round | square | heart | oblong | diamond",
  "skin_tone": "fair | light | medium | olive | tan | dark | deep",
  "skin_undertone": "warm | cool | neutral",
  "body_type": "hourglass | pear | apple | rectangle | inverted_triangle",
  "style_personality": "classic | bohemian | minimalist | glamorous | edgy | romantic | sporty | artistic",
  "recommended_colors": ["color1", "color2", "color3", "color4", "color5"],
  "avoid_colors": ["color1", "color2"],
  "clothing_recommendations": [
    {"type": "tops", "suggestions": ["suggestion1", "suggestion2"]},
    {"type": "bottoms", "suggestions": ["suggestion1", "suggestion2"]},
    {"type": "dresses", "suggestions": ["suggestion1", "suggestion2"]},
    {"type": "outerwear", "suggestions": ["suggestion1", "suggestion2"]},
    {"type": "accessories", "suggestions": ["suggestion1", "suggestion2"]}
  ],
  "hairstyle_recommendations": ["style1", "style2", "style3"],
  "makeup_recommendations": [
    {"type": "foundation", "suggestion": "description"},
    {"type": "lips", "suggestion": "description"},
    {"type": "eyes", "suggestion": "description"},
    {"type": "blush", "suggestion": "description"}
  ],
  "overall_summary": "A brief 2-3 sentence summary of the person's style profile and key recommendations."
}

Be specific and personalized in your recommendations. Consider the person's visible features and provide actionable, helpful advice. If you cannot clearly see certain features, make reasonable assumptions based on what is visible.

IMPORTANT: Respond ONLY with valid JSON, no additional text."""

STYLE_ANALYSIS_USER_PROMPT = (
    "Please analyze this photo and provide a comprehensive style analysis. "
    "Return your analysis as JSON only."
)


def ensure_data_uri(image_base64: str) -> str:
    """Bare base64 payloads are assumed to be JPEG"""
    if image_base64.startswith("data:"):
        return image_base64
    return f"data:image/jpeg;base64,{image_base64}"


def extract_message_content(completion: Any) -> Optional[str]:
    """Text of the first choice's message, or None"""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    if message is None:
        return None
    return getattr(message, "content", None)


class StyleAnalysisService:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None
    ):
        self.api_key = settings.style_api_key if api_key is None else api_key
        self.base_url = base_url or settings.AI_GATEWAY_URL
        self.model = model or settings.STYLE_ANALYSIS_MODEL
        self.client = None

        if self.api_key:
            # One proxy call is exactly one upstream call
            self.client = openai.AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0
            )
        else:
            logger.warning("AI gateway API key not configured!")

    def build_messages(self, image_url: str) -> List[Dict[str, Any]]:
        return [
            {"role": "system", "content": STYLE_ANALYST_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": STYLE_ANALYSIS_USER_PROMPT},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            },
        ]

    async def analyze_image(self, image_base64: str) -> Any:
        """
        Send one image to the style model and return the parsed analysis.

        Raises a StyleAnalysisError subclass for configuration, upstream and
        parsing failures. The parsed object is returned as-is; schema
        compliance is only requested from the model, never enforced here.
        """
        if not self.api_key or self.client is None:
            logger.error("AI gateway API key not configured")
            raise ServiceNotConfiguredError()

        image_url = ensure_data_uri(image_base64)

        logger.info("Calling AI gateway for style analysis...")
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(image_url)
            )
        except openai.APIStatusError as e:
            logger.error(f"AI gateway error: {e.status_code} - {e.message}")
            if e.status_code == 429:
                raise UpstreamRateLimitError()
            if e.status_code == 402:
                raise UpstreamCreditsExhaustedError()
            raise UpstreamServiceError()

        content = extract_message_content(completion)
        if not content:
            logger.error("No content in AI response")

        analysis = parse_analysis_content(content)
        self._log_unrecognized_values(analysis)

        logger.info("Style analysis completed successfully")
        return analysis

    def _log_unrecognized_values(self, analysis: Any) -> None:
        if not isinstance(analysis, dict):
            logger.warning(f"Style analysis is not a JSON object: {type(analysis).__name__}")
            return
        try:
            unknown = StyleAnalysis.model_validate(analysis).unrecognized_values()
        except ValidationError as e:
            logger.warning(f"Style analysis does not match the documented shape: {e.error_count()} issue(s)")
            return
        if unknown:
            logger.warning(f"Style analysis has undocumented values: {unknown}")


# Global instance
style_analysis_service = StyleAnalysisService()
