from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
import logging

from priisme.api.deps import get_style_analysis_service
from priisme.middleware.cors import preflight_headers
from priisme.core.exceptions import (
    StyleAnalysisError,
    ImageMissingError,
    InvalidRequestBodyError
)
from priisme.schemas.style_analysis import AnalyzeStyleResponse
from priisme.services.style_analysis_service import StyleAnalysisService

logger = logging.getLogger(__name__)

router = APIRouter()

# Stateless proxy: no authentication here, identity is enforced by the
# persistence endpoints only.

@router.options("/analyze-style", include_in_schema=False)
async def analyze_style_options():
    """Bare OPTIONS requests; real pre-flights are answered by the CORS middleware"""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=preflight_headers())

@router.post("/analyze-style", response_model=AnalyzeStyleResponse)
async def analyze_style(
    request: Request,
    service: StyleAnalysisService = Depends(get_style_analysis_service)
):
    """Analyze one photo and return the style profile as `{analysis}`"""
    try:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequestBodyError()

        image_base64 = body.get("imageBase64") if isinstance(body, dict) else None
        if not image_base64 or not isinstance(image_base64, str):
            raise ImageMissingError()

        analysis = await service.analyze_image(image_base64)
        return {"analysis": analysis}

    except StyleAnalysisError:
        raise
    except Exception as e:
        logger.error(f"Error in analyze-style endpoint: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e) or "An unexpected error occurred"}
        )
