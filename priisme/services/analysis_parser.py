"""
Normalization of the style model's free-text reply.

The model is told to answer with JSON only, but it regularly wraps the object
in a markdown code block. Both helpers are pure functions.
"""

import json
import logging
import re
from typing import Any, Optional

from priisme.core.exceptions import AnalysisParseError, EmptyAnalysisError

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def strip_code_fences(content: str) -> str:
    """Remove ```json / ``` markers anywhere in the text and trim whitespace"""
    if "```" not in content:
        return content.strip()
    return _FENCE.sub("", _JSON_FENCE.sub("", content)).strip()


def parse_analysis_content(content: Optional[str]) -> Any:
    """Parse the model reply into a JSON value.

    Raises EmptyAnalysisError when there is no content (no parsing is
    attempted) and AnalysisParseError, carrying the original text, when the
    stripped text is not valid JSON.
    """
    if not content:
        raise EmptyAnalysisError()

    try:
        return json.loads(strip_code_fences(content), parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"Failed to parse AI response as JSON: {e} - raw: {content}")
        raise AnalysisParseError(raw=content)
