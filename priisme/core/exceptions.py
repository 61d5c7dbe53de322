from typing import Any, Dict, Optional

from fastapi import HTTPException, status

class PriismeException(Exception):
    """Base exception for PRIISME API"""
    pass


class StyleAnalysisError(PriismeException):
    """Base class for analysis proxy failures.

    Each subclass fixes the HTTP status and user-facing message; the
    exception handler in main renders ``to_payload()`` as the JSON body.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Failed to analyze image"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}

class ImageMissingError(StyleAnalysisError):
    """Request body has no usable image"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "No image provided"

class InvalidRequestBodyError(StyleAnalysisError):
    """Request body is not decodable JSON"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request body"

class ServiceNotConfiguredError(StyleAnalysisError):
    """AI gateway credential is missing"""
    message = "AI service not configured"

class UpstreamRateLimitError(StyleAnalysisError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    message = "Rate limit exceeded. Please try again in a moment."

class UpstreamCreditsExhaustedError(StyleAnalysisError):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    message = "Service credits exhausted. Please try again later."

class UpstreamServiceError(StyleAnalysisError):
    """Any other non-success status from the AI gateway"""
    message = "Failed to analyze image"

class EmptyAnalysisError(StyleAnalysisError):
    message = "No analysis generated"

class AnalysisParseError(StyleAnalysisError):
    """Model reply could not be parsed as JSON; keeps the raw text"""
    message = "Failed to parse analysis results"

    def __init__(self, raw: str, message: Optional[str] = None):
        self.raw = raw
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "raw": self.raw}

# Common HTTP exceptions
def bad_request(detail: str = "Bad request"):
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail
    )

def unauthorized(detail: str = "Unauthorized"):
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )
