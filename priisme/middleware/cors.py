from typing import Dict

from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import Response

from priisme.core.config import settings

ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]


def preflight_headers() -> Dict[str, str]:
    """Fixed CORS headers sent with every OPTIONS answer"""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(settings.CORS_ALLOW_HEADERS),
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    }


class PreflightCORSMiddleware(CORSMiddleware):
    """CORS middleware that answers every pre-flight with 204 and an empty body.

    Starlette rejects pre-flights asking for other headers or methods with a
    text/plain 400; here the browser always gets the fixed header set and
    decides for itself.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        return Response(status_code=204, headers=preflight_headers())
