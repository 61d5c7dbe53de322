import httpx
from typing import Any, Dict, List, Mapping, Optional
import logging

from priisme.core.config import settings
from priisme.client.auth import AuthContext
from priisme.schemas.style_analysis import StyleAnalysisCreate

logger = logging.getLogger(__name__)


class StyleApiError(Exception):
    """Error returned by the backend, carrying its `error` message"""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class StyleApiClient:
    """Async HTTP client for the analysis proxy and the style history API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 120.0
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def login(self, email: str, password: str) -> AuthContext:
        response = await self.client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password}
        )
        data = self._read(response)
        return AuthContext(
            user_id=data["user"]["id"],
            access_token=data["access_token"],
            email=data["user"]["email"]
        )

    async def analyze_style(self, image_base64: str) -> Any:
        """Call the analysis proxy and return its `analysis` object"""
        response = await self.client.post(
            "/api/v1/analyze-style",
            json={"imageBase64": image_base64}
        )
        data = self._read(response)
        return data.get("analysis")

    async def save_analysis(self, auth: AuthContext, analysis: Mapping[str, Any]) -> Dict[str, Any]:
        payload = StyleAnalysisCreate.from_analysis(analysis)
        response = await self.client.post(
            "/api/v1/style-analyses/",
            json=payload.model_dump(mode="json"),
            headers=auth.headers
        )
        return self._read(response)

    async def list_analyses(self, auth: AuthContext, limit: int = 5) -> List[Dict[str, Any]]:
        response = await self.client.get(
            "/api/v1/style-analyses/",
            params={"limit": limit},
            headers=auth.headers
        )
        return self._read(response)

    async def aclose(self):
        await self.client.aclose()

    @staticmethod
    def _read(response: httpx.Response) -> Any:
        """Decode the JSON body, raising StyleApiError for `{error}` bodies and non-2xx"""
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and data.get("error"):
            raise StyleApiError(str(data["error"]), status_code=response.status_code, payload=data)

        if response.is_error:
            raise StyleApiError(
                f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                payload=data
            )

        if data is None:
            raise StyleApiError("Response was not valid JSON", status_code=response.status_code)

        return data
