import json
import httpx
import pytest

from priisme.client.api_client import StyleApiClient, StyleApiError
from priisme.client.auth import AuthContext


def make_api(handler):
    transport = httpx.MockTransport(handler)
    client = httpx.AsyncClient(transport=transport, base_url="http://backend.test")
    return StyleApiClient(base_url="http://backend.test", client=client)

@pytest.fixture
def auth():
    return AuthContext(user_id="64b7f0c2a1b2c3d4e5f60718", access_token="token-123")


@pytest.mark.asyncio
async def test_analyze_style(sample_analysis):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"analysis": sample_analysis})

    api = make_api(handler)
    result = await api.analyze_style("data:image/jpeg;base64,abc")
    await api.aclose()

    assert result == sample_analysis
    assert requests[0].url.path == "/api/v1/analyze-style"
    assert json.loads(requests[0].content) == {"imageBase64": "data:image/jpeg;base64,abc"}

@pytest.mark.asyncio
async def test_error_body_becomes_exception():
    api = make_api(lambda request: httpx.Response(
        429, json={"error": "Rate limit exceeded. Please try again in a moment."}
    ))

    with pytest.raises(StyleApiError) as exc_info:
        await api.analyze_style("abc")

    assert str(exc_info.value) == "Rate limit exceeded. Please try again in a moment."
    assert exc_info.value.status_code == 429

@pytest.mark.asyncio
async def test_parse_failure_keeps_raw():
    payload = {"error": "Failed to parse analysis results", "raw": "not json"}
    api = make_api(lambda request: httpx.Response(500, json=payload))

    with pytest.raises(StyleApiError) as exc_info:
        await api.analyze_style("abc")

    assert exc_info.value.payload == payload

@pytest.mark.asyncio
async def test_non_json_error():
    api = make_api(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(StyleApiError) as exc_info:
        await api.analyze_style("abc")

    assert exc_info.value.status_code == 502

@pytest.mark.asyncio
async def test_save_analysis_sends_record(auth, sample_analysis):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(201, json={"id": "abc"})

    api = make_api(handler)
    await api.save_analysis(auth, sample_analysis)

    request = requests[0]
    assert request.url.path == "/api/v1/style-analyses/"
    assert request.headers["authorization"] == "Bearer token-123"
    body = json.loads(request.content)
    assert body["face_shape"] == "oval"
    assert body["makeup_recommendations"] == sample_analysis["makeup_recommendations"]
    assert body["full_analysis"] == sample_analysis

@pytest.mark.asyncio
async def test_list_analyses(auth):
    def handler(request):
        assert request.url.params["limit"] == "5"
        assert request.headers["authorization"] == "Bearer token-123"
        return httpx.Response(200, json=[{"id": "a"}])

    api = make_api(handler)

    assert await api.list_analyses(auth, limit=5) == [{"id": "a"}]

@pytest.mark.asyncio
async def test_login():
    def handler(request):
        return httpx.Response(200, json={
            "access_token": "jwt",
            "token_type": "bearer",
            "expires_in": 1800,
            "user": {"id": "u1", "email": "me@example.com", "username": "me"},
        })

    api = make_api(handler)
    auth = await api.login("me@example.com", "password123")

    assert auth.user_id == "u1"
    assert auth.headers == {"Authorization": "Bearer jwt"}

@pytest.mark.asyncio
async def test_save_analysis_with_string_colors(auth):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(201, json={"id": "abc"})

    api = make_api(handler)
    await api.save_analysis(auth, {"recommended_colors": "navy"})

    body = json.loads(requests[0].content)
    assert body["recommended_colors"] == "navy"
    assert body["full_analysis"] == {"recommended_colors": "navy"}
