import os

# Settings are read at import time
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-priisme-unit-tests-0123456789")

import pytest
from unittest.mock import MagicMock, AsyncMock
from httpx import AsyncClient, ASGITransport

from priisme.main import app
from priisme.api.deps import get_db, get_current_active_user, get_style_analysis_service
from priisme.models.user import UserModel
from priisme.services.style_analysis_service import StyleAnalysisService

@pytest.fixture
def sample_analysis():
    return {
        "face_shape": "oval",
        "skin_tone": "medium",
        "skin_undertone": "warm",
        "body_type": "hourglass",
        "style_personality": "classic",
        "recommended_colors": ["navy", "cream", "forest green", "burgundy", "camel"],
        "avoid_colors": [],
        "clothing_recommendations": [
            {"type": "tops", "suggestions": ["wrap blouses", "fitted knits"]},
            {"type": "bottoms", "suggestions": ["high-waisted trousers", "pencil skirts"]},
            {"type": "dresses", "suggestions": ["wrap dresses", "sheath dresses"]},
            {"type": "outerwear", "suggestions": ["belted trench", "tailored blazer"]},
            {"type": "accessories", "suggestions": ["gold jewelry", "structured bags"]}
        ],
        "hairstyle_recommendations": ["long layers", "soft waves", "side-swept bangs"],
        "makeup_recommendations": [
            {"type": "foundation", "suggestion": "Warm-toned medium coverage"},
            {"type": "lips", "suggestion": "Brick red or warm nude"},
            {"type": "eyes", "suggestion": "Bronze and copper shadows"},
            {"type": "blush", "suggestion": "Peach or apricot"}
        ],
        "overall_summary": "You have a classic, balanced look. Warm earthy tones suit you best."
    }

@pytest.fixture
def mock_db():
    """Mock pymongo database for tests"""
    return MagicMock()

@pytest.fixture
def test_user():
    return UserModel(email="test@example.com", username="testuser")

@pytest.fixture
def style_service():
    """Style analysis service with the openai client replaced by a mock"""
    service = StyleAnalysisService(api_key="test-gateway-key", base_url="https://gateway.test/v1")
    service.client = MagicMock()
    service.client.chat.completions.create = AsyncMock()
    return service

@pytest.fixture
async def client(mock_db, style_service):
    """Create test client"""
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_style_analysis_service] = lambda: style_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()

@pytest.fixture
async def auth_client(client, test_user):
    """Test client whose requests are made as test_user"""
    app.dependency_overrides[get_current_active_user] = lambda: test_user
    yield client
