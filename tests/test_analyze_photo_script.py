import argparse
import importlib.util
from pathlib import Path

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from priisme.client.api_client import StyleApiError

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "analyze_photo.py"


@pytest.fixture(scope="module")
def analyze_photo():
    spec = importlib.util.spec_from_file_location("analyze_photo", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def make_args(**overrides):
    values = {
        "photo": "me.jpg",
        "email": "me@example.com",
        "password": "password123",
        "api_url": "http://backend.test",
        "history": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)

def make_api(login_error):
    api = MagicMock()
    api.login = AsyncMock(side_effect=login_error)
    api.aclose = AsyncMock()
    return api


@pytest.mark.asyncio
@pytest.mark.parametrize("login_error", [
    StyleApiError("Incorrect email or password", 401),
    httpx.ConnectError("connection refused"),
])
async def test_sign_in_failure_is_reported(analyze_photo, capsys, login_error):
    api = make_api(login_error)

    with patch.object(analyze_photo, "StyleApiClient", return_value=api):
        exit_code = await analyze_photo.run(make_args())

    assert exit_code == 1
    assert capsys.readouterr().out.startswith("✗ Sign-in failed:")
    api.aclose.assert_awaited_once()
