import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from priisme.client.api_client import StyleApiClient, StyleApiError
from priisme.client.auth import AuthContext
from priisme.client.intake import PhotoFile
from priisme.client.session import (
    AUTH_PATH,
    FALLBACK_FAILURE_MESSAGE,
    StyleAnalysisSession,
)


def history_record(personality, created_at, analysis=None):
    return {
        "id": f"id-{personality}",
        "style_personality": personality,
        "created_at": created_at,
        "full_analysis": analysis or {"style_personality": personality},
    }

@pytest.fixture
def api():
    api = MagicMock(spec=StyleApiClient)
    api.analyze_style = AsyncMock()
    api.save_analysis = AsyncMock(return_value={})
    api.list_analyses = AsyncMock(return_value=[])
    return api

@pytest.fixture
def auth():
    return AuthContext(user_id="64b7f0c2a1b2c3d4e5f60718", access_token="token", email="me@example.com")

@pytest.fixture
def notices():
    return []

@pytest.fixture
def navigation():
    return []

@pytest.fixture
def session(api, auth, notices, navigation):
    return StyleAnalysisSession(api, auth=auth, notify=notices.append, navigate=navigation.append)


class TestAnalysisFlow:
    """Test the analyze, show and save sequence"""

    @pytest.mark.asyncio
    async def test_signed_out_user_is_redirected(self, api, notices, navigation):
        session = StyleAnalysisSession(api, auth=None, notify=notices.append, navigate=navigation.append)

        await session.handle_photo_select("data:image/jpeg;base64,abc")

        assert navigation == [AUTH_PATH]
        assert notices[0].title == "Sign in required"
        assert notices[0].variant == "destructive"
        api.analyze_style.assert_not_called()
        assert session.is_analyzing is False

    @pytest.mark.asyncio
    async def test_success_shows_result_and_saves(self, session, api, auth, notices, sample_analysis):
        flags = []

        async def analyze(image):
            flags.append(session.is_analyzing)
            return sample_analysis

        api.analyze_style.side_effect = analyze

        await session.handle_photo_select("data:image/jpeg;base64,abc")
        assert session.is_analyzing is False
        assert session.analysis == sample_analysis
        assert notices[-1].title == "Analysis Complete!"

        await session.wait_for_pending_saves()

        assert flags == [True]
        api.save_analysis.assert_awaited_once_with(auth, sample_analysis)
        api.list_analyses.assert_awaited()

    @pytest.mark.asyncio
    async def test_failure_releases_flag(self, session, api, notices):
        api.analyze_style.side_effect = StyleApiError("Rate limit exceeded. Please try again in a moment.", 429)

        await session.handle_photo_select("data:image/jpeg;base64,abc")

        assert session.is_analyzing is False
        assert session.analysis is None
        assert notices[-1].title == "Analysis Failed"
        assert notices[-1].description == "Rate limit exceeded. Please try again in a moment."
        assert notices[-1].variant == "destructive"
        api.save_analysis.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_without_message(self, session, api, notices):
        api.analyze_style.side_effect = RuntimeError()

        await session.handle_photo_select("data:image/jpeg;base64,abc")

        assert notices[-1].description == FALLBACK_FAILURE_MESSAGE

    @pytest.mark.asyncio
    async def test_save_failure_is_not_shown(self, session, api, notices, sample_analysis):
        api.analyze_style.return_value = sample_analysis
        api.save_analysis.side_effect = StyleApiError("Could not validate credentials", 401)

        await session.handle_photo_select("data:image/jpeg;base64,abc")
        await session.wait_for_pending_saves()

        assert session.analysis == sample_analysis
        assert [notice.title for notice in notices] == ["Analysis Complete!"]
        api.list_analyses.assert_not_called()

    @pytest.mark.asyncio
    async def test_photo_from_intake_is_analyzed(self, session, api, sample_analysis):
        api.analyze_style.return_value = sample_analysis
        photo = PhotoFile(filename="me.jpg", content_type="image/jpeg", data=b"\xff\xd8")

        assert await session.intake.select_file(photo) is True
        await session.wait_for_pending_saves()

        api.analyze_style.assert_awaited_once_with(photo.to_data_uri())
        assert session.analysis == sample_analysis

    @pytest.mark.asyncio
    async def test_intake_locked_while_analyzing(self, session, api, sample_analysis):
        photo = PhotoFile(filename="me.jpg", content_type="image/jpeg", data=b"\xff\xd8")
        second = PhotoFile(filename="again.jpg", content_type="image/jpeg", data=b"\xff\xd9")
        accepted = []

        async def analyze(image):
            accepted.append(await session.intake.select_file(second))
            return sample_analysis

        api.analyze_style.side_effect = analyze

        await session.intake.select_file(photo)
        await session.wait_for_pending_saves()

        assert accepted == [False]
        api.analyze_style.assert_awaited_once()

    def test_start_new_analysis(self, session, sample_analysis):
        session.analysis = sample_analysis

        session.start_new_analysis()

        assert session.analysis is None


class TestHistory:
    @pytest.mark.asyncio
    async def test_newest_record_is_shown(self, session, api):
        newest = history_record("edgy", datetime(2024, 3, 2))
        older = history_record("classic", datetime(2024, 3, 1))
        api.list_analyses.return_value = [newest, older]

        await session.load_history()

        assert session.previous_analyses == [newest, older]
        assert session.analysis == newest["full_analysis"]

    @pytest.mark.asyncio
    async def test_active_analysis_is_kept(self, session, api, sample_analysis):
        api.list_analyses.return_value = [history_record("edgy", datetime(2024, 3, 2))]
        session.analysis = sample_analysis

        await session.load_history()

        assert session.analysis == sample_analysis

    @pytest.mark.asyncio
    async def test_history_limit(self, session, api, auth):
        await session.load_history()

        api.list_analyses.assert_awaited_once_with(auth, limit=5)

    @pytest.mark.asyncio
    async def test_history_failure_is_swallowed(self, session, api):
        api.list_analyses.side_effect = StyleApiError("Internal server error", 500)

        await session.load_history()

        assert session.previous_analyses == []
        assert session.analysis is None

    @pytest.mark.asyncio
    async def test_signed_out_history_is_empty(self, api):
        session = StyleAnalysisSession(api)

        await session.load_history()

        api.list_analyses.assert_not_called()

    def test_select_previous(self, session):
        record = history_record("romantic", datetime(2024, 3, 1))

        session.select_previous(record)

        assert session.analysis == {"style_personality": "romantic"}

    def test_history_preview(self, session):
        session.previous_analyses = [
            history_record(name, datetime(2024, 3, day))
            for day, name in enumerate(["edgy", "classic", "sporty", "artistic"], start=1)
        ]

        items = session.history_preview

        assert [item.label for item in items] == ["Edgy Style", "Classic Style", "Sporty Style"]
        assert items[0].date == "3/1/2024"
