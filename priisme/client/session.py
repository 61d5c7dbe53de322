import asyncio
from typing import Any, Callable, Dict, List, Optional, Set
import logging

from pydantic import BaseModel

from priisme.core.config import settings
from priisme.client.api_client import StyleApiClient
from priisme.client.auth import AuthContext
from priisme.client.intake import PhotoIntake
from priisme.client.rendering import HistoryItem, build_history_items

logger = logging.getLogger(__name__)

AUTH_PATH = "/auth"
FALLBACK_FAILURE_MESSAGE = "Please try again with a different photo."


class Notice(BaseModel):
    """Toast shown to the user"""
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"


def _log_notice(notice: Notice) -> None:
    level = logging.WARNING if notice.variant == "destructive" else logging.INFO
    logger.log(level, f"{notice.title}: {notice.description}")

def _log_navigation(path: str) -> None:
    logger.info(f"Redirecting to {path}")


class StyleAnalysisSession:
    """
    Client-side state of the style analysis page.

    Owns the photo intake, the active analysis, the analyzing flag and the
    history of saved analyses. The signed-in user is passed in explicitly;
    with no AuthContext every analysis attempt redirects to sign-in.
    """

    def __init__(
        self,
        api: StyleApiClient,
        auth: Optional[AuthContext] = None,
        notify: Callable[[Notice], None] = _log_notice,
        navigate: Callable[[str], None] = _log_navigation,
        history_limit: int = settings.STYLE_HISTORY_LIMIT
    ):
        self.api = api
        self.auth = auth
        self.notify = notify
        self.navigate = navigate
        self.history_limit = history_limit

        self.is_analyzing = False
        self.analysis: Optional[Any] = None
        self.previous_analyses: List[Dict[str, Any]] = []
        self._pending_saves: Set[asyncio.Task] = set()

        self.intake = PhotoIntake(
            on_photo_select=self.handle_photo_select,
            is_locked=lambda: self.is_analyzing
        )

    async def handle_photo_select(self, image_base64: str) -> None:
        if self.auth is None:
            self.notify(Notice(
                title="Sign in required",
                description="Please sign in to use AI Style Analysis",
                variant="destructive"
            ))
            self.navigate(AUTH_PATH)
            return

        self.is_analyzing = True
        self.analysis = None

        try:
            analysis_result = await self.api.analyze_style(image_base64)
            self.analysis = analysis_result

            self._schedule_save(self.auth, analysis_result)

            self.notify(Notice(
                title="Analysis Complete!",
                description="Your personalized style profile is ready."
            ))
        except Exception as e:
            logger.error(f"Analysis error: {e}")
            self.notify(Notice(
                title="Analysis Failed",
                description=str(e) or FALLBACK_FAILURE_MESSAGE,
                variant="destructive"
            ))
        finally:
            self.is_analyzing = False

    def start_new_analysis(self) -> None:
        self.analysis = None

    async def load_history(self) -> None:
        """Fetch the newest saved analyses; show the latest if nothing is active"""
        if self.auth is None:
            return

        try:
            records = await self.api.list_analyses(self.auth, limit=self.history_limit)
        except Exception as e:
            logger.error(f"Failed to load previous analyses: {e}")
            return

        self.previous_analyses = records
        if records and self.analysis is None:
            self.analysis = records[0].get("full_analysis")

    def select_previous(self, record: Dict[str, Any]) -> None:
        self.analysis = record.get("full_analysis")

    @property
    def history_preview(self) -> List[HistoryItem]:
        return build_history_items(self.previous_analyses)

    async def wait_for_pending_saves(self) -> None:
        if self._pending_saves:
            await asyncio.gather(*self._pending_saves)

    def _schedule_save(self, auth: AuthContext, analysis: Any) -> None:
        # Fire and forget: the result is already shown, saving must not block it
        task = asyncio.create_task(self._save_analysis(auth, analysis))
        self._pending_saves.add(task)
        task.add_done_callback(self._pending_saves.discard)

    async def _save_analysis(self, auth: AuthContext, analysis: Any) -> None:
        try:
            await self.api.save_analysis(auth, analysis)
        except Exception as e:
            logger.error(f"Failed to save analysis: {e}")
            return

        await self.load_history()
