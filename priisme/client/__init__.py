from .auth import AuthContext
from .api_client import StyleApiClient, StyleApiError
from .intake import PhotoFile, PhotoIntake
from .rendering import StyleResultsView, build_style_results, build_history_items, render_text
from .session import Notice, StyleAnalysisSession

__all__ = [
    "AuthContext",
    "StyleApiClient",
    "StyleApiError",
    "PhotoFile",
    "PhotoIntake",
    "StyleResultsView",
    "build_style_results",
    "build_history_items",
    "render_text",
    "Notice",
    "StyleAnalysisSession"
]
