from .style_analysis_service import style_analysis_service
from .style_history_service import style_history_service

__all__ = [
    "style_analysis_service",
    "style_history_service"
]
