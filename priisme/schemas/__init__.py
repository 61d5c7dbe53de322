from .user import UserCreate, UserLogin, UserResponse, AuthResponse
from .style_analysis import (
    AnalyzeStyleResponse, StyleAnalysisCreate, StyleAnalysisResponse, RECORD_FIELDS
)

__all__ = [
    # User schemas
    "UserCreate", "UserLogin", "UserResponse", "AuthResponse",
    # Style analysis schemas
    "AnalyzeStyleResponse", "StyleAnalysisCreate", "StyleAnalysisResponse", "RECORD_FIELDS"
]
