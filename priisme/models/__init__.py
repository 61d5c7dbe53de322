from .user import UserModel, PyObjectId
from .style_analysis import (
    StyleAnalysis, StyleAnalysisModel, ClothingRecommendation, MakeupRecommendation,
    FaceShape, SkinTone, SkinUndertone, BodyType, StylePersonality
)

__all__ = [
    "UserModel", "PyObjectId",
    "StyleAnalysis", "StyleAnalysisModel", "ClothingRecommendation", "MakeupRecommendation",
    "FaceShape", "SkinTone", "SkinUndertone", "BodyType", "StylePersonality"
]
