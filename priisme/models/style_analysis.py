from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List
from datetime import datetime
from enum import Enum
from .user import PyObjectId


class FaceShape(str, Enum):
    OVAL = "oval"
    ROUND = "round"
    SQUARE = "square"
    HEART = "heart"
    OBLONG = "oblong"
    DIAMOND = "diamond"

class SkinTone(str, Enum):
    FAIR = "fair"
    LIGHT = "light"
    MEDIUM = "medium"
    OLIVE = "olive"
    TAN = "tan"
    DARK = "dark"
    DEEP = "deep"

class SkinUndertone(str, Enum):
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"

class BodyType(str, Enum):
    HOURGLASS = "hourglass"
    PEAR = "pear"
    APPLE = "apple"
    RECTANGLE = "rectangle"
    INVERTED_TRIANGLE = "inverted_triangle"

class StylePersonality(str, Enum):
    CLASSIC = "classic"
    BOHEMIAN = "bohemian"
    MINIMALIST = "minimalist"
    GLAMOROUS = "glamorous"
    EDGY = "edgy"
    ROMANTIC = "romantic"
    SPORTY = "sporty"
    ARTISTIC = "artistic"


CLOTHING_CATEGORIES = ["tops", "bottoms", "dresses", "outerwear", "accessories"]
MAKEUP_CATEGORIES = ["foundation", "lips", "eyes", "blush"]

# Documented value sets, checked (but never enforced) on model output
ENUM_FIELDS = {
    "face_shape": FaceShape,
    "skin_tone": SkinTone,
    "skin_undertone": SkinUndertone,
    "body_type": BodyType,
    "style_personality": StylePersonality,
}


class ClothingRecommendation(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None  # "tops", "bottoms", "dresses", "outerwear", "accessories"
    suggestions: List[str] = []

class MakeupRecommendation(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None  # "foundation", "lips", "eyes", "blush"
    suggestion: Optional[str] = None

class StyleAnalysis(BaseModel):
    """Style profile produced by the external model.

    The payload is untrusted: every field is optional, enum-like fields stay
    plain strings and unknown keys are kept.
    """
    model_config = ConfigDict(extra="allow")

    face_shape: Optional[str] = None
    skin_tone: Optional[str] = None
    skin_undertone: Optional[str] = None
    body_type: Optional[str] = None
    style_personality: Optional[str] = None
    recommended_colors: List[str] = []
    avoid_colors: List[str] = []
    clothing_recommendations: List[ClothingRecommendation] = []
    hairstyle_recommendations: List[str] = []
    makeup_recommendations: List[MakeupRecommendation] = []
    overall_summary: Optional[str] = None

    def unrecognized_values(self) -> Dict[str, str]:
        """Enum-like fields whose value is outside the documented set"""
        unknown = {}
        for field_name, enum_cls in ENUM_FIELDS.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if value not in {member.value for member in enum_cls}:
                unknown[field_name] = value

        for field_name, categories in (
            ("clothing_recommendations", CLOTHING_CATEGORIES),
            ("makeup_recommendations", MAKEUP_CATEGORIES),
        ):
            extra_types = [rec.type for rec in getattr(self, field_name) if rec.type not in categories]
            if extra_types:
                unknown[field_name] = ", ".join(str(t) for t in extra_types)
        return unknown


class StyleAnalysisModel(BaseModel):
    """Persisted style analysis, one document per completed analysis.

    Records are immutable once written; there is no update or delete path.
    """
    model_config = {"arbitrary_types_allowed": True, "populate_by_name": True}

    id: PyObjectId = Field(default_factory=PyObjectId, alias="_id")
    user_id: PyObjectId
    # The photo itself is never stored
    photo_url: str = "stored_locally"

    face_shape: Optional[Any] = None
    skin_tone: Optional[Any] = None
    skin_undertone: Optional[Any] = None
    body_type: Optional[Any] = None
    style_personality: Optional[Any] = None
    # Kept in whatever shape the model returned
    recommended_colors: Any = []
    avoid_colors: Any = []
    clothing_recommendations: Any = []
    hairstyle_recommendations: Any = []
    makeup_recommendations: Any = []

    full_analysis: Dict[str, Any] = {}

    created_at: datetime = Field(default_factory=datetime.utcnow)
