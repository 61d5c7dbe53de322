from pydantic import BaseModel, field_validator
from typing import Optional, Dict, Any, Mapping
from datetime import datetime

# Fields copied out of the full analysis into their own record columns
RECORD_FIELDS = (
    "face_shape",
    "skin_tone",
    "skin_undertone",
    "body_type",
    "style_personality",
    "recommended_colors",
    "avoid_colors",
    "clothing_recommendations",
    "hairstyle_recommendations",
    "makeup_recommendations",
)

class AnalyzeStyleResponse(BaseModel):
    analysis: Any

class StyleAnalysisCreate(BaseModel):
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
    full_analysis: Dict[str, Any]

    @field_validator(
        'recommended_colors', 'avoid_colors', 'clothing_recommendations',
        'hairstyle_recommendations', 'makeup_recommendations',
        mode='before'
    )
    def none_as_empty(cls, v):
        return [] if v is None else v

    @classmethod
    def from_analysis(cls, analysis: Mapping[str, Any]) -> "StyleAnalysisCreate":
        """Build the insert payload: every structured field plus the full object"""
        fields = {name: analysis.get(name) for name in RECORD_FIELDS}
        return cls(**fields, full_analysis=dict(analysis))

class StyleAnalysisResponse(BaseModel):
    id: str
    user_id: str
    photo_url: str
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
    full_analysis: Dict[str, Any]
    created_at: datetime
