from typing import Any, Dict, List
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database
import logging

from priisme.models.style_analysis import StyleAnalysisModel
from priisme.schemas.style_analysis import StyleAnalysisCreate, StyleAnalysisResponse
from priisme.utils.date_utils import get_utc_now

logger = logging.getLogger(__name__)


class StyleHistoryService:
    """User-scoped store of completed style analyses (insert and list only)"""

    collection_name = "style_analyses"

    def save_analysis(
        self,
        db: Database,
        user_id: str,
        analysis_data: StyleAnalysisCreate
    ) -> StyleAnalysisResponse:
        record = StyleAnalysisModel(
            user_id=ObjectId(str(user_id)),
            created_at=get_utc_now(),
            **analysis_data.model_dump()
        )
        document = record.model_dump(by_alias=True)
        result = db[self.collection_name].insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(f"Saved style analysis {result.inserted_id} for user {user_id}")
        return self._to_response(document)

    def get_recent_analyses(
        self,
        db: Database,
        user_id: str,
        limit: int = 5
    ) -> List[StyleAnalysisResponse]:
        cursor = db[self.collection_name].find(
            {"user_id": ObjectId(str(user_id))}
        ).sort("created_at", DESCENDING).limit(limit)
        return [self._to_response(document) for document in cursor]

    @staticmethod
    def _to_response(document: Dict[str, Any]) -> StyleAnalysisResponse:
        return StyleAnalysisResponse(
            id=str(document["_id"]),
            user_id=str(document["user_id"]),
            photo_url=document.get("photo_url", "stored_locally"),
            face_shape=document.get("face_shape"),
            skin_tone=document.get("skin_tone"),
            skin_undertone=document.get("skin_undertone"),
            body_type=document.get("body_type"),
            style_personality=document.get("style_personality"),
            recommended_colors=document.get("recommended_colors") or [],
            avoid_colors=document.get("avoid_colors") or [],
            clothing_recommendations=document.get("clothing_recommendations") or [],
            hairstyle_recommendations=document.get("hairstyle_recommendations") or [],
            makeup_recommendations=document.get("makeup_recommendations") or [],
            full_analysis=document.get("full_analysis") or {},
            created_at=document["created_at"]
        )


style_history_service = StyleHistoryService()
