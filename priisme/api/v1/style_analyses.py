from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
from typing import List
import logging

from priisme.api.deps import get_db, get_current_active_user
from priisme.core.config import settings
from priisme.models.user import UserModel
from priisme.schemas.style_analysis import StyleAnalysisCreate, StyleAnalysisResponse
from priisme.services.style_history_service import style_history_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/", response_model=StyleAnalysisResponse, status_code=status.HTTP_201_CREATED)
async def save_style_analysis(
    analysis_data: StyleAnalysisCreate,
    current_user: UserModel = Depends(get_current_active_user),
    db: Database = Depends(get_db)
):
    """Store a completed analysis for the current user"""
    return style_history_service.save_analysis(db, str(current_user.id), analysis_data)

@router.get("/", response_model=List[StyleAnalysisResponse])
async def get_style_analyses(
    limit: int = Query(settings.STYLE_HISTORY_LIMIT, ge=1, le=50),
    current_user: UserModel = Depends(get_current_active_user),
    db: Database = Depends(get_db)
):
    """Get the current user's analyses, newest first"""
    return style_history_service.get_recent_analyses(db, str(current_user.id), limit=limit)
