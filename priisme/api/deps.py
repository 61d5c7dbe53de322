from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pymongo.database import Database
from bson import ObjectId
from bson.errors import InvalidId
import logging

from priisme.database import get_database
from priisme.core.security import decode_access_token
from priisme.core.exceptions import bad_request, unauthorized
from priisme.models.user import UserModel
from priisme.services.style_analysis_service import StyleAnalysisService, style_analysis_service

logger = logging.getLogger(__name__)

security = HTTPBearer()

def get_db() -> Database:
    return get_database()

def get_style_analysis_service() -> StyleAnalysisService:
    return style_analysis_service

def _load_user(db: Database, user_id: str) -> Optional[UserModel]:
    try:
        user_data = db.users.find_one({"_id": ObjectId(user_id)})
    except InvalidId:
        return None
    if user_data is None:
        return None
    return UserModel(**user_data)

async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Database = Depends(get_db)
) -> UserModel:
    credentials_exception = unauthorized("Could not validate credentials")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        logger.error("Token verification failed - invalid or expired token")
        raise credentials_exception

    user = _load_user(db, user_id)
    if user is None:
        raise credentials_exception

    return user

async def get_current_active_user(
    current_user: UserModel = Depends(get_current_user)
) -> UserModel:
    if not current_user.is_active:
        raise bad_request("Inactive user")
    return current_user
