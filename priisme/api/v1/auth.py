from fastapi import APIRouter, Depends
from pymongo.database import Database
from datetime import datetime
import logging

from priisme.api.deps import get_db, get_current_active_user
from priisme.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from priisme.models.user import UserModel
from priisme.core.config import settings
from priisme.core.exceptions import bad_request, unauthorized
from priisme.core.security import verify_password, hash_password, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()

def _auth_response(user_id: str, user: dict, is_new_user: bool = False) -> AuthResponse:
    user_response = UserResponse(
        id=user_id,
        email=user["email"],
        username=user["username"],
        name=user.get("name"),
        created_at=user.get("created_at", datetime.utcnow()),
        last_login=user.get("last_login"),
        is_active=user.get("is_active", True)
    )

    return AuthResponse(
        access_token=create_access_token(user_id),
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user=user_response,
        is_new_user=is_new_user
    )

@router.post("/register", response_model=AuthResponse)
async def register(
    user_data: UserCreate,
    db: Database = Depends(get_db)
):
    """Register new user"""

    existing_user = db.users.find_one({"email": user_data.email})

    if existing_user:
        raise bad_request("Email already registered")

    new_user = UserModel(
        email=user_data.email,
        username=user_data.username,
        name=user_data.name,
        password_hash=hash_password(user_data.password),
        created_at=datetime.utcnow()
    )

    result = db.users.insert_one(new_user.model_dump(by_alias=True))
    logger.info(f"Registered user {result.inserted_id}")

    return _auth_response(str(result.inserted_id), new_user.model_dump(), is_new_user=True)

@router.post("/login", response_model=AuthResponse)
async def login(
    user_credentials: UserLogin,
    db: Database = Depends(get_db)
):
    """User login"""

    user = db.users.find_one({"email": user_credentials.email})

    if not user or not user.get("password_hash") or not verify_password(user_credentials.password, user["password_hash"]):
        raise unauthorized("Incorrect email or password")

    if not user.get("is_active", True):
        raise bad_request("Account is deactivated")

    last_login = datetime.utcnow()
    db.users.update_one(
        {"_id": user["_id"]},
        {"$set": {"last_login": last_login}}
    )
    user["last_login"] = last_login

    return _auth_response(str(user["_id"]), user)

@router.get("/me", response_model=UserResponse)
async def read_current_user(
    current_user: UserModel = Depends(get_current_active_user)
):
    """Get the authenticated user"""
    return UserResponse(
        id=str(current_user.id),
        email=current_user.email,
        username=current_user.username,
        name=current_user.name,
        created_at=current_user.created_at,
        last_login=current_user.last_login,
        is_active=current_user.is_active
    )
