"""
Password hashing and bearer tokens for the style history API.

Only short-lived access tokens are issued; signing in again is the way to get
a new one.
"""

from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from priisme.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only reads the first 72 bytes and newer backends raise past that
_BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> str:
    clipped = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    return clipped.decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    return pwd_context.hash(_bcrypt_input(password))

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(_bcrypt_input(password), password_hash)

def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": str(user_id), "exp": datetime.utcnow() + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Optional[str]:
    """User id carried by a valid, unexpired token, else None"""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    user_id = claims.get("sub")
    return user_id if isinstance(user_id, str) else None
