from pydantic import BaseModel, EmailStr, Field
from pydantic_core import core_schema
from typing import Optional, Any
from datetime import datetime
from bson import ObjectId


class PyObjectId(ObjectId):
    """ObjectId field that also accepts its 24 character hex form"""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(cls.coerce)

    @classmethod
    def coerce(cls, value: Any) -> ObjectId:
        if isinstance(value, ObjectId):
            return value
        if isinstance(value, str) and ObjectId.is_valid(value):
            return ObjectId(value)
        raise ValueError(f"Not an ObjectId: {value!r}")


class UserModel(BaseModel):
    """Account document in the `users` collection"""
    model_config = {"arbitrary_types_allowed": True, "populate_by_name": True}

    id: PyObjectId = Field(default_factory=PyObjectId, alias="_id")
    email: EmailStr
    username: str
    name: Optional[str] = None
    password_hash: Optional[str] = None
    is_active: bool = True

    created_at: datetime = Field(default_factory=datetime.utcnow)
    last_login: Optional[datetime] = None
