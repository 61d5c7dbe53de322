from typing import Dict
from pydantic import BaseModel


class AuthContext(BaseModel):
    """Signed-in user, passed explicitly into the client session"""
    user_id: str
    access_token: str
    email: str = ""

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}
