from typing import Optional

from app.schemas.base import CamelModel

class LoginRequest(CamelModel):
    token: Optional[str] = None

class AuthUser(CamelModel):
    id: str
    name: str
    email: str
    role: str = "user"

class AuthResponse(CamelModel):
    user: AuthUser
