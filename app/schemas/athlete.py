from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel

class AthleteBase(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class AthleteCreate(AthleteBase):
    pass

class AthleteUpdate(AthleteBase):
    pass

class AthleteSummary(CamelModel):
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

class AthleteResponse(AthleteSummary):
    login_token: Optional[str] = None
