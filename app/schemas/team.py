from datetime import datetime
from typing import List, Optional

from app.schemas.athlete import AthleteSummary
from app.schemas.base import CamelModel
from app.schemas.workout import WorkoutResponse

class TeamBase(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None

class TeamCreate(TeamBase):
    pass

class TeamUpdate(TeamBase):
    pass

class TeamResponse(TeamBase):
    id: str
    name: str
    created_at: Optional[datetime] = None
    athletes: List[AthleteSummary] = []
    workouts: List[WorkoutResponse] = []

class TeamAthleteAdd(CamelModel):
    athlete_id: Optional[str] = None
