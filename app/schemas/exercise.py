from typing import Optional

from app.schemas.base import CamelModel

class ExerciseBase(CamelModel):
    name: Optional[str] = None
    video_url: Optional[str] = None
    category: Optional[str] = None
    instructions: Optional[str] = None

class ExerciseCreate(ExerciseBase):
    pass

class ExerciseUpdate(ExerciseBase):
    pass

class ExerciseResponse(ExerciseBase):
    id: str
    name: str
