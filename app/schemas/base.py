from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase; snake_case keys are accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def stringify(value: Any) -> Any:
    # Clients send weights and reps as numbers or strings; they are stored as text
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class SuccessResponse(BaseModel):
    success: bool = True
    message: str
