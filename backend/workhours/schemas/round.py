"""Round Schemas: start/stop bodies."""

from pydantic import BaseModel, Field


class RoundAction(BaseModel):
    """start/stop target. group_id is required for mutations."""
    group_id: int = Field(ge=1)
