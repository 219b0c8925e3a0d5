"""Working Group Schemas: create/rename bodies and group payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GroupNameBody(BaseModel):
    """Body of create and rename; trimming/emptiness checked by the registry."""
    name: str


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GroupOverviewResponse(BaseModel):
    """Group management row."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    total_seconds: int
    total_formatted: str
    round_count: int
    has_rounds: bool


class GroupListResponse(BaseModel):
    groups: list[GroupOverviewResponse]
