"""Status & Stats Schemas: serialized view models for the dashboard and stats pages.

Invariants:
    - Field names mirror services.status_view dataclasses one to one
    - Formatted strings are always present; raw seconds kept for clients that compute
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GroupOptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    selected: bool


class AppStateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_id: int
    group_name: str
    is_running: bool
    last_start_time: datetime | None
    last_stop_time: datetime | None
    last_start_str: str
    last_stop_str: str
    current_round_id: int | None
    total_today_seconds: int
    total_today_formatted: str
    total_overall_seconds: int
    total_overall_formatted: str


class StatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_options: list[GroupOptionResponse]
    selected_group_id: int
    state: AppStateResponse
    all_groups_total_seconds: int
    all_groups_total_formatted: str


class DailySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_id: int
    group_name: str
    date: str
    date_display: str
    total_seconds: int
    total_formatted: str
    round_count: int


class GroupTotalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_id: int
    group_name: str
    total_seconds: int
    total_formatted: str


class StatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_options: list[GroupOptionResponse]
    selected_group_id: int
    selected_group_name: str
    daily_summaries: list[DailySummaryResponse]
    group_totals: list[GroupTotalResponse]
    selected_group_today_formatted: str
    selected_group_total_formatted: str
    all_groups_total_formatted: str
