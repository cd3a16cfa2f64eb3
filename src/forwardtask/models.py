"""Pydantic models for the ForwardTask API."""

from pydantic import BaseModel, Field


class MoveTaskRequest(BaseModel):
    """Request body for the /tasks/move endpoint."""

    path: str  # vault-relative path of the note holding the task
    line: int = Field(ge=0)  # 0-based line index of the task
    days_offset: int = 0  # 0 = today, 1 = tomorrow, ...
    relative: bool = False  # move to the day after the (daily) source note instead


class MoveTaskResponse(BaseModel):
    """Response body for the /tasks/move endpoint."""

    moved: bool
    message: str
    reason: str | None = None
    destination: str | None = None  # vault-relative path of the daily note
    next_line: int | None = None


class SectionHeaderSetting(BaseModel):
    """The section header tasks are inserted under ("" = end of note)."""

    section_header: str
