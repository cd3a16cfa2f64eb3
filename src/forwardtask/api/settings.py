"""Settings API endpoints for the user-configurable section header."""

from __future__ import annotations

from fastapi import APIRouter

from forwardtask.api.dependencies import get_data_path
from forwardtask.models import SectionHeaderSetting
from forwardtask.settings import get_section_header, set_section_header

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("/section-header", response_model=SectionHeaderSetting)
async def read_section_header() -> SectionHeaderSetting:
    """Return the configured section header."""
    return SectionHeaderSetting(section_header=get_section_header(get_data_path()))


@router.put("/section-header", response_model=SectionHeaderSetting)
async def update_section_header(body: SectionHeaderSetting) -> SectionHeaderSetting:
    """Replace the section header. An empty value appends tasks at the end of the note."""
    header = set_section_header(get_data_path(), body.section_header)
    return SectionHeaderSetting(section_header=header)
