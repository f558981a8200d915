"""People API: per-person schedule preview."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from clinic_portal.api.v1.dependencies import get_current_caller, get_person_preview_service
from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.use_cases.person_preview import PersonPreviewService
from clinic_portal.schemas.people import PersonPreviewResponse
from clinic_portal.shared.utils import parse_iso_date

router = APIRouter()


@router.get("/{employee_id}/preview", response_model=PersonPreviewResponse)
async def person_preview(
    employee_id: str,
    caller: Annotated[AuthorizationContext, Depends(get_current_caller)],
    preview_svc: Annotated[PersonPreviewService, Depends(get_person_preview_service)],
    days: str | None = Query(
        None, description="Days to preview, 1..21 (default 14); out of range is clamped"
    ),
    start: str | None = Query(
        None, description="First day (YYYY-MM-DD); defaults to today in the clinic timezone"
    ),
) -> PersonPreviewResponse:
    """Duties, effective workplaces and (if permitted) absences for the coming days.

    Malformed or unknown employee ids yield an empty preview, not an error.
    """
    preview = await preview_svc.preview(
        caller, employee_id, days=days, start=parse_iso_date(start)
    )
    return PersonPreviewResponse.from_dto(preview)
