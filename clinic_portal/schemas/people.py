"""Person schedule preview API schemas."""

import datetime
from typing import Literal

from clinic_portal.application.dtos.schedule import PersonPreview
from clinic_portal.schemas.base import CamelModel


class DutyResponse(CamelModel):
    id: int
    date: datetime.date
    service_type: str
    notes: str | None = None


class WorkplaceResponse(CamelModel):
    """Effective workplace on one date (weekly plan or day override)."""

    date: datetime.date
    room_id: int
    label: str
    assignment_type: str
    source: Literal["plan", "override"]


class AbsenceResponse(CamelModel):
    id: int
    source: Literal["planned", "long_term"]
    start_date: datetime.date
    end_date: datetime.date
    reason: str
    status: str
    notes: str | None = None


class PreviewVisibilityResponse(CamelModel):
    absences: bool = False


class PersonPreviewResponse(CamelModel):
    """Response for GET /people/{employee_id}/preview.

    days lists every requested date, even when the preview is empty.
    """

    employee_id: int | None = None
    days: list[datetime.date]
    duties: list[DutyResponse]
    workplaces: list[WorkplaceResponse]
    absences: list[AbsenceResponse]
    visibility: PreviewVisibilityResponse

    @classmethod
    def from_dto(cls, preview: PersonPreview) -> "PersonPreviewResponse":
        return cls(
            employee_id=preview.employee_id,
            days=list(preview.days),
            duties=[
                DutyResponse(
                    id=d.id, date=d.date, service_type=d.service_type, notes=d.notes
                )
                for d in preview.duties
            ],
            workplaces=[
                WorkplaceResponse(
                    date=w.date,
                    room_id=w.room_id,
                    label=w.label,
                    assignment_type=w.assignment_type,
                    source=w.source,
                )
                for w in preview.workplaces
            ],
            absences=[
                AbsenceResponse(
                    id=a.id,
                    source=a.source,
                    start_date=a.start_date,
                    end_date=a.end_date,
                    reason=a.reason,
                    status=a.status,
                    notes=a.notes,
                )
                for a in preview.absences
            ],
            visibility=PreviewVisibilityResponse(absences=preview.absences_visible),
        )
