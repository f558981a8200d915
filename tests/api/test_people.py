"""GET /api/v1/people/{employee_id}/preview with an in-memory schedule reader."""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from clinic_portal.api.v1.dependencies import (
    get_authorization_service,
    get_current_caller,
    get_person_preview_service,
)
from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.dtos.schedule import (
    AbsenceRecord,
    DutyRecord,
    EmployeeProfile,
    WeeklyAssignment,
)
from clinic_portal.application.use_cases.person_preview import PersonPreviewService
from clinic_portal.domain.enums import RoleGroup


def _reader() -> AsyncMock:
    reader = AsyncMock()
    reader.get_employee = AsyncMock(
        side_effect=lambda employee_id: EmployeeProfile(id=employee_id, role="Oberarzt")
        if employee_id == 42
        else None
    )
    reader.get_weekly_assignments = AsyncMock(
        return_value=[
            WeeklyAssignment(
                plan_year=2025, plan_week=2, weekday=1, room_id=4, room_label="OP 1"
            )
        ]
    )
    reader.get_daily_overrides = AsyncMock(return_value=[])
    reader.get_duties = AsyncMock(
        return_value=[DutyRecord(id=8, date=date(2025, 1, 7), service_type="Nachtdienst")]
    )
    reader.get_absences = AsyncMock(
        return_value=[
            AbsenceRecord(
                id=3,
                source="long_term",
                employee_id=42,
                start_date=date(2025, 1, 1),
                end_date=date(2025, 1, 6),
                reason="Fortbildung",
                status="Genehmigt",
            )
        ]
    )
    return reader


@pytest.fixture
def preview_backend(overrides, caller):
    reader = _reader()
    overrides[get_current_caller] = lambda: caller
    overrides[get_person_preview_service] = lambda: PersonPreviewService(schedule_reader=reader)
    return overrides


async def test_preview_response_shape(client: AsyncClient, preview_backend) -> None:
    response = await client.get(
        "/api/v1/people/42/preview", params={"days": "2", "start": "2025-01-06"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["employeeId"] == 42
    assert data["days"] == ["2025-01-06", "2025-01-07"]
    assert data["duties"] == [
        {"id": 8, "date": "2025-01-07", "serviceType": "Nachtdienst", "notes": None}
    ]
    assert data["workplaces"] == [
        {
            "date": "2025-01-06",
            "roomId": 4,
            "label": "OP 1",
            "assignmentType": "Plan",
            "source": "plan",
        }
    ]
    assert [a["id"] for a in data["absences"]] == [3]
    assert data["absences"][0]["source"] == "long_term"
    assert data["visibility"] == {"absences": True}


async def test_absences_masked(client: AsyncClient, preview_backend) -> None:
    preview_backend[get_current_caller] = lambda: AuthorizationContext(
        employee_id=1, visible_role_groups=frozenset({RoleGroup.SEK})
    )
    response = await client.get(
        "/api/v1/people/42/preview", params={"days": "2", "start": "2025-01-06"}
    )
    data = response.json()
    assert data["absences"] == []
    assert data["visibility"] == {"absences": False}
    assert data["workplaces"]


@pytest.mark.parametrize("employee_id", ["abc", "999"])
async def test_unknown_or_malformed_id_returns_empty_preview(
    client: AsyncClient, preview_backend, employee_id: str
) -> None:
    response = await client.get(
        f"/api/v1/people/{employee_id}/preview",
        params={"days": "3", "start": "2025-01-06"},
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data["days"]) == 3
    assert data["duties"] == [] and data["workplaces"] == [] and data["absences"] == []


async def test_days_clamped_and_bad_start_defaults(client: AsyncClient, preview_backend) -> None:
    response = await client.get(
        "/api/v1/people/42/preview", params={"days": "500", "start": "gestern"}
    )
    assert response.status_code == 200
    assert len(response.json()["days"]) == 21


async def test_preview_requires_authentication(client: AsyncClient, overrides) -> None:
    overrides[get_authorization_service] = lambda: AsyncMock()
    overrides[get_person_preview_service] = lambda: PersonPreviewService(schedule_reader=_reader())
    response = await client.get("/api/v1/people/42/preview")
    assert response.status_code == 401


async def test_start_at_calendar_end_is_not_a_server_error(
    client: AsyncClient, preview_backend
) -> None:
    response = await client.get(
        "/api/v1/people/42/preview", params={"days": "14", "start": "9999-12-31"}
    )
    assert response.status_code == 200
    assert response.json()["days"] == ["9999-12-31"]
