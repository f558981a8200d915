"""Personnel repository (implements IPersonnelReader and ICallerDirectory)."""

from __future__ import annotations

from sqlalchemy import select

from clinic_portal.application.dtos.records import CallerProfile, PersonRecord
from clinic_portal.infrastructure.persistence.models.employee import (
    Employee,
    EmployeePreferences,
)
from clinic_portal.infrastructure.persistence.repositories.base import BaseReader


def _role_groups(raw) -> tuple[str, ...] | None:
    """JSON list -> tuple of strings; anything that is not a list means no preference."""
    if not isinstance(raw, list):
        return None
    return tuple(str(value) for value in raw)


class PersonnelRepository(BaseReader):
    """Employee directory and caller profiles."""

    async def list_active_people(self) -> list[PersonRecord]:
        stmt = (
            select(Employee)
            .where(Employee.is_active.is_(True))
            .order_by(Employee.id)
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [
            PersonRecord(
                id=row.id,
                name=row.name,
                first_name=row.first_name,
                last_name=row.last_name,
                role=row.role,
                email=row.email,
                email_private=row.email_private,
                phone_work=row.phone_work,
                phone_private=row.phone_private,
                show_private_contact=row.show_private_contact,
            )
            for row in rows
        ]

    async def get_caller_profile(self, employee_id: int) -> CallerProfile | None:
        stmt = (
            select(Employee, EmployeePreferences.visible_role_groups)
            .outerjoin(
                EmployeePreferences, EmployeePreferences.employee_id == Employee.id
            )
            .where(Employee.id == employee_id)
        )
        async with self.session() as session:
            row = (await session.execute(stmt)).first()
        if row is None:
            return None
        employee, visible_role_groups = row
        return CallerProfile(
            employee_id=employee.id,
            is_active=employee.is_active,
            is_admin=employee.is_admin,
            app_role=employee.app_role,
            system_role=employee.system_role,
            training_enabled=employee.training_enabled,
            visible_role_groups=_role_groups(visible_role_groups),
        )
