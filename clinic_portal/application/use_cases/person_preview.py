"""Person schedule preview use case.

Loads the target employee, then reads weekly plans (one lookup per ISO
week in range), day overrides, roster duties and absences concurrently,
and overlays them with the pure functions in schedule_overlay.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import partial
from typing import TYPE_CHECKING

from clinic_portal.application.dtos.schedule import PersonPreview
from clinic_portal.application.services.schedule_overlay import (
    build_schedule_days,
    can_view_absences,
    day_range,
    iso_weeks,
    visible_absences,
)
from clinic_portal.application.use_cases.fanout import gather_reads
from clinic_portal.shared.telemetry import add_span_attributes, traced
from clinic_portal.shared.utils import clamp_int, parse_identifier, today_in

if TYPE_CHECKING:
    from clinic_portal.application.dtos.caller import AuthorizationContext
    from clinic_portal.application.interfaces.repositories import IScheduleReader

logger = logging.getLogger(__name__)


class PersonPreviewService:
    """Duties, effective workplaces and (if permitted) absences of one employee."""

    def __init__(
        self,
        schedule_reader: IScheduleReader,
        default_days: int = 14,
        max_days: int = 21,
        timeout_seconds: float = 10.0,
        timezone_name: str = "UTC",
        placeholder_labels: frozenset[str] = frozenset(),
    ) -> None:
        self.schedule_reader = schedule_reader
        self.default_days = default_days
        self.max_days = max_days
        self.timeout_seconds = timeout_seconds
        self.timezone_name = timezone_name
        self.placeholder_labels = placeholder_labels

    @traced("people.preview")
    async def preview(
        self,
        caller: AuthorizationContext | None,
        employee_id: object,
        days: object = None,
        start: date | None = None,
    ) -> PersonPreview:
        """Return the preview of employee_id for days days from start (default today).

        A malformed id, an unknown or inactive employee, or a missing caller
        yields an empty preview that still lists the requested days.
        """
        day_count = clamp_int(days, 1, self.max_days, self.default_days)
        first_day = start or today_in(self.timezone_name)
        # The window never runs past the last representable date.
        day_count = min(day_count, (date.max - first_day).days + 1)
        dates = day_range(first_day, day_count)
        target_id = parse_identifier(employee_id)
        add_span_attributes(days=day_count)

        if caller is None or target_id is None:
            return PersonPreview.empty(target_id, dates)

        loaded = await gather_reads(
            {"employees": partial(self.schedule_reader.get_employee, target_id)},
            self.timeout_seconds,
        )
        target = loaded["employees"]
        if target is None or not target.is_active:
            logger.debug("Preview requested for unknown employee %s", target_id)
            return PersonPreview.empty(target_id, dates)

        absences_visible = can_view_absences(caller, target)
        last_day = dates[-1]
        reader = self.schedule_reader

        reads = {
            f"weekly_plan {year}-W{week:02d}": partial(
                reader.get_weekly_assignments, target_id, year, week
            )
            for year, week in iso_weeks(dates)
        }
        reads["daily_overrides"] = partial(
            reader.get_daily_overrides, target_id, first_day, last_day
        )
        reads["roster"] = partial(reader.get_duties, target_id, first_day, last_day)
        if absences_visible:
            reads["absences"] = partial(
                reader.get_absences, target_id, first_day, last_day
            )

        results = await gather_reads(reads, self.timeout_seconds)
        assignments = [
            row
            for name, rows in results.items()
            if name.startswith("weekly_plan")
            for row in rows
        ]
        overrides = results["daily_overrides"]
        absences = results.get("absences", [])

        schedule = build_schedule_days(
            dates,
            target_id,
            assignments,
            overrides,
            self.placeholder_labels,
        )
        duties = sorted(
            (d for d in results["roster"] if first_day <= d.date <= last_day),
            key=lambda d: (d.date, d.service_type, d.id),
        )
        return PersonPreview(
            employee_id=target_id,
            days=dates,
            duties=tuple(duties),
            workplaces=tuple(w for day in schedule for w in day.workplaces),
            absences=tuple(visible_absences(absences, first_day, last_day)),
            absences_visible=absences_visible,
        )
