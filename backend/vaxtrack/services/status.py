"""Module: status.

Derives the timeliness of every scheduled dose for one patient. Nothing here
touches the database: callers pass catalog rows and the patient's administered
doses, and get back freshly computed statuses.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, timedelta

from vaxtrack.core.config import settings
from vaxtrack.core.i18n import pick_text
from vaxtrack.core.vocab import DoseStatus
from vaxtrack.db.models.schedule import ScheduleEntry


@dataclass(frozen=True)
class DoseWindow:
    recommended: date
    start: date
    # None for an open-ended window.
    end: date | None


def dose_window(date_of_birth: date, entry: ScheduleEntry) -> DoseWindow:
    end = None
    if entry.age_range_end_days is not None:
        end = date_of_birth + timedelta(days=entry.age_range_end_days)
    return DoseWindow(
        recommended=date_of_birth + timedelta(days=entry.recommended_age_days),
        start=date_of_birth + timedelta(days=entry.age_range_start_days),
        end=end,
    )


def resolve_status(
    window: DoseWindow,
    today: date,
    completed: bool = False,
    due_soon_days: int | None = None,
) -> DoseStatus:
    """
    Classify one dose. A recorded dose is completed regardless of dates;
    otherwise the four date states are checked in precedence order and cover
    the whole timeline.
    """
    if completed:
        return DoseStatus.COMPLETED

    if window.end is not None and today > window.end:
        return DoseStatus.OVERDUE

    if today > window.recommended:
        return DoseStatus.DUE

    if due_soon_days is None:
        due_soon_days = settings.due_soon_window_days
    if today >= window.recommended - timedelta(days=due_soon_days):
        return DoseStatus.DUE_SOON

    return DoseStatus.FUTURE


@dataclass
class ScheduledDose:
    """One catalog dose as it applies to a specific patient on a specific day."""

    schedule_id: int
    vaccine_id: int
    vaccine_code: str
    vaccine_name: str | None
    vaccine_description: str | None
    vaccine_type: str | None
    route: str | None
    side_effects: str | None
    dose_number: int
    age_group: str | None
    recommended_age_days: int
    age_range_start_days: int
    age_range_end_days: int | None
    interval_from_previous_days: int | None
    is_mandatory: bool
    priority: str
    notes: str | None
    window: DoseWindow
    status: DoseStatus
    completed_on: date | None = None

    def to_dict(self) -> dict:
        return {
            "schedule_id": self.schedule_id,
            "vaccine": {
                "id": self.vaccine_id,
                "code": self.vaccine_code,
                "name": self.vaccine_name,
                "description": self.vaccine_description,
                "type": self.vaccine_type,
                "route": self.route,
                "side_effects": self.side_effects,
            },
            "dose_number": self.dose_number,
            "age_group": self.age_group,
            "recommended_age": {
                "days": self.recommended_age_days,
                "months": round(self.recommended_age_days / 30.44, 1),
            },
            "age_range": {
                "start_days": self.age_range_start_days,
                "end_days": self.age_range_end_days,
            },
            "dates": {
                "recommended": self.window.recommended,
                "window_start": self.window.start,
                "window_end": self.window.end,
                "completed": self.completed_on,
            },
            "status": self.status.value,
            "is_mandatory": self.is_mandatory,
            "priority": self.priority,
            "notes": self.notes,
            "interval_from_previous_days": self.interval_from_previous_days,
        }


def build_scheduled_doses(
    entries: Iterable[ScheduleEntry],
    administered: Mapping[tuple[int, int], date],
    date_of_birth: date,
    today: date,
    language: str | None = None,
) -> list[ScheduledDose]:
    """
    Resolve every catalog entry for one patient.

    ``administered`` maps (vaccine_id, dose_number) to the vaccination date of
    each recorded dose. Results are ordered by recommended age.
    """
    doses = []
    for entry in entries:
        key = (entry.vaccine_id, entry.dose_number)
        window = dose_window(date_of_birth, entry)
        vaccine = entry.vaccine
        doses.append(
            ScheduledDose(
                schedule_id=entry.schedule_id,
                vaccine_id=entry.vaccine_id,
                vaccine_code=vaccine.code,
                vaccine_name=pick_text(vaccine.name, language),
                vaccine_description=pick_text(vaccine.description, language),
                vaccine_type=vaccine.vaccine_type,
                route=vaccine.route_of_administration,
                side_effects=pick_text(vaccine.side_effects, language),
                dose_number=entry.dose_number,
                age_group=entry.age_group,
                recommended_age_days=entry.recommended_age_days,
                age_range_start_days=entry.age_range_start_days,
                age_range_end_days=entry.age_range_end_days,
                interval_from_previous_days=entry.interval_from_previous_days,
                is_mandatory=entry.is_mandatory,
                priority=entry.priority_level,
                notes=pick_text(entry.notes, language),
                window=window,
                status=resolve_status(window, today, completed=key in administered),
                completed_on=administered.get(key),
            )
        )

    doses.sort(key=lambda d: (d.recommended_age_days, d.vaccine_code, d.dose_number))
    return doses


def summarize(doses: list[ScheduledDose]) -> dict:
    counts = {status: 0 for status in DoseStatus}
    for dose in doses:
        counts[dose.status] += 1

    # Doses still in the future are not yet required.
    total_required = len(doses) - counts[DoseStatus.FUTURE]
    completed = counts[DoseStatus.COMPLETED]
    # Halves round up (12.5 -> 13), not to even.
    completion = math.floor(completed * 100 / total_required + 0.5) if total_required > 0 else 0

    return {
        "total_vaccines": len(doses),
        "completed": completed,
        "due": counts[DoseStatus.DUE],
        "overdue": counts[DoseStatus.OVERDUE],
        "due_soon": counts[DoseStatus.DUE_SOON],
        "future": counts[DoseStatus.FUTURE],
        "completion_percentage": completion,
    }


def group_by_status(doses: list[ScheduledDose]) -> dict[str, list[dict]]:
    groups: dict[str, list[dict]] = {status.value: [] for status in DoseStatus}
    for dose in doses:
        groups[dose.status.value].append(dose.to_dict())
    return groups
