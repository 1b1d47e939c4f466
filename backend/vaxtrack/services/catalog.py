"""Module: catalog."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from vaxtrack.core.errors import NotFoundError
from vaxtrack.core.i18n import pick_text
from vaxtrack.db.models.patient import Patient
from vaxtrack.db.models.schedule import ScheduleEntry
from vaxtrack.db.models.vaccine import Vaccine
from vaxtrack.db.reference_data import SCHEDULES, VACCINES, check_schedule_windows

logger = logging.getLogger(__name__)


def get_patient(db: Session, patient_id: int) -> Patient:
    patient = db.get(Patient, patient_id)
    if not patient:
        raise NotFoundError("Patient", patient_id)
    return patient


def get_vaccine(db: Session, vaccine_id: int) -> Vaccine:
    vaccine = db.get(Vaccine, vaccine_id)
    if not vaccine:
        raise NotFoundError("Vaccine", vaccine_id)
    return vaccine


def get_schedule_entries(db: Session, active_only: bool = True) -> list[ScheduleEntry]:
    stmt = (
        select(ScheduleEntry)
        .join(Vaccine, Vaccine.vaccine_id == ScheduleEntry.vaccine_id)
        .order_by(ScheduleEntry.recommended_age_days, ScheduleEntry.vaccine_id, ScheduleEntry.dose_number)
    )
    if active_only:
        stmt = stmt.where(Vaccine.is_active.is_(True))
    return list(db.execute(stmt).scalars().unique().all())


def get_schedule_entry(db: Session, vaccine_id: int, dose_number: int) -> ScheduleEntry | None:
    stmt = select(ScheduleEntry).where(
        ScheduleEntry.vaccine_id == vaccine_id,
        ScheduleEntry.dose_number == dose_number,
    )
    return db.execute(stmt).scalars().first()


def vaccine_to_dict(vaccine: Vaccine, language: str | None = None) -> dict:
    return {
        "id": vaccine.vaccine_id,
        "code": vaccine.code,
        "name": pick_text(vaccine.name, language),
        "description": pick_text(vaccine.description, language),
        "type": vaccine.vaccine_type,
        "manufacturer": vaccine.manufacturer,
        "route": vaccine.route_of_administration,
        "contraindications": list(vaccine.contraindications or []),
        "side_effects": pick_text(vaccine.side_effects, language),
        "is_active": vaccine.is_active,
    }


def list_vaccines(
    db: Session,
    vaccine_type: str | None = None,
    language: str | None = None,
    active: bool = True,
) -> list[dict]:
    stmt = select(Vaccine).where(Vaccine.is_active.is_(active)).order_by(Vaccine.code)
    if vaccine_type:
        stmt = stmt.where(Vaccine.vaccine_type == vaccine_type)
    return [vaccine_to_dict(v, language) for v in db.execute(stmt).scalars().all()]


def seed_catalog(db: Session) -> tuple[int, int]:
    """
    Insert or refresh the bundled catalog. Safe to run repeatedly: vaccines are
    matched on code and schedule rows on (vaccine, dose_number). A vaccine that
    was deactivated stays deactivated.
    """
    problems = check_schedule_windows()
    if problems:
        raise ValueError("Invalid schedule catalog: " + "; ".join(problems))

    by_code: dict[str, Vaccine] = {}
    for row in VACCINES:
        vaccine = db.execute(select(Vaccine).where(Vaccine.code == row["code"])).scalar_one_or_none()
        if vaccine is None:
            vaccine = Vaccine(code=row["code"], is_active=True)
            db.add(vaccine)
        vaccine.name = row["name"]
        vaccine.description = row.get("description")
        vaccine.side_effects = row.get("side_effects")
        vaccine.vaccine_type = row.get("vaccine_type")
        vaccine.route_of_administration = row.get("route_of_administration")
        vaccine.manufacturer = row.get("manufacturer")
        vaccine.contraindications = list(row.get("contraindications", []))
        by_code[row["code"]] = vaccine
    db.flush()

    for code, dose, group, recommended, start, end, interval, mandatory, priority in SCHEDULES:
        vaccine = by_code[code]
        entry = get_schedule_entry(db, vaccine.vaccine_id, dose)
        if entry is None:
            entry = ScheduleEntry(vaccine_id=vaccine.vaccine_id, dose_number=dose)
            db.add(entry)
        entry.age_group = group
        entry.recommended_age_days = recommended
        entry.age_range_start_days = start
        entry.age_range_end_days = end
        entry.interval_from_previous_days = interval
        entry.is_mandatory = mandatory
        entry.priority_level = priority
    db.flush()

    logger.info("Catalog seeded: %d vaccines, %d schedule entries", len(VACCINES), len(SCHEDULES))
    return len(VACCINES), len(SCHEDULES)
