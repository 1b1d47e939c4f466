"""Module: views.

Read-side views over the status resolver: a patient's profile, their
age-appropriate schedule, and the cross-patient worklist of doses needing
attention.
"""

from collections.abc import Iterator
from datetime import date, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from vaxtrack.core.config import settings
from vaxtrack.core.vocab import DoseStatus, parse_choice
from vaxtrack.db.models.patient import Patient
from vaxtrack.db.models.vaccination_record import VaccinationRecord
from vaxtrack.services.age import compute_age
from vaxtrack.services.catalog import get_patient, get_schedule_entries
from vaxtrack.services.preferences import find_preferences, preferences_to_dict
from vaxtrack.services.status import build_scheduled_doses, group_by_status, summarize
from vaxtrack.services.transaction import unit_of_work

ATTENTION_STATUSES = (DoseStatus.OVERDUE, DoseStatus.DUE, DoseStatus.DUE_SOON)
# Patients (and their records) held in memory at once while building the due list.
DUE_LIST_BATCH_SIZE = 500


def _administered_doses(db: Session, patient_ids: list[int]) -> dict[int, dict[tuple[int, int], date]]:
    out: dict[int, dict[tuple[int, int], date]] = {pid: {} for pid in patient_ids}
    if not patient_ids:
        return out
    stmt = select(
        VaccinationRecord.patient_id,
        VaccinationRecord.vaccine_id,
        VaccinationRecord.dose_number,
        VaccinationRecord.vaccination_date,
    ).where(VaccinationRecord.patient_id.in_(patient_ids))
    for patient_id, vaccine_id, dose_number, vaccination_date in db.execute(stmt).all():
        out[patient_id][(vaccine_id, dose_number)] = vaccination_date
    return out


def _patient_batches(db: Session, today: date, batch_size: int | None = None) -> Iterator[list[Patient]]:
    """Born patients in patient_id order, DUE_LIST_BATCH_SIZE at a time (keyset paging)."""
    batch_size = batch_size or DUE_LIST_BATCH_SIZE
    last_id = 0
    while True:
        stmt = (
            select(Patient)
            .where(Patient.date_of_birth <= today, Patient.patient_id > last_id)
            .order_by(Patient.patient_id)
            .limit(batch_size)
        )
        batch = list(db.execute(stmt).scalars().all())
        if not batch:
            return
        yield batch
        last_id = batch[-1].patient_id


def get_profile(db: Session, patient_id: int, language: str | None = None, today: date | None = None) -> dict:
    today = today or date.today()

    with unit_of_work(db, "get_profile", commit=False):
        patient = get_patient(db, patient_id)
        entries = get_schedule_entries(db)
        administered = _administered_doses(db, [patient_id])[patient_id]
        preference = find_preferences(db, patient_id)

    language = language or patient.language
    doses = build_scheduled_doses(entries, administered, patient.date_of_birth, today, language)

    return {
        "patient": {
            "id": patient.patient_id,
            "name": patient.name,
            "date_of_birth": patient.date_of_birth,
            "age": compute_age(patient.date_of_birth, today).to_dict(),
            "phone": patient.phone,
            "language": patient.language,
        },
        "vaccination_summary": summarize(doses),
        "vaccinations": group_by_status(doses),
        "preferences": preferences_to_dict(preference) if preference else None,
        "last_updated": datetime.utcnow(),
    }


def get_schedule(
    db: Session,
    patient_id: int,
    language: str | None = None,
    include_completed: bool = False,
    today: date | None = None,
) -> dict:
    """
    Doses relevant at the patient's current age: every dose whose window has
    opened or opens within the due-soon horizon. Summary counts cover the full
    catalog.
    """
    today = today or date.today()

    with unit_of_work(db, "get_schedule", commit=False):
        patient = get_patient(db, patient_id)
        entries = get_schedule_entries(db)
        administered = _administered_doses(db, [patient_id])[patient_id]

    age = compute_age(patient.date_of_birth, today)
    doses = build_scheduled_doses(entries, administered, patient.date_of_birth, today, language or patient.language)

    horizon = age.days + settings.due_soon_window_days
    visible = [d for d in doses if d.age_range_start_days <= horizon]
    if not include_completed:
        visible = [d for d in visible if d.status != DoseStatus.COMPLETED]

    return {
        "patient_id": patient.patient_id,
        "patient_age": age.to_dict(),
        "schedules": [d.to_dict() for d in visible],
        "summary": summarize(doses),
        "generated_at": datetime.utcnow(),
    }


def list_due_vaccinations(
    db: Session,
    status: str = "all",
    limit: int = 50,
    offset: int = 0,
    language: str | None = None,
    today: date | None = None,
) -> dict:
    """Doses needing attention across all patients, most urgent recommended date first."""
    today = today or date.today()
    if status == "all":
        wanted = set(ATTENTION_STATUSES)
    else:
        wanted = {parse_choice(DoseStatus, status, "status", allowed=ATTENTION_STATUSES)}

    items = []
    with unit_of_work(db, "list_due_vaccinations", commit=False):
        entries = get_schedule_entries(db)
        for patients in _patient_batches(db, today):
            administered = _administered_doses(db, [p.patient_id for p in patients])
            for patient in patients:
                doses = build_scheduled_doses(
                    entries, administered[patient.patient_id], patient.date_of_birth, today, language or patient.language
                )
                for dose in doses:
                    if dose.status not in wanted:
                        continue
                    item = dose.to_dict()
                    item["patient"] = {
                        "id": patient.patient_id,
                        "name": patient.name,
                        "phone": patient.phone,
                        "language": patient.language,
                    }
                    items.append(item)

    items.sort(key=lambda i: (i["dates"]["recommended"], i["patient"]["id"], i["vaccine"]["code"], i["dose_number"]))
    page = items[offset:offset + limit]

    return {
        "vaccinations": page,
        "pagination": {"limit": limit, "offset": offset, "total": len(items)},
        "generated_at": datetime.utcnow(),
    }
