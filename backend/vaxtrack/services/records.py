"""Module: records."""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vaxtrack.core.errors import (
    DuplicateRecordError,
    NotFoundError,
    SafetyViolationError,
    ValidationError,
)
from vaxtrack.core.vocab import Priority, ReminderType
from vaxtrack.db.models.reminder import Reminder
from vaxtrack.db.models.vaccination_record import VaccinationRecord
from vaxtrack.services.age import compute_age
from vaxtrack.services.catalog import get_patient, get_schedule_entry, get_vaccine
from vaxtrack.services.preferences import find_preferences
from vaxtrack.services.reminders import add_reminder
from vaxtrack.services.safety import SafetyReport, validate_vaccination_safety
from vaxtrack.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

# Fields identifying which dose a record is; fixed once the record exists.
DOSE_IDENTITY_FIELDS = {"record_id", "patient_id", "vaccine_id", "dose_number"}
UPDATABLE_FIELDS = {"administered_by", "vaccination_center", "batch_number", "expiry_date", "adverse_events"}


@dataclass
class RecordedVaccination:
    record: VaccinationRecord
    warnings: list[str] = field(default_factory=list)
    reminder: Reminder | None = None


def _find_record(db: Session, patient_id: int, vaccine_id: int, dose_number: int) -> VaccinationRecord | None:
    stmt = select(VaccinationRecord).where(
        VaccinationRecord.patient_id == patient_id,
        VaccinationRecord.vaccine_id == vaccine_id,
        VaccinationRecord.dose_number == dose_number,
    )
    return db.execute(stmt).scalar_one_or_none()


def check_dose_safety(
    db: Session,
    *,
    patient_id: int,
    vaccine_id: int,
    dose_number: int,
    vaccination_date: date,
    patient_conditions: list[str] | None = None,
    expiry_date: date | None = None,
) -> SafetyReport:
    """Gather catalog and history facts for one dose and run the safety rules on them."""
    patient = get_patient(db, patient_id)
    vaccine = get_vaccine(db, vaccine_id)
    entry = get_schedule_entry(db, vaccine_id, dose_number)

    last_vaccination_date = None
    if dose_number > 1:
        previous = _find_record(db, patient_id, vaccine_id, dose_number - 1)
        if previous is not None:
            last_vaccination_date = previous.vaccination_date

    report = validate_vaccination_safety(
        patient_age_days=compute_age(patient.date_of_birth, vaccination_date).days,
        minimum_age_days=entry.age_range_start_days if entry else None,
        maximum_age_days=entry.age_range_end_days if entry else None,
        last_vaccination_date=last_vaccination_date,
        minimum_interval_days=entry.interval_from_previous_days if entry else None,
        patient_conditions=patient_conditions,
        contraindications=vaccine.contraindications,
        expiry_date=expiry_date,
        today=vaccination_date,
    )
    if entry is None:
        report.warnings.append(f"Dose {dose_number} is not part of the schedule for {vaccine.code}")
    return report


def record_vaccination(
    db: Session,
    *,
    patient_id: int,
    vaccine_id: int,
    dose_number: int,
    vaccination_date: date,
    administered_by: str | None = None,
    vaccination_center: str | None = None,
    batch_number: str | None = None,
    expiry_date: date | None = None,
    adverse_events: str | None = None,
    patient_conditions: list[str] | None = None,
    language: str | None = None,
) -> RecordedVaccination:
    """
    Validate and persist one administered dose, then schedule the next one.

    The record insert and the follow-up reminder share one transaction. The
    unique constraint on (patient, vaccine, dose) is the duplicate guard, so
    two concurrent submissions cannot both succeed.
    """
    with unit_of_work(db, "record_vaccination"):
        report = check_dose_safety(
            db,
            patient_id=patient_id,
            vaccine_id=vaccine_id,
            dose_number=dose_number,
            vaccination_date=vaccination_date,
            patient_conditions=patient_conditions,
            expiry_date=expiry_date,
        )
        if not report.is_safe:
            logger.warning(
                "Safety check blocked patient %s vaccine %s dose %s: %s",
                patient_id, vaccine_id, dose_number, "; ".join(report.errors),
            )
            raise SafetyViolationError(report.errors, report.warnings)

        patient = get_patient(db, patient_id)
        next_entry = get_schedule_entry(db, vaccine_id, dose_number + 1)
        next_dose_due_date = None
        if next_entry is not None:
            next_dose_due_date = patient.date_of_birth + timedelta(days=next_entry.recommended_age_days)

        record = VaccinationRecord(
            patient_id=patient_id,
            vaccine_id=vaccine_id,
            dose_number=dose_number,
            vaccination_date=vaccination_date,
            administered_by=administered_by,
            vaccination_center=vaccination_center,
            batch_number=batch_number,
            expiry_date=expiry_date,
            adverse_events=adverse_events,
            next_dose_due_date=next_dose_due_date,
        )
        db.add(record)
        try:
            db.flush()
        except IntegrityError as exc:
            db.rollback()
            if _find_record(db, patient_id, vaccine_id, dose_number) is not None:
                raise DuplicateRecordError(patient_id, vaccine_id, dose_number) from exc
            raise

        reminder = None
        if next_dose_due_date is not None:
            preference = find_preferences(db, patient_id)
            reminder = add_reminder(
                db,
                patient_id=patient_id,
                vaccine_id=vaccine_id,
                dose_number=dose_number + 1,
                due_date=next_dose_due_date,
                reminder_type=ReminderType.DUE.value,
                priority=Priority.MEDIUM.value,
                language=language or (preference.language if preference else None) or patient.language,
                advance_days=preference.reminder_advance_days if preference else None,
            )

    if report.warnings:
        logger.info("Recorded dose with safety warnings (record %s): %s", record.record_id, "; ".join(report.warnings))
    return RecordedVaccination(record=record, warnings=report.warnings, reminder=reminder)


def update_vaccination_record(db: Session, record_id: int, patch: dict) -> VaccinationRecord:
    """Partially update administration details. Dose identity cannot change."""
    identity = sorted(DOSE_IDENTITY_FIELDS & patch.keys())
    if identity:
        raise ValidationError(
            "Dose identity cannot be changed",
            details=[f"{name} cannot be updated" for name in identity],
        )
    unknown = sorted(patch.keys() - UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError("Unknown fields", details=[f"{name} is not an updatable field" for name in unknown])

    with unit_of_work(db, "update_vaccination_record"):
        record = db.get(VaccinationRecord, record_id)
        if not record:
            raise NotFoundError("Vaccination record", record_id)
        for key, value in patch.items():
            setattr(record, key, value)
        db.flush()

    return record


def record_to_dict(record: VaccinationRecord) -> dict:
    return {
        "id": record.record_id,
        "patient_id": record.patient_id,
        "vaccine_id": record.vaccine_id,
        "dose_number": record.dose_number,
        "vaccination_date": record.vaccination_date,
        "administered_by": record.administered_by,
        "vaccination_center": record.vaccination_center,
        "batch_number": record.batch_number,
        "expiry_date": record.expiry_date,
        "adverse_events": record.adverse_events,
        "next_dose_due_date": record.next_dose_due_date,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }
