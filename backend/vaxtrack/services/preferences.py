"""Module: preferences."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vaxtrack.core.config import settings
from vaxtrack.core.errors import NotFoundError
from vaxtrack.db.models.preference import Preference
from vaxtrack.services.catalog import get_patient
from vaxtrack.services.transaction import unit_of_work

PREFERENCE_FIELDS = (
    "reminder_enabled",
    "reminder_advance_days",
    "preferred_reminder_time",
    "language",
    "notification_channels",
    "auto_schedule",
    "privacy_consent",
    "data_sharing_consent",
)


def find_preferences(db: Session, patient_id: int) -> Preference | None:
    return db.execute(select(Preference).where(Preference.patient_id == patient_id)).scalar_one_or_none()


def get_preferences(db: Session, patient_id: int) -> Preference:
    with unit_of_work(db, "get_preferences", commit=False):
        preference = find_preferences(db, patient_id)
    if not preference:
        raise NotFoundError("Preferences", patient_id)
    return preference


def set_preferences(db: Session, patient_id: int, **values) -> Preference:
    """Upsert the single preferences row for a patient."""
    values = {k: v for k, v in values.items() if k in PREFERENCE_FIELDS and v is not None}

    with unit_of_work(db, "set_preferences"):
        get_patient(db, patient_id)
        preference = find_preferences(db, patient_id)
        if preference is None:
            defaults = {
                "reminder_advance_days": settings.default_reminder_advance_days,
                "language": settings.default_language,
            }
            preference = Preference(patient_id=patient_id, **{**defaults, **values})
            db.add(preference)
            try:
                db.flush()
            except IntegrityError:
                # A concurrent request inserted the row first; update that one instead.
                db.rollback()
                preference = find_preferences(db, patient_id)
                if preference is None:
                    raise
        for key, value in values.items():
            setattr(preference, key, value)
        db.flush()

    return preference


def preferences_to_dict(preference: Preference) -> dict:
    return {
        "patient_id": preference.patient_id,
        "reminder_enabled": preference.reminder_enabled,
        "reminder_advance_days": preference.reminder_advance_days,
        "preferred_reminder_time": preference.preferred_reminder_time,
        "language": preference.language,
        "notification_channels": list(preference.notification_channels or []),
        "auto_schedule": preference.auto_schedule,
        "privacy_consent": preference.privacy_consent,
        "data_sharing_consent": preference.data_sharing_consent,
        "updated_at": preference.updated_at,
    }
