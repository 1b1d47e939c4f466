"""Module: reminders."""

import logging
from datetime import date, datetime, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from vaxtrack.core.config import settings
from vaxtrack.core.errors import NotFoundError, ValidationError
from vaxtrack.core.i18n import pick_text
from vaxtrack.core.vocab import REMINDER_TRANSITIONS, Priority, ReminderStatus, ReminderType, parse_choice
from vaxtrack.db.models.reminder import Reminder
from vaxtrack.db.models.vaccine import Vaccine
from vaxtrack.services.catalog import get_patient
from vaxtrack.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

# Rendered once when the reminder is scheduled and stored on the row.
MESSAGE_TEMPLATES = {
    "en": "Reminder: {vaccine} dose {dose} is due on {due}. Please visit your nearest vaccination center.",
    "hi": "अनुस्मारक: {vaccine} की {dose} खुराक {due} को देय है। कृपया अपने निकटतम टीकाकरण केंद्र पर जाएं।",
    "te": "రిమైండర్: {vaccine} డోస్ {dose} {due}న వచ్చింది. దయచేసి మీ సమీప వ్యాక్సినేషన్ సెంటర్‌కు వెళ్లండి.",
}


REMINDER_LIST_FILTERS = ("pending", "sent", "all")


def reminder_date_for(due_date: date, advance_days: int | None = None) -> date:
    if advance_days is None:
        advance_days = settings.default_reminder_advance_days
    return due_date - timedelta(days=advance_days)


def render_messages(vaccine: Vaccine | None, dose_number: int, due_date: date) -> dict[str, str]:
    messages = {}
    for language, template in MESSAGE_TEMPLATES.items():
        name = pick_text(vaccine.name, language) if vaccine else None
        messages[language] = template.format(
            vaccine=name or "Vaccination",
            dose=dose_number,
            due=due_date.isoformat(),
        )
    return messages


def add_reminder(
    db: Session,
    *,
    patient_id: int,
    vaccine_id: int,
    dose_number: int,
    due_date: date,
    reminder_type: str = ReminderType.DUE.value,
    priority: str = Priority.MEDIUM.value,
    language: str | None = None,
    advance_days: int | None = None,
) -> Reminder:
    """Stage a pending reminder in the caller's transaction (flushed, not committed)."""
    vaccine = db.get(Vaccine, vaccine_id)
    if not vaccine:
        raise NotFoundError("Vaccine", vaccine_id)

    reminder = Reminder(
        patient_id=patient_id,
        vaccine_id=vaccine_id,
        dose_number=dose_number,
        due_date=due_date,
        reminder_date=reminder_date_for(due_date, advance_days),
        reminder_type=reminder_type,
        priority=priority,
        language=language or settings.default_language,
        message_templates=render_messages(vaccine, dose_number, due_date),
        delivery_status=ReminderStatus.PENDING.value,
        sent=False,
        response_received=False,
    )
    db.add(reminder)
    db.flush()
    return reminder


def schedule_reminder(
    db: Session,
    *,
    patient_id: int,
    vaccine_id: int,
    dose_number: int,
    due_date: date,
    reminder_type: str = ReminderType.DUE.value,
    priority: str = Priority.MEDIUM.value,
    language: str | None = None,
    advance_days: int | None = None,
) -> Reminder:
    with unit_of_work(db, "schedule_reminder"):
        patient = get_patient(db, patient_id)
        reminder = add_reminder(
            db,
            patient_id=patient_id,
            vaccine_id=vaccine_id,
            dose_number=dose_number,
            due_date=due_date,
            reminder_type=reminder_type,
            priority=priority,
            language=language or patient.language,
            advance_days=advance_days,
        )

    logger.info(
        "Scheduled reminder %s for patient %s vaccine %s dose %s on %s",
        reminder.reminder_id, patient_id, vaccine_id, dose_number, reminder.reminder_date,
    )
    return reminder


def update_reminder_status(
    db: Session,
    reminder_id: int,
    *,
    status: str | None = None,
    response_text: str | None = None,
    rescheduled_date: date | None = None,
) -> Reminder:
    with unit_of_work(db, "update_reminder_status"):
        reminder = db.get(Reminder, reminder_id)
        if not reminder:
            raise NotFoundError("Reminder", reminder_id)

        if status is not None:
            current = ReminderStatus(reminder.delivery_status)
            target = parse_choice(ReminderStatus, status, "status")
            if target != current and target not in REMINDER_TRANSITIONS[current]:
                raise ValidationError(
                    "Invalid reminder status transition",
                    details=[f"Cannot move reminder from {current.value} to {target.value}"],
                )
            reminder.delivery_status = target.value
            if target == ReminderStatus.SENT and current != ReminderStatus.SENT:
                reminder.sent = True
                reminder.sent_at = datetime.utcnow()

        if response_text is not None:
            reminder.response_text = response_text
            reminder.response_received = True

        if rescheduled_date is not None:
            reminder.rescheduled_date = rescheduled_date

        db.flush()

    return reminder


def list_patient_reminders(
    db: Session,
    patient_id: int,
    status: str = "pending",
    language: str | None = None,
) -> list[dict]:
    if status not in REMINDER_LIST_FILTERS:
        raise ValidationError(
            "Invalid status",
            details=[f"status must be one of: {', '.join(REMINDER_LIST_FILTERS)}"],
        )

    with unit_of_work(db, "list_patient_reminders", commit=False):
        get_patient(db, patient_id)
        stmt = (
            select(Reminder, Vaccine)
            .join(Vaccine, Vaccine.vaccine_id == Reminder.vaccine_id)
            .where(Reminder.patient_id == patient_id)
            .order_by(Reminder.due_date, Reminder.reminder_id)
        )
        if status != "all":
            stmt = stmt.where(Reminder.sent.is_(status == "sent"))
        rows = db.execute(stmt).all()

    out = []
    for reminder, vaccine in rows:
        d = reminder_to_dict(reminder, language)
        d["vaccine_name"] = pick_text(vaccine.name, language)
        out.append(d)
    return out


def reminder_to_dict(reminder: Reminder, language: str | None = None) -> dict:
    return {
        "id": reminder.reminder_id,
        "patient_id": reminder.patient_id,
        "vaccine_id": reminder.vaccine_id,
        "dose_number": reminder.dose_number,
        "due_date": reminder.due_date,
        "reminder_date": reminder.reminder_date,
        "reminder_type": reminder.reminder_type,
        "priority": reminder.priority,
        "language": reminder.language,
        "message": pick_text(reminder.message_templates, language or reminder.language),
        "message_templates": dict(reminder.message_templates or {}),
        "status": reminder.delivery_status,
        "sent": reminder.sent,
        "sent_at": reminder.sent_at,
        "response_received": reminder.response_received,
        "response_text": reminder.response_text,
        "rescheduled_date": reminder.rescheduled_date,
        "created_at": reminder.created_at,
    }
