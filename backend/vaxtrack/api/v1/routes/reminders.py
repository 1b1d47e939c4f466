"""Module: reminders."""

from typing import Literal

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from vaxtrack.api.v1.responses import envelope
from vaxtrack.api.v1.routes.deps import get_db, get_language
from vaxtrack.api.v1.routes.guards import AdvanceDays, DoseNumber, IsoDate, PositiveId, ResponseText
from vaxtrack.core.vocab import Language, Priority, ReminderStatus, ReminderType
from vaxtrack.services.reminders import (
    list_patient_reminders,
    reminder_to_dict,
    schedule_reminder,
    update_reminder_status,
)

router = APIRouter()


class ReminderSchedulePayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    patient_id: PositiveId
    vaccine_id: PositiveId
    dose_number: DoseNumber
    due_date: IsoDate
    reminder_type: ReminderType = ReminderType.DUE
    priority: Priority = Priority.MEDIUM
    language: Language | None = None
    reminder_advance_days: AdvanceDays | None = None


class ReminderStatusPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: ReminderStatus | None = None
    response_text: ResponseText | None = None
    rescheduled_date: IsoDate | None = None


# Endpoint: reminders for one patient, earliest due date first.
@router.get("/reminders/{patient_id}", summary="List vaccination reminders for a patient")
def patient_reminders(
    patient_id: int = Path(..., gt=0),
    status: Literal["pending", "sent", "all"] = "pending",
    language: str | None = Depends(get_language),
    db: Session = Depends(get_db),
):
    reminders = list_patient_reminders(db, patient_id, status, language)
    return envelope(reminders)


# Endpoint: schedule a reminder for a due date.
@router.post("/reminder/schedule", summary="Schedule a vaccination reminder")
def create_reminder(
    payload: ReminderSchedulePayload,
    db: Session = Depends(get_db),
):
    reminder = schedule_reminder(
        db,
        patient_id=payload.patient_id,
        vaccine_id=payload.vaccine_id,
        dose_number=payload.dose_number,
        due_date=payload.due_date,
        reminder_type=payload.reminder_type.value,
        priority=payload.priority.value,
        language=payload.language.value if payload.language else None,
        advance_days=payload.reminder_advance_days,
    )
    return JSONResponse(status_code=201, content=envelope(reminder_to_dict(reminder), "Reminder scheduled successfully"))


# Endpoint: delivery lifecycle update (sent, delivered, read, failed) and patient responses.
@router.put("/reminder/{reminder_id}/status", summary="Update reminder status")
def change_reminder_status(
    payload: ReminderStatusPayload,
    reminder_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    reminder = update_reminder_status(
        db,
        reminder_id,
        status=payload.status.value if payload.status else None,
        response_text=payload.response_text,
        rescheduled_date=payload.rescheduled_date,
    )
    return envelope(reminder_to_dict(reminder), "Reminder status updated successfully")
