"""Module: preferences."""

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, StrictBool
from sqlalchemy.orm import Session

from vaxtrack.api.v1.responses import envelope
from vaxtrack.api.v1.routes.deps import get_db
from vaxtrack.api.v1.routes.guards import AdvanceDays, PositiveId, ReminderTime
from vaxtrack.core.vocab import Channel, Language
from vaxtrack.services.preferences import get_preferences, preferences_to_dict, set_preferences

router = APIRouter()


class PreferencesPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    patient_id: PositiveId
    reminder_enabled: StrictBool = True
    reminder_advance_days: AdvanceDays = 7
    preferred_reminder_time: ReminderTime = "10:00:00"
    language: Language = Language.ENGLISH
    notification_channels: list[Channel] = [Channel.WHATSAPP]
    auto_schedule: StrictBool = False
    privacy_consent: StrictBool = False
    data_sharing_consent: StrictBool = False


# Endpoint: create or replace a patient's reminder preferences.
@router.post("/preferences", summary="Set vaccination preferences")
def save_preferences(
    payload: PreferencesPayload,
    db: Session = Depends(get_db),
):
    preference = set_preferences(
        db,
        payload.patient_id,
        reminder_enabled=payload.reminder_enabled,
        reminder_advance_days=payload.reminder_advance_days,
        preferred_reminder_time=payload.preferred_reminder_time,
        language=payload.language.value,
        notification_channels=[c.value for c in payload.notification_channels],
        auto_schedule=payload.auto_schedule,
        privacy_consent=payload.privacy_consent,
        data_sharing_consent=payload.data_sharing_consent,
    )
    return JSONResponse(
        status_code=201,
        content=envelope(preferences_to_dict(preference), "Vaccination preferences saved successfully"),
    )


# Endpoint: read a patient's reminder preferences.
@router.get("/preferences/{patient_id}", summary="Get vaccination preferences")
def read_preferences(
    patient_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    return envelope(preferences_to_dict(get_preferences(db, patient_id)))
