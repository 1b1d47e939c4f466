"""Module: vaccinations."""

from typing import Literal

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from vaxtrack.api.v1.responses import envelope
from vaxtrack.api.v1.routes.deps import get_db, get_language
from vaxtrack.api.v1.routes.guards import (
    AdministeredDate,
    BatchNumber,
    ConditionCode,
    DoseNumber,
    IsoDate,
    LongText,
    PersonOrPlace,
    PositiveId,
)
from vaxtrack.core.vocab import Language
from vaxtrack.services.records import record_to_dict, record_vaccination, update_vaccination_record
from vaxtrack.services.reminders import reminder_to_dict
from vaxtrack.services.views import get_profile, get_schedule, list_due_vaccinations

router = APIRouter()


class RecordVaccinationPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    patient_id: PositiveId
    vaccine_id: PositiveId
    dose_number: DoseNumber
    vaccination_date: AdministeredDate
    administered_by: PersonOrPlace | None = None
    vaccination_center: PersonOrPlace | None = None
    batch_number: BatchNumber | None = None
    expiry_date: IsoDate | None = None
    adverse_events: LongText | None = None
    patient_conditions: list[ConditionCode] = []
    language: Language | None = None


class RecordUpdatePayload(BaseModel):
    # Unknown keys (including dose identity fields) are rejected, not ignored.
    model_config = ConfigDict(extra="forbid")

    administered_by: PersonOrPlace | None = None
    vaccination_center: PersonOrPlace | None = None
    batch_number: BatchNumber | None = None
    expiry_date: IsoDate | None = None
    adverse_events: LongText | None = None


# Endpoint: vaccination profile with age, status summary and doses grouped by status.
@router.get("/profile/{patient_id}", summary="Get vaccination profile for a patient")
def vaccination_profile(
    patient_id: int = Path(..., gt=0),
    language: str | None = Depends(get_language),
    db: Session = Depends(get_db),
):
    profile = get_profile(db, patient_id, language)
    return envelope(profile)


# Endpoint: age-appropriate schedule with per-dose status.
@router.get("/schedule/{patient_id}", summary="Get vaccination schedule for a patient")
def vaccination_schedule(
    patient_id: int = Path(..., gt=0),
    language: str | None = Depends(get_language),
    include_completed: bool = False,
    db: Session = Depends(get_db),
):
    schedule = get_schedule(db, patient_id, language, include_completed)
    return envelope(schedule)


# Endpoint: cross-patient worklist of doses that are due, due soon or overdue.
@router.get("/due", summary="List due and overdue vaccinations")
def due_vaccinations(
    status: Literal["all", "due", "due_soon", "overdue"] = "all",
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    language: str | None = Depends(get_language),
    db: Session = Depends(get_db),
):
    due = list_due_vaccinations(db, status, limit, offset, language)
    return envelope(due)


# Endpoint: record an administered dose (safety-checked) and schedule the next one.
@router.post("/record", summary="Record a vaccination administration")
def create_vaccination_record(
    payload: RecordVaccinationPayload,
    db: Session = Depends(get_db),
):
    result = record_vaccination(
        db,
        patient_id=payload.patient_id,
        vaccine_id=payload.vaccine_id,
        dose_number=payload.dose_number,
        vaccination_date=payload.vaccination_date,
        administered_by=payload.administered_by,
        vaccination_center=payload.vaccination_center,
        batch_number=payload.batch_number,
        expiry_date=payload.expiry_date,
        adverse_events=payload.adverse_events,
        patient_conditions=payload.patient_conditions,
        language=payload.language.value if payload.language else None,
    )

    data = record_to_dict(result.record)
    data["safety_warnings"] = result.warnings
    data["next_dose_reminder"] = reminder_to_dict(result.reminder) if result.reminder else None
    return JSONResponse(status_code=201, content=envelope(data, "Vaccination recorded successfully"))


# Endpoint: partial update of administration details (e.g. adverse events).
@router.put("/record/{record_id}", summary="Update a vaccination record")
def edit_vaccination_record(
    payload: RecordUpdatePayload,
    record_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    record = update_vaccination_record(db, record_id, payload.model_dump(exclude_unset=True))
    return envelope(record_to_dict(record), "Vaccination record updated successfully")
