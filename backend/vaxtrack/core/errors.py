"""Module: errors.

Domain exceptions raised by the service layer. The API layer maps each class
to a response family:

    NotFoundError         -> 404 not found
    DuplicateRecordError  -> 409 conflict
    ValidationError       -> 400 bad request (itemized reasons)
    SafetyViolationError  -> 400 bad request (itemized errors and warnings)
    StorageError          -> 503 try again (correlation id only)
"""

import uuid


class VaccinationError(Exception):
    """Base class for every error surfaced by the vaccination core."""

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundError(VaccinationError):
    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateRecordError(VaccinationError):
    def __init__(self, patient_id: int, vaccine_id: int, dose_number: int):
        super().__init__("Vaccination for this dose already recorded")
        self.patient_id = patient_id
        self.vaccine_id = vaccine_id
        self.dose_number = dose_number


class ValidationError(VaccinationError):
    """Malformed or out-of-range request fields."""


class SafetyViolationError(VaccinationError):
    """A clinical rule blocked the vaccination from being recorded."""

    def __init__(self, errors: list[str], warnings: list[str] | None = None):
        super().__init__("Vaccination safety check failed", details=list(errors))
        self.errors = list(errors)
        self.warnings = list(warnings or [])


class StorageError(VaccinationError):
    """Backing-store failure. Details stay in the logs, keyed by correlation id."""

    def __init__(self, operation: str, correlation_id: str | None = None):
        super().__init__(f"Storage failure during {operation}")
        self.operation = operation
        self.correlation_id = correlation_id or uuid.uuid4().hex
