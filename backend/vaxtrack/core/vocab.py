"""Module: vocab.

Closed vocabularies shared by the models, services and request guards.
"""

from collections.abc import Iterable
from enum import Enum

from vaxtrack.core.errors import ValidationError


class DoseStatus(str, Enum):
    """Derived timeliness of a scheduled dose. Never persisted."""
    COMPLETED = "completed"
    DUE = "due"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
    FUTURE = "future"


class ReminderStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    READ = "read"


class ReminderType(str, Enum):
    DUE = "due"
    OVERDUE = "overdue"
    UPCOMING = "upcoming"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Language(str, Enum):
    ENGLISH = "en"
    HINDI = "hi"
    TELUGU = "te"
    TAMIL = "ta"
    BENGALI = "bn"
    MARATHI = "mr"


class Channel(str, Enum):
    WHATSAPP = "whatsapp"
    SMS = "sms"
    EMAIL = "email"


# Allowed reminder lifecycle moves. Re-asserting the current status is always allowed.
REMINDER_TRANSITIONS: dict[ReminderStatus, set[ReminderStatus]] = {
    ReminderStatus.PENDING: {ReminderStatus.SENT},
    ReminderStatus.SENT: {ReminderStatus.DELIVERED, ReminderStatus.FAILED, ReminderStatus.READ},
    ReminderStatus.DELIVERED: {ReminderStatus.READ},
    ReminderStatus.FAILED: set(),
    ReminderStatus.READ: set(),
}


def parse_choice(vocabulary: type[Enum], value: str, field: str, allowed: Iterable[Enum] | None = None) -> Enum:
    """Coerce ``value`` into ``vocabulary``, raising ValidationError listing the accepted values."""
    choices = list(allowed) if allowed is not None else list(vocabulary)
    try:
        member = vocabulary(value)
    except ValueError:
        member = None
    if member not in choices:
        raise ValidationError(
            f"Invalid {field}",
            details=[f"{field} must be one of: {', '.join(c.value for c in choices)}"],
        )
    return member
