"""Module: guards.

Field-level request guards. These check shape and range only; clinical rules
live in the safety service.
"""

import re
from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field, StringConstraints

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MAX_YEARS_IN_PAST = 100


def _iso_date(value):
    if isinstance(value, date):
        return value
    if isinstance(value, str) and ISO_DATE_RE.match(value):
        return value
    raise ValueError("Date must be in YYYY-MM-DD format")


def _not_future_nor_ancient(value: date) -> date:
    today = date.today()
    if value > today:
        raise ValueError("Date cannot be in the future")
    try:
        earliest = today.replace(year=today.year - MAX_YEARS_IN_PAST)
    except ValueError:
        # 29 February with no leap day a century back.
        earliest = today.replace(year=today.year - MAX_YEARS_IN_PAST, day=28)
    if value < earliest:
        raise ValueError(f"Date cannot be more than {MAX_YEARS_IN_PAST} years ago")
    return value


PositiveId = Annotated[int, Field(gt=0)]
DoseNumber = Annotated[int, Field(ge=1, le=10)]
IsoDate = Annotated[date, BeforeValidator(_iso_date)]
AdministeredDate = Annotated[date, BeforeValidator(_iso_date), AfterValidator(_not_future_nor_ancient)]

PersonOrPlace = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
BatchNumber = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100, pattern=r"^[A-Za-z0-9\-_]+$")]
LongText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]
ResponseText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)]
ConditionCode = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]
ReminderTime = Annotated[str, StringConstraints(pattern=r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]$")]
AdvanceDays = Annotated[int, Field(ge=0, le=90)]
