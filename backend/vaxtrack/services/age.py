"""Module: age."""

import math
from dataclasses import dataclass
from datetime import date, datetime

DAYS_PER_MONTH = 30.44
DAYS_PER_YEAR = 365.25


@dataclass(frozen=True)
class PatientAge:
    days: int
    months: int
    years: int

    def to_dict(self) -> dict:
        return {"days": self.days, "months": self.months, "years": self.years}


def compute_age(date_of_birth: date, now: date | datetime | None = None) -> PatientAge:
    """
    Age of a patient as of ``now`` (captured once when omitted).

    Days are whole elapsed days; months and years are floored approximations
    derived from that same day count so the three figures never disagree.
    """
    if now is None:
        now = date.today()
    if isinstance(now, datetime):
        now = now.date()

    days = (now - date_of_birth).days
    return PatientAge(
        days=days,
        months=math.floor(days / DAYS_PER_MONTH),
        years=math.floor(days / DAYS_PER_YEAR),
    )
