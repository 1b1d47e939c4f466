"""Module: safety.

Clinical rule checks run before a dose may be recorded. Pure: every input is
passed in explicitly and absent inputs simply skip their rule.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta

from vaxtrack.core.config import settings


@dataclass
class SafetyReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_safe(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"errors": list(self.errors), "warnings": list(self.warnings)}


def validate_vaccination_safety(
    *,
    patient_age_days: int | None = None,
    minimum_age_days: int | None = None,
    maximum_age_days: int | None = None,
    last_vaccination_date: date | None = None,
    minimum_interval_days: int | None = None,
    patient_conditions: Iterable[str] | None = None,
    contraindications: Iterable[str] | None = None,
    expiry_date: date | None = None,
    today: date | None = None,
) -> SafetyReport:
    """
    Check age limits, dose interval, contraindications and batch expiry.

    ``today`` is the reference date for the interval and expiry rules; when
    recording a past administration it should be the vaccination date.
    """
    if today is None:
        today = date.today()
    report = SafetyReport()

    if patient_age_days is not None and minimum_age_days is not None:
        if patient_age_days < minimum_age_days:
            report.errors.append(
                f"Patient is too young for this vaccine. Minimum age: {minimum_age_days} days"
            )

    if patient_age_days is not None and maximum_age_days is not None:
        if patient_age_days > maximum_age_days:
            report.warnings.append(
                f"Patient may be too old for this vaccine. Maximum recommended age: {maximum_age_days} days"
            )

    if last_vaccination_date is not None and minimum_interval_days is not None:
        days_since_last = (today - last_vaccination_date).days
        if days_since_last < minimum_interval_days:
            report.errors.append(
                f"Too soon for next dose. Minimum interval: {minimum_interval_days} days "
                f"({days_since_last} days since previous dose)"
            )

    if patient_conditions and contraindications:
        blocked = {c.strip().lower() for c in contraindications}
        conflicts = sorted({c for c in patient_conditions if c.strip().lower() in blocked})
        if conflicts:
            report.errors.append(f"Contraindications present: {', '.join(conflicts)}")

    if expiry_date is not None:
        if expiry_date < today:
            report.errors.append("Vaccine has expired and cannot be administered")
        elif expiry_date <= today + timedelta(days=settings.expiry_warning_days):
            report.warnings.append(f"Vaccine expires within {settings.expiry_warning_days} days")

    return report
