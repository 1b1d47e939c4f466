"""Unit tests for the vaccination safety rules."""

from datetime import date, timedelta

from vaxtrack.services.safety import validate_vaccination_safety

TODAY = date(2025, 3, 10)


class TestExpiry:
    """Batch expiry relative to the administration date."""

    def test_expired_yesterday_is_error(self):
        report = validate_vaccination_safety(expiry_date=TODAY - timedelta(days=1), today=TODAY)
        assert not report.is_safe
        assert report.errors == ["Vaccine has expired and cannot be administered"]

    def test_expiring_in_29_days_warns(self):
        report = validate_vaccination_safety(expiry_date=TODAY + timedelta(days=29), today=TODAY)
        assert report.is_safe
        assert report.warnings == ["Vaccine expires within 30 days"]

    def test_expiring_in_31_days_is_clean(self):
        report = validate_vaccination_safety(expiry_date=TODAY + timedelta(days=31), today=TODAY)
        assert report.errors == []
        assert report.warnings == []

    def test_expiring_today_is_only_a_warning(self):
        report = validate_vaccination_safety(expiry_date=TODAY, today=TODAY)
        assert report.is_safe
        assert len(report.warnings) == 1


class TestAgeLimits:
    """Minimum age blocks; maximum age only warns."""

    def test_too_young(self):
        report = validate_vaccination_safety(patient_age_days=30, minimum_age_days=42, today=TODAY)
        assert not report.is_safe
        assert "too young" in report.errors[0]

    def test_minimum_age_reached(self):
        report = validate_vaccination_safety(patient_age_days=42, minimum_age_days=42, today=TODAY)
        assert report.is_safe

    def test_too_old_is_warning(self):
        report = validate_vaccination_safety(patient_age_days=400, maximum_age_days=365, today=TODAY)
        assert report.is_safe
        assert "too old" in report.warnings[0]


class TestInterval:
    """Minimum spacing from the previous dose."""

    def test_too_soon(self):
        report = validate_vaccination_safety(
            last_vaccination_date=TODAY - timedelta(days=20),
            minimum_interval_days=28,
            today=TODAY,
        )
        assert not report.is_safe
        assert "Minimum interval: 28 days" in report.errors[0]

    def test_interval_met(self):
        report = validate_vaccination_safety(
            last_vaccination_date=TODAY - timedelta(days=28),
            minimum_interval_days=28,
            today=TODAY,
        )
        assert report.is_safe


class TestContraindications:
    """Patient conditions intersected with the vaccine's contraindications."""

    def test_conflict_is_error(self):
        report = validate_vaccination_safety(
            patient_conditions=["Immunodeficiency", "asthma"],
            contraindications=["immunodeficiency", "pregnancy"],
            today=TODAY,
        )
        assert not report.is_safe
        assert report.errors == ["Contraindications present: Immunodeficiency"]

    def test_no_overlap(self):
        report = validate_vaccination_safety(
            patient_conditions=["asthma"],
            contraindications=["immunodeficiency"],
            today=TODAY,
        )
        assert report.is_safe

    def test_nothing_supplied_is_safe(self):
        report = validate_vaccination_safety(today=TODAY)
        assert report.to_dict() == {"errors": [], "warnings": []}

    def test_errors_accumulate(self):
        report = validate_vaccination_safety(
            patient_age_days=10,
            minimum_age_days=42,
            patient_conditions=["pregnancy"],
            contraindications=["pregnancy"],
            expiry_date=TODAY - timedelta(days=5),
            today=TODAY,
        )
        assert len(report.errors) == 3
