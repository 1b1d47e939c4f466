"""Tests for the profile, schedule and due-list views over the bundled catalog."""

from datetime import date

import pytest

from vaxtrack.core.errors import NotFoundError, ValidationError
from vaxtrack.services import views
from vaxtrack.services.preferences import set_preferences
from vaxtrack.services.records import record_vaccination
from vaxtrack.services.views import get_profile, get_schedule, list_due_vaccinations

TODAY = date(2024, 11, 1)


@pytest.fixture
def infant(db, make_patient, catalog):
    """Born 2024-01-01 with the three birth doses recorded; 305 days old on TODAY."""
    patient = make_patient(date_of_birth=date(2024, 1, 1), language="hi")
    for code in ("BCG", "HEPB", "OPV"):
        record_vaccination(
            db,
            patient_id=patient.patient_id,
            vaccine_id=catalog[code].vaccine_id,
            dose_number=1,
            vaccination_date=date(2024, 1, 1),
        )
    return patient


class TestProfile:
    """Age, summary counts and doses grouped by status."""

    def test_summary(self, db, infant):
        profile = get_profile(db, infant.patient_id, today=TODAY)
        assert profile["patient"]["age"] == {"days": 305, "months": 10, "years": 0}
        assert profile["vaccination_summary"] == {
            "total_vaccines": 23,
            "completed": 3,
            "due": 13,
            "overdue": 0,
            "due_soon": 0,
            "future": 7,
            "completion_percentage": 19,
        }

    def test_grouped_doses(self, db, infant):
        profile = get_profile(db, infant.patient_id, today=TODAY)
        completed = {d["vaccine"]["code"] for d in profile["vaccinations"]["completed"]}
        assert completed == {"BCG", "HEPB", "OPV"}
        assert profile["preferences"] is None

    def test_uses_patient_language_by_default(self, db, infant):
        profile = get_profile(db, infant.patient_id, today=TODAY)
        names = {d["vaccine"]["code"]: d["vaccine"]["name"] for d in profile["vaccinations"]["due"]}
        assert names["MR"] == "खसरा-रूबेला"

    def test_requested_language_wins(self, db, infant):
        profile = get_profile(db, infant.patient_id, language="en", today=TODAY)
        names = {d["vaccine"]["code"]: d["vaccine"]["name"] for d in profile["vaccinations"]["due"]}
        assert names["MR"] == "Measles-Rubella"

    def test_includes_preferences(self, db, infant):
        set_preferences(db, infant.patient_id, reminder_advance_days=2)
        profile = get_profile(db, infant.patient_id, today=TODAY)
        assert profile["preferences"]["reminder_advance_days"] == 2

    def test_unknown_patient(self, db, catalog):
        with pytest.raises(NotFoundError):
            get_profile(db, 404, today=TODAY)


class TestSchedule:
    """Doses whose window opens within the due-soon horizon."""

    def test_hides_completed_by_default(self, db, infant):
        schedule = get_schedule(db, infant.patient_id, today=TODAY)
        rows = schedule["schedules"]
        assert len(rows) == 14
        assert all(r["status"] != "completed" for r in rows)
        assert "TD" not in {r["vaccine"]["code"] for r in rows}

    def test_include_completed(self, db, infant):
        schedule = get_schedule(db, infant.patient_id, include_completed=True, today=TODAY)
        assert len(schedule["schedules"]) == 17

    def test_ordered_by_recommended_age(self, db, infant):
        rows = get_schedule(db, infant.patient_id, include_completed=True, today=TODAY)["schedules"]
        ages = [r["recommended_age"]["days"] for r in rows]
        assert ages == sorted(ages)

    def test_summary_covers_whole_catalog(self, db, infant):
        schedule = get_schedule(db, infant.patient_id, today=TODAY)
        assert schedule["summary"]["total_vaccines"] == 23
        assert schedule["patient_age"]["days"] == 305


class TestDueList:
    """Cross-patient worklist."""

    def test_overdue_filter(self, db, infant, make_patient):
        toddler = make_patient(date_of_birth=date(2023, 1, 1), name="Ravi Kumar")
        result = list_due_vaccinations(db, status="overdue", today=TODAY)
        items = result["vaccinations"]
        assert items
        assert {i["status"] for i in items} == {"overdue"}
        assert {i["patient"]["id"] for i in items} == {toddler.patient_id}

    def test_all_excludes_completed_and_future(self, db, infant):
        items = list_due_vaccinations(db, today=TODAY)["vaccinations"]
        assert {i["status"] for i in items} <= {"due", "due_soon", "overdue"}
        assert len(items) == 13

    def test_pagination(self, db, infant):
        result = list_due_vaccinations(db, limit=5, offset=10, today=TODAY)
        assert len(result["vaccinations"]) == 3
        assert result["pagination"] == {"limit": 5, "offset": 10, "total": 13}

    def test_unknown_status(self, db, infant):
        with pytest.raises(ValidationError) as exc_info:
            list_due_vaccinations(db, status="late", today=TODAY)
        assert exc_info.value.details == ["status must be one of: overdue, due, due_soon"]

    def test_completed_is_not_a_worklist_status(self, db, infant):
        with pytest.raises(ValidationError):
            list_due_vaccinations(db, status="completed", today=TODAY)

    def test_batched_walk_matches_single_pass(self, db, infant, make_patient, monkeypatch):
        """Patients are read a few at a time; results do not depend on the batch size."""
        make_patient(date_of_birth=date(2023, 1, 1), name="Ravi Kumar")
        make_patient(date_of_birth=date(2024, 5, 1), name="Meera Nair")
        whole = list_due_vaccinations(db, limit=500, today=TODAY)

        monkeypatch.setattr(views, "DUE_LIST_BATCH_SIZE", 1)
        batched = list_due_vaccinations(db, limit=500, today=TODAY)

        assert batched["pagination"] == whole["pagination"]
        assert [(i["patient"]["id"], i["schedule_id"]) for i in batched["vaccinations"]] == [
            (i["patient"]["id"], i["schedule_id"]) for i in whole["vaccinations"]
        ]

    def test_unborn_patients_skipped(self, db, catalog, make_patient):
        make_patient(date_of_birth=date(2025, 6, 1))
        assert list_due_vaccinations(db, today=TODAY)["pagination"]["total"] == 0
