"""Tests for the bundled catalog and localized text lookup."""

from sqlalchemy import func, select

from vaxtrack.core.i18n import pick_text
from vaxtrack.db.models import ScheduleEntry, Vaccine
from vaxtrack.db.reference_data import SCHEDULES, VACCINES, check_schedule_windows
from vaxtrack.services.catalog import get_schedule_entries, list_vaccines, seed_catalog


class TestReferenceData:
    def test_recommended_ages_inside_windows(self):
        assert check_schedule_windows() == []

    def test_every_schedule_row_has_a_vaccine(self):
        codes = {v["code"] for v in VACCINES}
        assert {row[0] for row in SCHEDULES} <= codes


class TestSeedCatalog:
    """Seeding is repeatable."""

    def test_idempotent(self, db):
        assert seed_catalog(db) == (9, 23)
        db.commit()
        seed_catalog(db)
        db.commit()
        assert db.execute(select(func.count()).select_from(Vaccine)).scalar_one() == 9
        assert db.execute(select(func.count()).select_from(ScheduleEntry)).scalar_one() == 23

    def test_inactive_vaccines_left_out(self, db, catalog):
        catalog["TCV"].is_active = False
        db.commit()
        codes = {e.vaccine.code for e in get_schedule_entries(db)}
        assert "TCV" not in codes
        assert "TCV" in {v["code"] for v in list_vaccines(db, active=False)}

    def test_reseed_keeps_deactivation(self, db, catalog):
        catalog["TCV"].is_active = False
        db.commit()
        seed_catalog(db)
        db.commit()
        assert "TCV" not in {v["code"] for v in list_vaccines(db)}


class TestPickText:
    """Requested language, then default, then anything."""

    def test_requested(self):
        assert pick_text({"en": "Rotavirus", "hi": "रोटावायरस"}, "hi") == "रोटावायरस"

    def test_default_fallback(self):
        assert pick_text({"en": "Rotavirus", "hi": "रोटावायरस"}, "ta") == "Rotavirus"

    def test_any_value_fallback(self):
        assert pick_text({"te": "రోటావైరస్"}, "hi") == "రోటావైరస్"

    def test_empty(self):
        assert pick_text(None, "en") is None
        assert pick_text({}, "en") is None
