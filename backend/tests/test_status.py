"""Unit tests for the dose status resolver.

Covers:
- Overdue and due-soon classification for a bounded window
- The four date statuses partition the timeline
- Completed takes precedence over every date rule
- Open-ended windows never become overdue
- Summary counts and completion percentage
"""

from datetime import date, timedelta

import pytest

from vaxtrack.core.vocab import DoseStatus
from vaxtrack.db.models import ScheduleEntry, Vaccine
from vaxtrack.services.status import (
    DoseWindow,
    build_scheduled_doses,
    dose_window,
    group_by_status,
    resolve_status,
    summarize,
)

DOB = date(2024, 1, 1)


def make_entry(vaccine_id=1, dose=1, recommended=270, start=270, end=300, code="MR", name=None):
    vaccine = Vaccine(
        vaccine_id=vaccine_id,
        code=code,
        name=name or {"en": "Measles-Rubella", "hi": "खसरा-रूबेला"},
        contraindications=[],
    )
    return ScheduleEntry(
        schedule_id=vaccine_id * 100 + dose,
        vaccine_id=vaccine_id,
        dose_number=dose,
        recommended_age_days=recommended,
        age_range_start_days=start,
        age_range_end_days=end,
        is_mandatory=True,
        priority_level="high",
        vaccine=vaccine,
    )


class TestDoseWindow:
    """Calendar dates derived from the date of birth."""

    def test_bounded_window(self):
        window = dose_window(DOB, make_entry())
        assert window.recommended == date(2024, 9, 27)
        assert window.start == date(2024, 9, 27)
        assert window.end == date(2024, 10, 27)

    def test_open_window(self):
        """A missing upper age bound leaves the window open."""
        window = dose_window(DOB, make_entry(end=None))
        assert window.end is None


class TestResolveStatus:
    """Status precedence for a single dose."""

    def test_overdue_after_window_closes(self):
        """About 305 days old, past the day-300 window end."""
        window = dose_window(DOB, make_entry())
        assert resolve_status(window, date(2024, 11, 1)) == DoseStatus.OVERDUE

    def test_due_soon_within_thirty_days(self):
        """About 263 days old, within 30 days of day 270."""
        window = dose_window(DOB, make_entry())
        assert resolve_status(window, date(2024, 9, 20)) == DoseStatus.DUE_SOON

    def test_due_after_recommended_date(self):
        window = dose_window(DOB, make_entry())
        assert resolve_status(window, date(2024, 10, 1)) == DoseStatus.DUE

    def test_future_before_due_soon_horizon(self):
        window = dose_window(DOB, make_entry())
        assert resolve_status(window, date(2024, 6, 1)) == DoseStatus.FUTURE

    def test_boundaries(self):
        """Recommended day itself is due soon; window end itself is still due."""
        window = DoseWindow(recommended=date(2024, 9, 27), start=date(2024, 9, 27), end=date(2024, 10, 27))
        assert resolve_status(window, date(2024, 8, 28)) == DoseStatus.DUE_SOON
        assert resolve_status(window, date(2024, 8, 27)) == DoseStatus.FUTURE
        assert resolve_status(window, date(2024, 9, 27)) == DoseStatus.DUE_SOON
        assert resolve_status(window, date(2024, 9, 28)) == DoseStatus.DUE
        assert resolve_status(window, date(2024, 10, 27)) == DoseStatus.DUE
        assert resolve_status(window, date(2024, 10, 28)) == DoseStatus.OVERDUE

    def test_open_window_never_overdue(self):
        window = dose_window(DOB, make_entry(end=None))
        assert resolve_status(window, date(2090, 1, 1)) == DoseStatus.DUE

    @pytest.mark.parametrize("today", [date(2024, 6, 1), date(2024, 9, 20), date(2024, 10, 1), date(2024, 11, 1)])
    def test_completed_wins(self, today):
        """A recorded dose is completed whatever the date."""
        window = dose_window(DOB, make_entry())
        assert resolve_status(window, today, completed=True) == DoseStatus.COMPLETED

    def test_statuses_partition_timeline(self):
        """Every day maps to exactly one status, in order future, due_soon, due, overdue."""
        window = dose_window(DOB, make_entry())
        order = [DoseStatus.FUTURE, DoseStatus.DUE_SOON, DoseStatus.DUE, DoseStatus.OVERDUE]
        previous = 0
        day = DOB
        while day <= date(2025, 3, 1):
            status = resolve_status(window, day)
            assert status in order
            rank = order.index(status)
            assert rank >= previous
            previous = rank
            day += timedelta(days=1)
        assert previous == order.index(DoseStatus.OVERDUE)


class TestScheduledDoses:
    """Resolving a whole catalog for one patient."""

    def entries(self):
        return [
            make_entry(vaccine_id=2, dose=1, recommended=270, start=270, end=300, code="MR"),
            make_entry(vaccine_id=1, dose=1, recommended=0, start=0, end=15, code="OPV", name={"en": "Oral Polio Vaccine"}),
            make_entry(vaccine_id=1, dose=2, recommended=42, start=42, end=None, code="OPV", name={"en": "Oral Polio Vaccine"}),
            make_entry(vaccine_id=3, dose=1, recommended=3650, start=3650, end=None, code="TD", name={"en": "Tetanus-Diphtheria"}),
        ]

    def test_ordered_by_recommended_age(self):
        doses = build_scheduled_doses(self.entries(), {}, DOB, date(2024, 11, 1))
        assert [d.recommended_age_days for d in doses] == [0, 42, 270, 3650]

    def test_completed_dose_keeps_date(self):
        administered = {(1, 1): date(2024, 1, 2)}
        doses = build_scheduled_doses(self.entries(), administered, DOB, date(2024, 11, 1))
        first = doses[0]
        assert first.status == DoseStatus.COMPLETED
        assert first.completed_on == date(2024, 1, 2)
        assert first.to_dict()["dates"]["completed"] == date(2024, 1, 2)

    def test_localized_name_falls_back_to_default(self):
        doses = build_scheduled_doses(self.entries(), {}, DOB, date(2024, 11, 1), language="hi")
        by_code = {d.vaccine_code: d for d in doses}
        assert by_code["MR"].vaccine_name == "खसरा-रूबेला"
        assert by_code["TD"].vaccine_name == "Tetanus-Diphtheria"

    def test_summary(self):
        """OPV1 completed, OPV2 due, MR overdue, TD future."""
        administered = {(1, 1): date(2024, 1, 2)}
        doses = build_scheduled_doses(self.entries(), administered, DOB, date(2024, 11, 1))
        summary = summarize(doses)
        assert summary == {
            "total_vaccines": 4,
            "completed": 1,
            "due": 1,
            "overdue": 1,
            "due_soon": 0,
            "future": 1,
            "completion_percentage": 33,
        }

    def test_completion_rounds_half_up(self):
        """1 of 8 is 12.5% and 5 of 8 is 62.5%; both round up."""
        entries = [
            make_entry(vaccine_id=i, dose=1, recommended=0, start=0, end=None, code=f"V{i}")
            for i in range(1, 9)
        ]
        one = build_scheduled_doses(entries, {(1, 1): DOB}, DOB, date(2024, 11, 1))
        five = build_scheduled_doses(entries, {(i, 1): DOB for i in range(1, 6)}, DOB, date(2024, 11, 1))
        assert summarize(one)["completion_percentage"] == 13
        assert summarize(five)["completion_percentage"] == 63

    def test_summary_all_future(self):
        """No required doses yet means zero percent, not a division error."""
        entries = [make_entry(vaccine_id=3, dose=1, recommended=3650, start=3650, end=None, code="TD")]
        doses = build_scheduled_doses(entries, {}, DOB, date(2024, 2, 1))
        assert summarize(doses)["completion_percentage"] == 0

    def test_group_by_status_has_every_bucket(self):
        doses = build_scheduled_doses(self.entries(), {}, DOB, date(2024, 11, 1))
        groups = group_by_status(doses)
        assert set(groups) == {"completed", "due", "due_soon", "overdue", "future"}
        assert [d["vaccine"]["code"] for d in groups["overdue"]] == ["OPV", "MR"]
