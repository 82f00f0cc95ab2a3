"""Tests for calendar windows and grouping."""

from datetime import date, datetime

import pytest

from studio_planner.models import ValidationError
from studio_planner.services.calendar import (
    MONTH_GRID_DAYS,
    classes_on,
    group_by_day,
    month_grid,
    month_view,
    start_of_week,
    week_view,
    week_window,
)
from studio_planner.services.recurrence import resolve_occurrences


class TestWindows:
    """Tests for month grids and week windows."""

    def test_start_of_week_is_sunday(self):
        """Test weeks start on Sunday."""
        assert start_of_week(date(2024, 3, 6)) == date(2024, 3, 3)
        assert start_of_week(date(2024, 3, 3)) == date(2024, 3, 3)

    def test_month_grid(self):
        """Test March 2024 grid starts on the Sunday before the 1st."""
        start, end = month_grid(2024, 3)
        assert start == date(2024, 2, 25)
        assert (end - start).days + 1 == MONTH_GRID_DAYS
        assert end == date(2024, 4, 6)

    def test_month_grid_starting_sunday(self):
        """Test a month whose 1st is a Sunday starts on the 1st."""
        start, _ = month_grid(2024, 9)
        assert start == date(2024, 9, 1)

    def test_month_grid_out_of_range(self):
        """Test grids that leave the supported calendar are rejected."""
        for year, month in ((1, 1), (9999, 12), (0, 5), (10000, 1), (2024, 13)):
            with pytest.raises(ValidationError):
                month_grid(year, month)

    def test_week_window_out_of_range(self):
        """Test weeks reaching past year 1 or year 9999 are rejected."""
        for day in (date.min, date.max):
            with pytest.raises(ValidationError) as exc:
                week_window(day)
            assert exc.value.field == "date"
        assert week_window(date(9999, 12, 24)) == (date(9999, 12, 19), date(9999, 12, 25))

    def test_week_window(self):
        """Test the week containing a date."""
        assert week_window("2024-03-06") == (date(2024, 3, 3), date(2024, 3, 9))


class TestViews:
    """Tests for grouped month and week views."""

    def test_group_by_day_fills_window(self, one_off_class):
        """Test every day of the window gets a key."""
        occurrences = resolve_occurrences([one_off_class], "2024-03-03", "2024-03-09")
        grouped = group_by_day(occurrences, date(2024, 3, 3), date(2024, 3, 9))

        assert list(grouped) == [date(2024, 3, d) for d in range(3, 10)]
        assert len(grouped[date(2024, 3, 4)]) == 1
        assert grouped[date(2024, 3, 5)] == []

    def test_group_by_day_window_ending_on_last_date(self):
        """Test a window that ends on the last representable date."""
        grouped = group_by_day([], date(9999, 12, 29), date.max)
        assert list(grouped) == [date(9999, 12, 29), date(9999, 12, 30), date.max]

    def test_group_by_day_without_window(self, weekly_class):
        """Test only days with occurrences appear without a window."""
        occurrences = resolve_occurrences([weekly_class], "2024-03-04", "2024-03-10")
        grouped = group_by_day(occurrences)
        assert list(grouped) == [date(2024, 3, 4), date(2024, 3, 6)]

    def test_month_view(self, weekly_class, one_off_class):
        """Test the month view covers the 42-day grid."""
        days = month_view([weekly_class, one_off_class], 2024, 3)

        assert len(days) == MONTH_GRID_DAYS
        assert [o.class_definition_id for o in days[date(2024, 3, 4)]] == [
            "class-once",
            "class-weekly",
        ]
        # Padding days in April still get occurrences
        assert len(days[date(2024, 4, 1)]) == 1
        assert days[date(2024, 2, 26)] == []

    def test_week_view(self, weekly_class):
        """Test the week view has seven days."""
        days = week_view([weekly_class], date(2024, 3, 12))
        assert len(days) == 7
        counts = {d.isoformat(): len(o) for d, o in days.items() if o}
        assert counts == {"2024-03-11": 1, "2024-03-13": 1}


class TestClassesOn:
    """Tests for classes on a date."""

    def test_includes_recurring(self, weekly_class, one_off_class):
        """Test recurring classes appear on each of their days."""
        assert [c.id for c in classes_on([weekly_class, one_off_class], "2024-03-04")] == [
            "class-once",
            "class-weekly",
        ]
        assert [c.id for c in classes_on([weekly_class, one_off_class], "2024-03-20")] == [
            "class-weekly"
        ]

    def test_sorted_by_start_time(self, weekly_class, one_off_class):
        """Test ordering by time of day, not anchor date."""
        late = one_off_class.apply_update({"startTime": "2024-03-11T20:00:00"})
        found = classes_on([late, weekly_class], date(2024, 3, 11))
        assert [c.id for c in found] == ["class-weekly", "class-once"]

    def test_empty_day(self, weekly_class):
        """Test a day with nothing scheduled."""
        assert classes_on([weekly_class], datetime(2024, 3, 12, 12, 0)) == []
