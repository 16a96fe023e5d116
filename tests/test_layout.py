"""
Tests for month block geometry and day placement.
"""

import calendar

import pytest

from calendar_fetcher.dates import day_of_week
from calendar_fetcher.layout import (
    cell_for_day,
    compute_month_layout,
    first_day_offset,
    month_origin,
    sunday_column,
)
from calendar_fetcher.models import RenderSettings


# ============================================================================
# TEST: BLOCK ORIGINS
# ============================================================================

class TestMonthOrigin:

    def test_first_block_is_start(self):
        assert month_origin(RenderSettings(), 0) == (60, 780)

    def test_two_column_default(self):
        s = RenderSettings()
        # February: second column, first row
        assert month_origin(s, 1) == (60 + 525 + 50, 780)
        # March: first column, second row
        assert month_origin(s, 2) == (60, 780 - (s.block_h + 70))
        # December: second column, sixth row
        assert month_origin(s, 11) == (60 + 575, 780 - 5 * (s.block_h + 70))

    def test_three_columns(self):
        s = RenderSettings.from_payload({"monthCols": 3})
        assert month_origin(s, 4) == (60 + 575, 780 - (s.block_h + 70))


# ============================================================================
# TEST: DAY PLACEMENT
# ============================================================================

class TestDayPlacement:

    @pytest.mark.parametrize("year", [1970, 2023, 2024, 2025, 2100])
    @pytest.mark.parametrize("month0", range(12))
    def test_first_day_column(self, year, month0):
        dow = day_of_week(year, month0, 1)
        assert first_day_offset(year, month0, 0) == dow
        assert first_day_offset(year, month0, 1) == (dow + 6) % 7

    def test_cell_for_day(self):
        assert cell_for_day(0, 1) == (0, 0)
        assert cell_for_day(6, 1) == (0, 6)
        assert cell_for_day(6, 2) == (1, 0)
        assert cell_for_day(6, 31) == (5, 1)

    def test_sunday_column(self):
        assert sunday_column(0) == 0
        assert sunday_column(1) == 6

    @pytest.mark.parametrize("week_starts_on", [0, 1])
    def test_matches_stdlib_month_calendar(self, week_starts_on):
        """Rows/columns agree with calendar.Calendar for a whole year."""
        s = RenderSettings.from_payload({"weekStartsOn": week_starts_on})
        firstweekday = 6 if week_starts_on == 0 else 0
        cal = calendar.Calendar(firstweekday=firstweekday)
        for month0 in range(12):
            weeks = cal.monthdayscalendar(2024, month0 + 1)
            expected = {
                day: (r, c)
                for r, week in enumerate(weeks)
                for c, day in enumerate(week)
                if day
            }
            layout = compute_month_layout(2024, month0, s)
            assert {p.day: (p.row, p.col) for p in layout.days} == expected

    def test_sunday_lands_in_sunday_column(self):
        for ws in (0, 1):
            s = RenderSettings.from_payload({"weekStartsOn": ws})
            layout = compute_month_layout(2024, 8, s)
            for p in layout.days:
                is_sunday = day_of_week(2024, 8, p.day) == 0
                assert (p.col == sunday_column(ws)) == is_sunday


# ============================================================================
# TEST: FULL LAYOUT
# ============================================================================

class TestComputeMonthLayout:

    def test_rows_and_cells(self):
        s = RenderSettings()
        layout = compute_month_layout(2024, 0, s)
        assert layout.week_top == 780 - 40
        assert layout.grid_top == 780 - 40 - 18
        assert layout.legend_top == layout.grid_top - 6 * 55 - 18
        assert len(layout.cells) == 42
        first, last = layout.cells[0], layout.cells[-1]
        assert (first.top, first.left, first.width, first.height) == (722, 60, 75, 55)
        assert (last.row, last.col) == (5, 6)
        assert last.top == 722 - 5 * 55
        assert last.left == 60 + 6 * 75

    def test_days(self):
        layout = compute_month_layout(2024, 1, RenderSettings())
        assert len(layout.days) == 29
        assert layout.days[0].iso_date == "2024-02-01"
        assert layout.days[-1].iso_date == "2024-02-29"

    def test_is_deterministic(self):
        s = RenderSettings.from_payload({"weekStartsOn": 1})
        assert compute_month_layout(2031, 5, s) == compute_month_layout(2031, 5, s)
