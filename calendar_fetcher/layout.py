"""
Month block geometry.

Coordinates follow the drawing document: x grows to the right and y grows
upward, so rows further down a block have smaller y values.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Tuple

from .dates import day_of_week, days_in_month, format_date
from .models import RenderSettings

GRID_ROWS = 6
GRID_COLS = 7

# Gap between the weekday header row and the top of the grid, and between
# the bottom of the grid and the legend.
HEADER_GAP = 18
LEGEND_GAP = 18


class CellRect(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    top: float
    left: float
    width: float
    height: float


class DayPlacement(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    row: int
    col: int
    iso_date: str


class MonthLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    month_index: int
    x0: float
    y0: float
    week_top: float
    grid_top: float
    legend_top: float
    cells: List[CellRect]
    days: List[DayPlacement]


def month_origin(settings: RenderSettings, month_index: int) -> Tuple[float, float]:
    col = month_index % settings.month_cols
    row = month_index // settings.month_cols
    x0 = settings.start_x + col * (settings.block_w + settings.month_gap_x)
    y0 = settings.start_y - row * (settings.block_h + settings.month_gap_y)
    return x0, y0


def first_day_offset(year: int, month0: int, week_starts_on: int) -> int:
    """Column of the 1st of the month."""
    dow = day_of_week(year, month0, 1)
    if week_starts_on == 1:
        return (dow + 6) % 7
    return dow


def cell_for_day(offset: int, day: int) -> Tuple[int, int]:
    """(row, col) of a day given the column of the 1st."""
    pos = offset + (day - 1)
    return pos // GRID_COLS, pos % GRID_COLS


def sunday_column(week_starts_on: int) -> int:
    return 6 if week_starts_on == 1 else 0


def compute_month_layout(year: int, month_index: int, settings: RenderSettings) -> MonthLayout:
    x0, y0 = month_origin(settings, month_index)
    week_top = y0 - settings.header_h
    grid_top = week_top - HEADER_GAP
    legend_top = grid_top - GRID_ROWS * settings.cell_h - LEGEND_GAP

    cells = [
        CellRect(
            row=r,
            col=c,
            top=grid_top - r * settings.cell_h,
            left=x0 + c * settings.cell_w,
            width=settings.cell_w,
            height=settings.cell_h,
        )
        for r in range(GRID_ROWS)
        for c in range(GRID_COLS)
    ]

    offset = first_day_offset(year, month_index, settings.week_starts_on)
    days = []
    for d in range(1, days_in_month(year, month_index) + 1):
        row, col = cell_for_day(offset, d)
        days.append(DayPlacement(day=d, row=row, col=col, iso_date=format_date(year, month_index + 1, d)))

    return MonthLayout(
        year=year,
        month_index=month_index,
        x0=x0,
        y0=y0,
        week_top=week_top,
        grid_top=grid_top,
        legend_top=legend_top,
        cells=cells,
        days=days,
    )
