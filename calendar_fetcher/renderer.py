"""Turns one month of layout + holidays into an ordered list of draw commands."""

from typing import List

from .commands import AddLayer, AddRectangle, AddText, DrawCommand
from .dates import format_legend_short, month_name, weekday_labels
from .indexer import HolidayIndex
from .layout import compute_month_layout, sunday_column
from .models import RenderSettings

LEGEND_SEPARATOR = "; "
LABEL_SEPARATOR = " / "

# Inset of grid-style text from the cell's top-left corner
TEXT_INSET = 6


def legend_max_chars(settings: RenderSettings) -> int:
    return max(30, int(settings.block_w // 8))


def wrap_legend(entries: List[str], max_chars: int) -> List[str]:
    """
    Greedily packs entries, joined by '; ', into lines of at most max_chars.
    An entry longer than max_chars is never split and gets a line to itself.
    """
    lines: List[str] = []
    line = ""
    for chunk in entries:
        if not line:
            line = chunk
            continue
        candidate = line + LEGEND_SEPARATOR + chunk
        if len(candidate) <= max_chars:
            line = candidate
        else:
            lines.append(line)
            line = chunk
    if line:
        lines.append(line)
    return lines


def layer_name(year: int, month_index: int) -> str:
    return f"{month_index + 1:02d} {month_name(month_index)} {year}"


class CalendarRenderer:
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    @property
    def draw_grid(self) -> bool:
        return self.settings.render_style == "grid"

    def _text(self, contents: str, left: float, top: float, size: float, color, center_x=None) -> AddText:
        return AddText(
            contents=contents,
            left=left,
            top=top,
            font_name=self.settings.font_name,
            font_size=size,
            color=color,
            justification="left" if center_x is None else "center",
            center_x=center_x,
        )

    def render_month(self, year: int, month_index: int, index: HolidayIndex) -> List[DrawCommand]:
        s = self.settings
        layout = compute_month_layout(year, month_index, s)
        x0, y0 = layout.x0, layout.y0
        sunday_col = sunday_column(s.week_starts_on)

        commands: List[DrawCommand] = [AddLayer(name=layer_name(year, month_index))]

        # Title
        commands.append(
            self._text(f"{month_name(month_index)} {year}", x0, y0, s.font_size_header, s.color_normal)
        )

        # Weekday header row
        for c, label in enumerate(weekday_labels(s.week_starts_on)):
            color = s.color_holiday if c == sunday_col else s.color_normal
            if self.draw_grid:
                left = x0 + c * s.cell_w + TEXT_INSET
                commands.append(self._text(label, left, layout.week_top, s.font_size_weekday, color))
            else:
                center_x = x0 + c * s.cell_w + s.cell_w / 2
                commands.append(
                    self._text(label, 0, layout.week_top, s.font_size_weekday, color, center_x=center_x)
                )

        if self.draw_grid:
            for cell in layout.cells:
                commands.append(
                    AddRectangle(
                        top=cell.top,
                        left=cell.left,
                        width=cell.width,
                        height=cell.height,
                        stroke_color=s.color_grid,
                    )
                )

        # Day numbers; Sundays and holidays share the holiday color
        legend_entries: List[str] = []
        for placement in layout.days:
            labels = index.get(placement.iso_date)
            is_holiday = bool(labels)
            color = s.color_holiday if (is_holiday or placement.col == sunday_col) else s.color_normal
            row_top = layout.grid_top - placement.row * s.cell_h

            if self.draw_grid:
                left = x0 + placement.col * s.cell_w + TEXT_INSET
                commands.append(
                    self._text(str(placement.day), left, row_top - TEXT_INSET, s.font_size_day, color)
                )
            else:
                center_x = x0 + placement.col * s.cell_w + s.cell_w / 2
                center_y = row_top - s.cell_h / 2
                commands.append(
                    self._text(
                        str(placement.day), 0, center_y + s.font_size_day / 2,
                        s.font_size_day, color, center_x=center_x,
                    )
                )

            if is_holiday:
                legend_entries.append(format_legend_short(placement.iso_date, LABEL_SEPARATOR.join(labels)))

        lines = wrap_legend(legend_entries, legend_max_chars(s))
        if lines:
            commands.append(
                self._text("\n".join(lines), x0, layout.legend_top, s.font_size_legend, s.color_holiday)
            )

        return commands

    def render_year(self, year: int, index: HolidayIndex) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        for m in range(12):
            commands.extend(self.render_month(year, m, index))
        return commands
