import math
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Dict, List, Literal, Optional, Tuple

RGB = Tuple[float, float, float]


def _num(value: Any, fallback: float) -> float:
    """Coerce to a finite float, or return the fallback."""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        n = float(value)
    except (TypeError, ValueError):
        return fallback
    return n if math.isfinite(n) else fallback


def _block_size(cell_w: float, cell_h: float, header_h: float, legend_h: float) -> Tuple[float, float]:
    return cell_w * 7, (header_h + 18) + (cell_h * 6) + 18 + legend_h + 10


# Reset together, in this order, when they make the year's layout overflow
SIZE_FIELDS = ("cell_w", "cell_h", "header_h", "legend_h")
PLACEMENT_FIELDS = ("start_x", "start_y", "month_gap_x", "month_gap_y")


class Country(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    country_code: str = Field(alias="countryCode")
    name: str


class HolidayRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    date: Optional[str] = None # ISO 8601 YYYY-MM-DD
    local_name: Optional[str] = Field(None, alias="localName")
    name: Optional[str] = None
    country_code: Optional[str] = Field(None, alias="countryCode")
    fixed: Optional[bool] = False
    is_global: Optional[bool] = Field(True, alias="global")
    counties: Optional[List[str]] = None
    launch_year: Optional[int] = Field(None, alias="launchYear")
    types: Optional[List[str]] = None

    def minimal(self) -> Dict[str, Optional[str]]:
        """The small record handed across to the renderer."""
        return {"date": self.date, "localName": self.local_name, "name": self.name}


class RenderSettings(BaseModel):
    """
    Normalized render settings. Construction never fails: every malformed
    value is replaced by the field default.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    render_style: Literal["grid", "nogrid"] = Field("grid", alias="renderStyle")
    week_starts_on: Literal[0, 1] = Field(0, alias="weekStartsOn") # 0=Sun, 1=Mon

    start_x: float = Field(60.0, alias="startX")
    start_y: float = Field(780.0, alias="startY")
    cell_w: float = Field(75.0, alias="cellW")
    cell_h: float = Field(55.0, alias="cellH")
    header_h: float = Field(40.0, alias="headerH")
    legend_h: float = Field(60.0, alias="legendH")

    month_cols: int = Field(2, alias="monthCols")
    month_gap_x: float = Field(50.0, alias="monthGapX")
    month_gap_y: float = Field(70.0, alias="monthGapY")

    font_name: str = Field("ArialMT", alias="fontName")
    font_size_header: float = Field(28.0, alias="fontSizeHeader")
    font_size_weekday: float = Field(14.0, alias="fontSizeWeekday")
    font_size_day: float = Field(16.0, alias="fontSizeDay")
    font_size_legend: float = Field(12.0, alias="fontSizeLegend")

    color_holiday: RGB = Field((220.0, 20.0, 60.0), alias="colorHoliday")
    color_normal: RGB = Field((20.0, 20.0, 20.0), alias="colorNormal")
    color_grid: RGB = Field((70.0, 70.0, 70.0), alias="colorGrid")

    @model_validator(mode="before")
    @classmethod
    def keep_layout_finite(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for names in (SIZE_FIELDS, PLACEMENT_FIELDS):
            if cls._layout_is_finite(data):
                break
            for name in names:
                data.pop(cls.model_fields[name].alias, None)
                data.pop(name, None)
        return data

    @classmethod
    def _layout_is_finite(cls, data: Dict[str, Any]) -> bool:
        """True when every month block of a year lands on finite coordinates."""
        def value(name):
            field = cls.model_fields[name]
            return _num(data.get(field.alias, data.get(name)), field.default)

        cols = int(_num(data.get("monthCols", data.get("month_cols")), 2))
        cols = cols if cols >= 1 else 2
        block_w, block_h = _block_size(value("cell_w"), value("cell_h"), value("header_h"), value("legend_h"))
        far_x = value("start_x") + min(11, cols - 1) * (block_w + value("month_gap_x")) + block_w
        far_y = value("start_y") - (11 // cols) * (block_h + value("month_gap_y")) - block_h
        return all(math.isfinite(n) for n in (block_w, block_h, far_x, far_y))

    @field_validator("render_style", mode="before")
    @classmethod
    def coerce_style(cls, v):
        return v if v in ("grid", "nogrid") else "grid"

    @field_validator("week_starts_on", mode="before")
    @classmethod
    def coerce_week_start(cls, v):
        return 1 if _num(v, 0) == 1 else 0

    @field_validator(
        "start_x", "start_y", "cell_w", "cell_h", "header_h", "legend_h",
        "month_gap_x", "month_gap_y", "font_size_header", "font_size_weekday",
        "font_size_day", "font_size_legend",
        mode="before",
    )
    @classmethod
    def coerce_finite(cls, v, info):
        return _num(v, cls.model_fields[info.field_name].default)

    @field_validator("month_cols", mode="before")
    @classmethod
    def coerce_month_cols(cls, v):
        n = int(_num(v, 2))
        return n if n >= 1 else 2

    @field_validator("font_name", mode="before")
    @classmethod
    def coerce_font(cls, v):
        return v if isinstance(v, str) and v else "ArialMT"

    @field_validator("color_holiday", "color_normal", "color_grid", mode="before")
    @classmethod
    def coerce_color(cls, v, info):
        default = cls.model_fields[info.field_name].default
        if not isinstance(v, (list, tuple)):
            return default
        return tuple(_num(v[i] if i < len(v) else None, default[i]) for i in range(3))

    @classmethod
    def from_payload(cls, data: Any) -> "RenderSettings":
        """Build settings from a decoded payload of any shape."""
        return cls.model_validate(data if isinstance(data, dict) else {})

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @property
    def block_w(self) -> float:
        return _block_size(self.cell_w, self.cell_h, self.header_h, self.legend_h)[0]

    @property
    def block_h(self) -> float:
        return _block_size(self.cell_w, self.cell_h, self.header_h, self.legend_h)[1]


class RenderProfile(BaseModel):
    description: str
    settings: RenderSettings = RenderSettings()


class RenderProfiles(BaseModel):
    profiles: Dict[str, RenderProfile]
