import json
import logging
from typing import Any, List, Optional, Sequence

from .indexer import build_holiday_index
from .models import RenderSettings
from .renderer import CalendarRenderer
from .surface import DrawingSurface, replay

logger = logging.getLogger(__name__)

NO_DOCUMENT = "No document open."


def _decode(payload: Optional[str], fallback: Any) -> Any:
    if not payload:
        return fallback
    return json.loads(payload)


class CalendarGenerator:
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()
        self.renderer = CalendarRenderer(self.settings)

    def generate(self, year: int, holidays: Sequence[Any], surface: DrawingSurface) -> str:
        """
        Draws all 12 months onto the surface, one layer each. Calling it twice
        draws a second, independent set of layers.
        """
        index = build_holiday_index(holidays)
        logger.info(
            "Generating %s (%s, %d holiday dates)", year, self.settings.render_style, len(index)
        )
        for m in range(12):
            replay(self.renderer.render_month(year, m, index), surface)
        return f"Generated {year} ({self.settings.render_style}, holidays={len(holidays)})."


def generate_year(year: int, holidays_payload: Optional[str], settings_payload: Optional[str],
                  surface: Optional[DrawingSurface]) -> str:
    """
    Entry point for the panel: JSON-encoded holidays and settings in, status
    string out. Never raises; anything already drawn before a failure stays.
    """
    try:
        holidays = _decode(holidays_payload, [])
        if not isinstance(holidays, list):
            holidays = []
        settings = RenderSettings.from_payload(_decode(settings_payload, {}))

        if surface is None:
            return NO_DOCUMENT

        if isinstance(year, bool) or not isinstance(year, int):
            raise TypeError(f"year must be an integer, got {year!r}")

        return CalendarGenerator(settings).generate(year, holidays, surface)
    except Exception as e:
        logger.exception("Calendar generation failed")
        return f"Generate failed: {e}"


def minimal_payload(holidays: Sequence[Any]) -> List[dict]:
    """Keeps only date/localName/name so the handoff stays small."""
    out = []
    for h in holidays:
        if hasattr(h, "minimal"):
            out.append(h.minimal())
        else:
            out.append({"date": h.get("date"), "localName": h.get("localName"), "name": h.get("name")})
    return out
