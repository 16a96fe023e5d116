"""
Panel logic: fetch holidays, list/export them, and hand them to the generator.

Every user action ends by setting `status`, the one line of text the panel
shows. Holidays are optional: generation works with an empty list.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from .client import HolidayApiClient, HolidayApiError
from .export import holidays_to_csv, holidays_to_json, write_export
from .generator import generate_year, minimal_payload
from .models import Country, HolidayRecord, RenderSettings
from .surface import DrawingSurface
from .templating import TemplateRenderer

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "ID"


def parse_year(value: Any) -> Optional[int]:
    """Returns the year as an int, or None for blank / non-numeric / zero input."""
    text = str(value if value is not None else "").strip()
    try:
        year = int(text)
    except ValueError:
        return None
    return year or None


class HolidayPanel:
    def __init__(self, client: Optional[HolidayApiClient] = None,
                 renderer: Optional[TemplateRenderer] = None):
        self.client = client or HolidayApiClient()
        self.renderer = renderer or TemplateRenderer()
        self.countries: List[Country] = []
        self.selected_country: Optional[str] = None
        self.last_data: Optional[List[HolidayRecord]] = None
        self.status = ""

    def _set_status(self, msg: str) -> str:
        self.status = msg
        logger.info("Status: %s", msg)
        return msg

    def load_countries(self) -> str:
        self._set_status("Loading countries… (optional)")
        try:
            countries = self.client.available_countries()
        except HolidayApiError as e:
            logger.warning("Country list unavailable: %s", e)
            return self._set_status("Countries failed to load. You can still Generate (no holidays).")

        self.countries = sorted(countries, key=lambda c: c.name)
        codes = {c.country_code for c in self.countries}
        if DEFAULT_COUNTRY in codes:
            self.selected_country = DEFAULT_COUNTRY
        elif self.countries:
            self.selected_country = self.countries[0].country_code
        return self._set_status("Ready. (Fetch is optional)")

    def country_options(self) -> List[str]:
        return [f"{c.name} ({c.country_code})" for c in self.countries]

    def fetch(self, year: Any, country_code: Optional[str] = None) -> str:
        y = parse_year(year)
        if y is None:
            return self._set_status("Invalid year.")

        cc = country_code or self.selected_country
        if not cc:
            return self._set_status("Pick a country (or just Generate without holidays).")

        self._set_status(f"Fetching holidays for {cc} {y}…")
        self.last_data = None
        try:
            self.last_data = self.client.public_holidays(y, cc)
        except HolidayApiError as e:
            logger.warning("Holiday fetch failed: %s", e)
            return self._set_status("Holiday fetch failed. You can still Generate without holidays.")
        return self._set_status(f"Found {len(self.last_data)} holidays.")

    def clear(self) -> str:
        self.last_data = None
        return self._set_status("Cleared. (Generate works without holidays)")

    def render_list(self) -> str:
        return self.renderer.render("holiday_list.html", {"holidays": self.last_data or []})

    def copy_json(self) -> Optional[str]:
        if self.last_data is None:
            self._set_status("Nothing to copy.")
            return None
        text = holidays_to_json(self.last_data)
        self._set_status("Copied JSON.")
        return text

    def _export(self, path: Optional[Path], text_fn, label: str) -> str:
        if self.last_data is None:
            return self._set_status("Nothing to export.")
        if not path:
            return self._set_status("Save cancelled.")
        try:
            write_export(path, text_fn(self.last_data))
        except OSError as e:
            logger.warning("Could not write %s: %s", path, e)
            return self._set_status("Save failed.")
        return self._set_status(f"{label} exported.")

    def export_csv(self, path: Optional[Path]) -> str:
        return self._export(path, holidays_to_csv, "CSV")

    def export_json(self, path: Optional[Path]) -> str:
        return self._export(path, holidays_to_json, "JSON")

    def generate(self, year: Any, surface: Optional[DrawingSurface], style: str = "grid",
                 settings: Optional[RenderSettings] = None) -> str:
        y = parse_year(year)
        if y is None:
            return self._set_status("Invalid year.")

        payload = minimal_payload(self.last_data or [])
        base = (settings or RenderSettings()).to_payload()
        base["renderStyle"] = style or "grid"

        self._set_status("Generating 12 months…")
        result = generate_year(y, json.dumps(payload), json.dumps(base), surface)
        return self._set_status(result or "Done.")
