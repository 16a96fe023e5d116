"""Client for the Nager.Date public holiday API."""

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .models import Country, HolidayRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://date.nager.at/api/v3"


class HolidayApiError(RuntimeError):
    pass


class HolidayApiClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
            resp.raise_for_status()
            return resp.json()
        except requests.exceptions.RequestException as e:
            raise HolidayApiError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise HolidayApiError(f"Invalid JSON from {url}: {e}") from e

    def _get_list(self, path: str) -> List[Any]:
        data = self._get_json(path)
        if not isinstance(data, list):
            raise HolidayApiError(f"Expected a list from {path}, got {type(data).__name__}")
        return data

    def available_countries(self) -> List[Country]:
        try:
            return [Country.model_validate(c) for c in self._get_list("AvailableCountries")]
        except ValidationError as e:
            raise HolidayApiError(f"Unexpected country data: {e}") from e

    def public_holidays(self, year: int, country_code: str) -> List[HolidayRecord]:
        path = f"PublicHolidays/{int(year)}/{quote(country_code, safe='')}"
        try:
            holidays = [HolidayRecord.model_validate(h) for h in self._get_list(path)]
        except ValidationError as e:
            raise HolidayApiError(f"Unexpected holiday data: {e}") from e
        logger.info("Fetched %d holidays for %s %s", len(holidays), country_code, year)
        return holidays
