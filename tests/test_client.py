"""
Tests for the holiday API client, using a fake requests session.
"""

import pytest
import requests

from calendar_fetcher.client import DEFAULT_BASE_URL, HolidayApiClient, HolidayApiError

from fakes import FakeResponse, FakeSession


class TestHolidayApiClient:

    def test_available_countries(self, nager_session):
        client = HolidayApiClient(session=nager_session)
        countries = client.available_countries()
        assert [c.country_code for c in countries] == ["US", "ID", "DE"]
        call = nager_session.calls[0]
        assert call["url"] == f"{DEFAULT_BASE_URL}/AvailableCountries"
        assert call["timeout"] == 10.0
        assert call["headers"]["Accept"] == "application/json"

    def test_public_holidays(self, nager_session):
        client = HolidayApiClient(session=nager_session)
        holidays = client.public_holidays(2024, "US")
        assert len(holidays) == 3
        assert holidays[1].local_name == "Independence Day"
        assert holidays[1].types == ["Public"]
        assert nager_session.calls[0]["url"].endswith("/PublicHolidays/2024/US")

    def test_null_flags_keep_the_record(self):
        odd = [
            {"date": "2024-01-01", "localName": "Neujahr", "name": "New Year's Day",
             "countryCode": "DE", "fixed": None, "global": None, "types": None},
            {"date": "2024-10-03", "localName": "Tag der Deutschen Einheit", "name": "German Unity Day",
             "countryCode": "DE", "fixed": True, "global": True},
        ]
        session = FakeSession({"/PublicHolidays/2024/DE": FakeResponse(odd)})
        holidays = HolidayApiClient(session=session).public_holidays(2024, "DE")
        assert [h.date for h in holidays] == ["2024-01-01", "2024-10-03"]
        assert holidays[0].fixed is None
        assert holidays[0].is_global is None

    def test_base_url_trailing_slash(self):
        session = FakeSession({"/AvailableCountries": FakeResponse([])})
        HolidayApiClient(base_url="http://localhost:8080/api/v3/", session=session).available_countries()
        assert session.calls[0]["url"] == "http://localhost:8080/api/v3/AvailableCountries"

    def test_http_error(self, nager_session):
        with pytest.raises(HolidayApiError):
            HolidayApiClient(session=nager_session).public_holidays(2024, "XX")

    def test_network_error(self):
        session = FakeSession(error=requests.exceptions.ConnectionError("offline"))
        with pytest.raises(HolidayApiError, match="offline"):
            HolidayApiClient(session=session).available_countries()

    def test_bad_json(self):
        session = FakeSession({"/AvailableCountries": FakeResponse(bad_json=True)})
        with pytest.raises(HolidayApiError, match="Invalid JSON"):
            HolidayApiClient(session=session).available_countries()

    def test_unexpected_shape(self):
        session = FakeSession({"/PublicHolidays/2024/US": FakeResponse({"status": 404})})
        with pytest.raises(HolidayApiError, match="Expected a list"):
            HolidayApiClient(session=session).public_holidays(2024, "US")

    def test_invalid_country_entry(self):
        session = FakeSession({"/AvailableCountries": FakeResponse([{"name": "Nowhere"}])})
        with pytest.raises(HolidayApiError, match="Unexpected country data"):
            HolidayApiClient(session=session).available_countries()
