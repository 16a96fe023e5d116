"""Canned Nager.Date data and a stand-in for requests.Session."""

import requests

NAGER_2024_US = [
    {
        "date": "2024-01-01", "localName": "New Year's Day", "name": "New Year's Day",
        "countryCode": "US", "fixed": False, "global": True, "counties": None,
        "launchYear": None, "types": ["Public"],
    },
    {
        "date": "2024-07-04", "localName": "Independence Day", "name": "Independence Day",
        "countryCode": "US", "fixed": False, "global": True, "counties": None,
        "launchYear": None, "types": ["Public"],
    },
    {
        "date": "2024-12-25", "localName": "Christmas Day", "name": "Christmas Day",
        "countryCode": "US", "fixed": False, "global": True, "counties": None,
        "launchYear": None, "types": ["Public"],
    },
]

COUNTRIES = [
    {"countryCode": "US", "name": "United States"},
    {"countryCode": "ID", "name": "Indonesia"},
    {"countryCode": "DE", "name": "Germany"},
]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Routes GETs by URL suffix; unknown URLs get a 404."""

    def __init__(self, routes=None, error=None):
        self.routes = routes or {}
        self.error = error
        self.calls = []

    def get(self, url, timeout=None, headers=None):
        self.calls.append({"url": url, "timeout": timeout, "headers": headers})
        if self.error is not None:
            raise self.error
        for suffix, resp in self.routes.items():
            if url.endswith(suffix):
                return resp
        return FakeResponse(status_code=404)


def nager_routes():
    return {
        "/AvailableCountries": FakeResponse(COUNTRIES),
        "/PublicHolidays/2024/US": FakeResponse(NAGER_2024_US),
    }
