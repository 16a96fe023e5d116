"""Shared pytest configuration: path setup and holiday API fixtures."""

import sys
from pathlib import Path

import pytest

# Repository root, so ``calendar_fetcher`` and ``run`` import without installing
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT))

# Allow ``from fakes import ...``
sys.path.insert(0, str(Path(__file__).resolve().parent))

from calendar_fetcher.models import HolidayRecord  # noqa: E402
from fakes import NAGER_2024_US, FakeSession, nager_routes  # noqa: E402


@pytest.fixture
def nager_session():
    return FakeSession(nager_routes())


@pytest.fixture
def us_holidays():
    return [HolidayRecord.model_validate(h) for h in NAGER_2024_US]
