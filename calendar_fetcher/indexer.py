import datetime
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from .models import HolidayRecord

logger = logging.getLogger(__name__)

HolidayIndex = Dict[str, List[str]]

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_iso_date(value: Any) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def holiday_label(local_name: Optional[str], name: Optional[str]) -> str:
    label = local_name or ""
    if name:
        label += f" ({name})"
    return label


def build_holiday_index(records: Optional[Iterable[Any]]) -> HolidayIndex:
    """
    Maps ISO date -> display labels, one per record, in input order.
    Records without a usable date are skipped.
    """
    index: HolidayIndex = {}
    for record in records or []:
        if isinstance(record, HolidayRecord):
            record = record.model_dump(by_alias=True)
        if not isinstance(record, Mapping):
            logger.debug("Skipping non-record holiday entry: %r", record)
            continue

        date_str = record.get("date")
        if not is_iso_date(date_str):
            logger.debug("Skipping holiday with unusable date: %r", record)
            continue

        label = holiday_label(record.get("localName"), record.get("name"))
        index.setdefault(date_str, []).append(label)
    return index
