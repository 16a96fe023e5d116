import csv
import io
import json
from pathlib import Path
from typing import Iterable

from .models import HolidayRecord

CSV_HEADER = ["date", "localName", "name", "countryCode"]


def holidays_to_csv(records: Iterable[HolidayRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for h in records:
        writer.writerow([h.date or "", h.local_name or "", h.name or "", h.country_code or ""])
    return buf.getvalue()


def holidays_to_json(records: Iterable[HolidayRecord]) -> str:
    data = [h.model_dump(mode="json", by_alias=True) for h in records]
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_export(path: Path, text: str) -> Path:
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path
