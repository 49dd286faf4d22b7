# cctvlog/services/incident_export.py
from __future__ import annotations

import csv
import io
from typing import Iterable, Iterator, Optional

from cctvlog.models.incident import Incident
from cctvlog.services.incidents import MONTHS

CSV_HEADERS = [
    "Incident Time",
    "Device",
    "IP Address",
    "Alert Source",
    "Status",
    "Reason",
    "Resolution",
    "SN",
]


def export_filename(month: Optional[int], year: Optional[int]) -> str:
    if month is None or year is None:
        return "CCTV_Report_All.csv"
    return f"CCTV_Report_{MONTHS[month]}_{year}.csv"


def _row(inc: Incident) -> list[str]:
    return [
        inc.incident_time.isoformat(timespec="minutes"),
        inc.device,
        inc.ip or "",
        inc.alert_source,
        inc.status,
        inc.reason or "",
        inc.resolution or "",
        inc.serial_number or "",
    ]


def iter_incidents_csv(incidents: Iterable[Incident]) -> Iterator[str]:
    """Gera o CSV linha a linha (para StreamingResponse)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(CSV_HEADERS)
    yield buffer.getvalue()

    for inc in incidents:
        buffer.seek(0)
        buffer.truncate(0)
        writer.writerow(_row(inc))
        yield buffer.getvalue()
