import csv
import io

import pytest

from cctvlog.services.incident_export import export_filename


def test_export_filename():
    assert export_filename(2, 2024) == "CCTV_Report_March_2024.csv"
    assert export_filename(None, None) == "CCTV_Report_All.csv"
    assert export_filename(2, None) == "CCTV_Report_All.csv"


@pytest.mark.asyncio
async def test_export_month_as_csv(client):
    await client.post(
        "/api/v1/incidents/",
        json={
            "incidentTime": "2024-03-05T09:00:00",
            "device": "Camera-Lobby-01",
            "ip": "10.0.0.5",
            "sn": "SN001",
            "alertSource": "Email Alert",
            "status": "Resolved",
            "reason": "Lens dirty, cleaned",
            "resolution": "Cleaned",
        },
    )
    await client.post(
        "/api/v1/incidents/",
        json={
            "incidentTime": "2024-04-05T09:00:00",
            "device": "Camera-Gate-01",
            "alertSource": "Email Alert",
        },
    )

    resp = await client.get("/api/v1/incidents/export", params={"month": 2, "year": 2024})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("text/csv")
    assert "CCTV_Report_March_2024.csv" in resp.headers["content-disposition"]

    rows = list(csv.reader(io.StringIO(resp.text)))
    assert rows[0] == [
        "Incident Time",
        "Device",
        "IP Address",
        "Alert Source",
        "Status",
        "Reason",
        "Resolution",
        "SN",
    ]
    assert rows[1:] == [
        [
            "2024-03-05T09:00",
            "Camera-Lobby-01",
            "10.0.0.5",
            "Email Alert",
            "Resolved",
            "Lens dirty, cleaned",
            "Cleaned",
            "SN001",
        ]
    ]
