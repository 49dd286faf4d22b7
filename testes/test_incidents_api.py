import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession


def _incident(**overrides):
    data = {
        "incidentTime": "2024-03-15T10:30:00",
        "device": "Camera-Lobby-01",
        "ip": "10.0.0.5",
        "sn": "SN001",
        "alertSource": "System Monitor",
        "status": "Open",
        "reason": "Camera offline",
        "resolution": "",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_incident_crud(client):
    resp_create = await client.post("/api/v1/incidents/", json=_incident())
    assert resp_create.status_code == 201, resp_create.text
    created = resp_create.json()
    incident_id = created["id"]
    assert created["device"] == "Camera-Lobby-01"
    assert created["alertSource"] == "System Monitor"
    assert created["incidentTime"].startswith("2024-03-15T10:30")

    resp_get = await client.get(f"/api/v1/incidents/{incident_id}")
    assert resp_get.status_code == 200
    assert resp_get.json()["sn"] == "SN001"

    # qualquer status pode ir para qualquer outro
    resp_update = await client.put(
        f"/api/v1/incidents/{incident_id}",
        json=_incident(status="Closed", resolution="Power cycled"),
    )
    assert resp_update.status_code == 200, resp_update.text
    assert resp_update.json()["status"] == "Closed"

    resp_back = await client.put(
        f"/api/v1/incidents/{incident_id}",
        json=_incident(status="Open"),
    )
    assert resp_back.json()["status"] == "Open"

    # POST com id => atualiza o mesmo registro
    resp_save = await client.post(
        "/api/v1/incidents/",
        json=_incident(id=incident_id, status="In Progress"),
    )
    assert resp_save.status_code == 201
    assert resp_save.json()["id"] == incident_id
    assert len((await client.get("/api/v1/incidents/")).json()) == 1

    assert (await client.delete(f"/api/v1/incidents/{incident_id}")).status_code == 204
    assert (await client.delete(f"/api/v1/incidents/{incident_id}")).status_code == 204
    assert (await client.get(f"/api/v1/incidents/{incident_id}")).status_code == 404


@pytest.mark.asyncio
async def test_update_unknown_incident_is_not_found(client):
    resp = await client.put("/api/v1/incidents/does-not-exist", json=_incident())
    assert resp.status_code == 404

    resp = await client.post("/api/v1/incidents/", json=_incident(id="does-not-exist"))
    assert resp.status_code == 404
    assert (await client.get("/api/v1/incidents/")).json() == []


@pytest.mark.asyncio
async def test_list_by_month_newest_first(client):
    times = {
        "feb-end": "2024-02-29T23:59:00",
        "mar-start": "2024-03-01T00:00:00",
        "mar-mid": "2024-03-15T10:30:00",
        "mar-end": "2024-03-31T23:59:00",
        "apr-start": "2024-04-01T00:00:00",
        "mar-2023": "2023-03-10T12:00:00",
    }
    ids = {}
    for label, ts in times.items():
        resp = await client.post("/api/v1/incidents/", json=_incident(incidentTime=ts, reason=label))
        assert resp.status_code == 201, resp.text
        ids[label] = resp.json()["id"]

    resp = await client.get("/api/v1/incidents/", params={"month": 2, "year": 2024})
    assert resp.status_code == 200, resp.text
    assert [i["reason"] for i in resp.json()] == ["mar-end", "mar-mid", "mar-start"]

    resp_all = await client.get("/api/v1/incidents/")
    assert [i["reason"] for i in resp_all.json()] == [
        "apr-start",
        "mar-end",
        "mar-mid",
        "mar-start",
        "feb-end",
        "mar-2023",
    ]


@pytest.mark.asyncio
async def test_list_december_crosses_year(client):
    await client.post("/api/v1/incidents/", json=_incident(incidentTime="2023-12-31T23:00:00", reason="dec"))
    await client.post("/api/v1/incidents/", json=_incident(incidentTime="2024-01-01T00:00:00", reason="jan"))

    resp = await client.get("/api/v1/incidents/", params={"month": 11, "year": 2023})
    assert [i["reason"] for i in resp.json()] == ["dec"]

    resp = await client.get("/api/v1/incidents/", params={"month": 0, "year": 2024})
    assert [i["reason"] for i in resp.json()] == ["jan"]


@pytest.mark.asyncio
async def test_month_is_zero_indexed_and_bounded(client):
    resp = await client.get("/api/v1/incidents/", params={"month": 12, "year": 2024})
    assert resp.status_code == 422
    resp = await client.get("/api/v1/incidents/", params={"month": -1, "year": 2024})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_incident_validation(client):
    resp = await client.post("/api/v1/incidents/", json=_incident(device="   "))
    assert resp.status_code == 422

    resp = await client.post("/api/v1/incidents/", json=_incident(alertSource="Pager"))
    assert resp.status_code == 422
    assert "Pager" in resp.json()["detail"]

    resp = await client.post("/api/v1/incidents/", json=_incident(status="Reopened"))
    assert resp.status_code == 422

    data = _incident()
    data.pop("incidentTime")
    resp = await client.post("/api/v1/incidents/", json=data)
    assert resp.status_code == 422

    assert (await client.get("/api/v1/incidents/")).json() == []


@pytest.mark.asyncio
async def test_incident_keeps_edited_fields_over_registry(client):
    await client.post(
        "/api/v1/devices/",
        json={"name": "Camera-Lobby-01", "sn": "SN001", "ip": "10.0.0.5"},
    )
    resp = await client.post(
        "/api/v1/incidents/",
        json=_incident(sn="EDITED-SN", ip="192.168.1.9"),
    )
    stored = resp.json()
    assert stored["sn"] == "EDITED-SN"
    assert stored["ip"] == "192.168.1.9"


@pytest.mark.asyncio
async def test_incident_options(client):
    resp = await client.get("/api/v1/incidents/options")
    assert resp.status_code == 200
    data = resp.json()
    assert data["statuses"] == ["Open", "In Progress", "Resolved", "Closed"]
    assert "System Monitor" in data["alertSources"]
    assert data["months"][0] == "January"
    assert len(data["years"]) == 10


@pytest.mark.asyncio
async def test_aware_incident_time_keeps_local_month(client):
    resp = await client.post(
        "/api/v1/incidents/",
        json=_incident(incidentTime="2024-03-31T22:00:00-05:00", reason="late-march"),
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["incidentTime"].startswith("2024-03-31T22:00")

    march = await client.get("/api/v1/incidents/", params={"month": 2, "year": 2024})
    assert [i["reason"] for i in march.json()] == ["late-march"]

    april = await client.get("/api/v1/incidents/", params={"month": 3, "year": 2024})
    assert april.json() == []


@pytest.mark.asyncio
async def test_incident_write_failure_surfaces_and_leaves_store_unchanged(client, monkeypatch):
    existing = (await client.post("/api/v1/incidents/", json=_incident())).json()

    async def broken_commit(self):
        raise OperationalError("COMMIT", {}, Exception("connection lost"))

    monkeypatch.setattr(AsyncSession, "commit", broken_commit)
    resp = await client.post("/api/v1/incidents/", json=_incident(reason="Lost on commit"))
    assert resp.status_code == 503
    resp = await client.put(
        f"/api/v1/incidents/{existing['id']}",
        json=_incident(status="Closed", resolution="Never saved"),
    )
    assert resp.status_code == 503
    monkeypatch.undo()

    stored = (await client.get("/api/v1/incidents/")).json()
    assert len(stored) == 1
    assert stored[0]["id"] == existing["id"]
    assert stored[0]["status"] == "Open"
    assert stored[0]["resolution"] == ""
