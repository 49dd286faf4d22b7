import pytest

from cctvlog.core.config import settings


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(client):
    resp = await client.post("/api/v1/auth/login", json={"password": "wrong"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_device_writes_require_token_outside_dev_mode(client, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_ANONYMOUS_DEV_MODE", False)

    resp = await client.post("/api/v1/devices/", json={"name": "Camera-Lobby-01"})
    assert resp.status_code == 401
    resp = await client.post("/api/v1/devices/sync", json={"devices": []})
    assert resp.status_code == 401
    resp = await client.delete("/api/v1/devices/anything")
    assert resp.status_code == 401

    # leituras e incidentes continuam abertos
    assert (await client.get("/api/v1/devices/")).status_code == 200
    assert (await client.get("/api/v1/incidents/")).status_code == 200

    login = await client.post("/api/v1/auth/login", json={"password": "s3nha-de-teste"})
    assert login.status_code == 200, login.text
    token = login.json()["access_token"]
    assert login.json()["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {token}"}
    resp = await client.post(
        "/api/v1/devices/",
        json={"name": "Camera-Lobby-01", "sn": "SN001"},
        headers=headers,
    )
    assert resp.status_code == 200, resp.text


@pytest.mark.asyncio
async def test_invalid_token_is_rejected_even_in_dev_mode(client):
    assert settings.ALLOW_ANONYMOUS_DEV_MODE is True
    resp = await client.post(
        "/api/v1/devices/",
        json={"name": "Camera-Lobby-01"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert resp.status_code == 401
