"""App-level routes and error envelopes."""

from notehive import __version__


async def test_root(client):
    resp = await client.get("/")
    assert resp.json() == {"message": "NoteHive API is running"}


async def test_api_index(client):
    body = (await client.get("/api/")).json()
    assert body["version"] == __version__
    assert body["endpoints"]["notes"] == "/api/notes"


async def test_health_reports_degraded_without_redis(client):
    body = (await client.get("/api/health/")).json()

    assert body["status"] == "degraded"
    assert body["checks"]["database"]["connected"] is True


async def test_unknown_route_uses_error_envelope(client):
    resp = await client.get("/api/does-not-exist")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Not Found"}


async def test_malformed_id_is_400(client):
    resp = await client.get("/api/notes/not-a-uuid")

    assert resp.status_code == 400
    assert resp.json()["success"] is False
