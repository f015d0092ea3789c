"""Auth endpoints end to end."""


async def _register(client, email="ada@example.com", name="Ada", password="secret123"):
    return await client.post(
        "/api/auth/register", json={"name": name, "email": email, "password": password}
    )


async def test_register_returns_user_and_token(client):
    resp = await _register(client, email="Ada@Example.com")

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["email"] == "ada@example.com"
    assert body["data"]["token"]
    assert "passwordHash" not in body["data"]


async def test_register_duplicate_email(client):
    await _register(client)
    resp = await _register(client, email="ADA@example.com", name="Other")

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "User already exists"}


async def test_register_validation_errors_are_400(client):
    resp = await _register(client, email="not-an-email", password="123")

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]
    assert {tuple(d["loc"][-1:]) for d in body["details"]} == {("email",), ("password",)}


async def test_login_and_me(client):
    await _register(client)

    login = await client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "secret123"}
    )
    assert login.status_code == 200
    token = login.json()["data"]["token"]

    me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["name"] == "Ada"


async def test_login_with_wrong_password(client):
    await _register(client)

    resp = await client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "wrong-one"}
    )

    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid credentials"


async def test_me_without_token_is_401(client):
    resp = await client.get("/api/auth/me")

    assert resp.status_code == 401
    assert resp.json()["success"] is False


async def test_logout_revokes_token(client, fake_redis):
    token = (await _register(client)).json()["data"]["token"]
    headers = {"Authorization": f"Bearer {token}"}

    resp = await client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Logged out successfully"

    assert (await client.get("/api/auth/me", headers=headers)).status_code == 401
