"""Unit tests for the auth dependencies (notehive/middleware/auth.py)."""

import uuid
from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from notehive.core.context import RequestContext
from notehive.middleware import auth as auth_module
from notehive.middleware.auth import (
    JWTBearer,
    get_current_user_id,
    get_request_context,
)


class FakeUserRepo:
    known: set = set()

    def __init__(self, session):
        pass

    async def get_by_id(self, user_id):
        return object() if user_id in self.known else None


def build_app() -> FastAPI:
    app = FastAPI()

    async def _no_db():
        yield None

    app.dependency_overrides[auth_module.get_db_session] = _no_db

    @app.get("/token")
    async def token(raw=Depends(JWTBearer())):
        return {"token": raw}

    @app.get("/me")
    async def me(user_id=Depends(get_current_user_id)):
        return {"user_id": str(user_id)}

    @app.get("/viewer")
    async def viewer(ctx: RequestContext = Depends(get_request_context)):
        return {"viewer": str(ctx.viewer_id) if ctx.viewer_id else None}

    return app


def _bearer(token: Optional[str]) -> dict:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


@pytest.fixture
def known_user(monkeypatch):
    uid = uuid.uuid4()

    async def fake_decode(token):
        return uid if token == "good" else None

    monkeypatch.setattr(auth_module, "get_user_id_from_token", fake_decode)
    monkeypatch.setattr(auth_module, "UserRepository", FakeUserRepo)
    monkeypatch.setattr(FakeUserRepo, "known", {uid})
    return uid


def test_bearer_returns_raw_token():
    client = TestClient(build_app())
    resp = client.get("/token", headers=_bearer("abc"))
    assert resp.status_code == 200
    assert resp.json() == {"token": "abc"}


def test_missing_header_is_401_not_403():
    client = TestClient(build_app())
    resp = client.get("/token")
    assert resp.status_code == 401


def test_wrong_scheme_is_401():
    client = TestClient(build_app())
    resp = client.get("/token", headers={"Authorization": "Basic abc"})
    assert resp.status_code == 401


def test_valid_token_for_known_user(known_user):
    client = TestClient(build_app())
    resp = client.get("/me", headers=_bearer("good"))
    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(known_user)}


def test_invalid_token_is_401(known_user):
    client = TestClient(build_app())
    resp = client.get("/me", headers=_bearer("bad"))
    assert resp.status_code == 401


def test_token_for_deleted_user_is_401(known_user, monkeypatch):
    monkeypatch.setattr(FakeUserRepo, "known", set())
    client = TestClient(build_app())
    resp = client.get("/me", headers=_bearer("good"))
    assert resp.status_code == 401


def test_optional_viewer_anonymous_without_header(known_user):
    client = TestClient(build_app())
    assert client.get("/viewer").json() == {"viewer": None}


def test_optional_viewer_ignores_bad_token(known_user):
    client = TestClient(build_app())
    resp = client.get("/viewer", headers=_bearer("bad"))
    assert resp.status_code == 200
    assert resp.json() == {"viewer": None}


def test_optional_viewer_resolved_from_good_token(known_user):
    client = TestClient(build_app())
    resp = client.get("/viewer", headers=_bearer("good"))
    assert resp.json() == {"viewer": str(known_user)}
