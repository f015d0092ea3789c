"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# must be set before notehive.config is imported
os.environ["NOTEHIVE_SKIP_LIFESPAN_DB"] = "1"
os.environ["LOG_DIR"] = ""
os.environ["REDIS_URL"] = "redis://localhost:1/0"  # nothing listens here
os.environ["SECRET_KEY"] = "test-secret-key"

from typing import Optional  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notehive.config import get_settings  # noqa: E402
from notehive.core.models import BaseModel, Note, User  # noqa: E402
from notehive.core.redis_client import get_redis_client  # noqa: E402
from notehive.core.storage import FileStorage, get_storage  # noqa: E402
from notehive.database import get_db_session, get_session_factory  # noqa: E402
from notehive.main import app  # noqa: E402
from notehive.security.jwt import create_access_token  # noqa: E402
from notehive.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "secret123"


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage(tmp_path):
    return FileStorage(
        upload_dir=str(tmp_path / "uploads"),
        url_prefix="/uploads",
        max_size=1024 * 1024,
        allowed_extensions=get_settings().allowed_file_extensions,
    )


@pytest.fixture(autouse=True)
def no_redis():
    """Every test starts without a Redis connection."""
    client = get_redis_client()
    client.redis = None
    yield client
    client.redis = None


@pytest.fixture
def test_app(session_factory, storage):
    """App wired to the test database and a temporary upload dir."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_storage] = lambda: storage
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(session_factory):
    """Insert a user directly; returns the ORM object."""

    async def _make_user(name: str = "Ada", email: Optional[str] = None, bio=None) -> User:
        async with session_factory() as session:
            user = User(
                name=name,
                email=email or f"{name.lower()}-{uuid4().hex[:6]}@example.com",
                password_hash=hash_password(TEST_PASSWORD),
                bio=bio,
            )
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    return _make_user


@pytest.fixture
def make_note(session_factory):
    """Insert a note row without touching storage."""
    from notehive.core.repositories.note_repository import NoteRepository

    async def _make_note(author: User, title: str = "Algebra Basics", tags=(), **fields) -> Note:
        data = {
            "title": title,
            "description": fields.pop("description", f"About {title}"),
            "file_path": fields.pop("file_path", f"/uploads/{uuid4().hex}.pdf"),
            "file_type": "PDF",
            "file_size": 10,
            "author_id": author.id,
            **fields,
        }
        async with session_factory() as session:
            return await NoteRepository(session).create_note(data, tags)

    return _make_note


@pytest.fixture
def upload_note(client):
    """POST a multipart note upload through the API."""

    async def _upload(
        headers: dict,
        title: str = "Linear Algebra",
        tags: Optional[str] = "math,algebra",
        filename: str = "week1.pdf",
        content: bytes = b"%PDF-1.4 test",
    ):
        data = {"title": title, "description": f"About {title}"}
        if tags is not None:
            data["tags"] = tags
        return await client.post(
            "/api/notes",
            data=data,
            files={"file": (filename, content, "application/octet-stream")},
            headers=headers,
        )

    return _upload


def _bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def auth_for():
    """Build Authorization headers for any user."""
    return _bearer


@pytest.fixture
async def user(make_user):
    return await make_user("Ada")


@pytest.fixture
def auth_headers(user):
    return _bearer(user)


class FakeRedis:
    """Just the commands the blacklist uses."""

    def __init__(self):
        self.storage = {}

    async def setex(self, key, ttl, value):
        self.storage[key] = value
        return True

    async def set(self, key, value):
        self.storage[key] = value
        return True

    async def exists(self, key):
        return 1 if key in self.storage else 0

    async def ping(self):
        return True

    async def aclose(self):
        return None


@pytest.fixture
def fake_redis(no_redis):
    fake = FakeRedis()
    no_redis.redis = fake
    return fake
