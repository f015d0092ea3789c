"""Unit tests for local upload storage."""

import io

import pytest
from fastapi import HTTPException, UploadFile

from notehive.core.storage import FileStorage, stored_name_for


def _upload(name: str, content: bytes = b"hello") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


@pytest.fixture
def small_storage(tmp_path):
    return FileStorage(
        upload_dir=str(tmp_path / "files"),
        max_size=16,
        allowed_extensions=[".pdf", ".txt", ".png"],
    )


def test_stored_name_replaces_whitespace():
    assert stored_name_for("my  lecture notes.pdf", now_ms=1700000000000) == (
        "1700000000000-my-lecture-notes.pdf"
    )


def test_stored_name_drops_directories():
    assert stored_name_for("../../etc/passwd.txt", now_ms=1) == "1-passwd.txt"


async def test_save_writes_file_and_reports_metadata(small_storage):
    stored = await small_storage.save(_upload("Week 1.pdf", b"%PDF-1"))

    assert stored.path.startswith("/uploads/")
    assert stored.path.endswith("-Week-1.pdf")
    assert stored.file_type == "PDF"
    assert stored.size == 6
    assert small_storage.exists(stored.path)


async def test_save_rejects_unknown_extension(small_storage):
    with pytest.raises(HTTPException) as exc_info:
        await small_storage.save(_upload("virus.exe"))
    assert exc_info.value.status_code == 400


async def test_save_rejects_oversized_file_and_cleans_up(small_storage):
    with pytest.raises(HTTPException) as exc_info:
        await small_storage.save(_upload("big.txt", b"x" * 17))

    assert exc_info.value.status_code == 400
    assert list(small_storage.root.iterdir()) == []


class _DroppedUpload:
    """Upload whose client disconnects after the first chunk."""

    filename = "half.txt"

    def __init__(self):
        self._sent = False

    async def read(self, size: int = -1) -> bytes:
        if self._sent:
            raise OSError("connection reset")
        self._sent = True
        return b"part"


async def test_save_removes_partial_file_when_read_fails(small_storage):
    with pytest.raises(OSError):
        await small_storage.save(_DroppedUpload())

    assert list(small_storage.root.iterdir()) == []


async def test_delete_is_best_effort(small_storage):
    stored = await small_storage.save(_upload("a.txt"))

    assert small_storage.delete(stored.path) is True
    assert small_storage.exists(stored.path) is False
    # second delete: already gone, no exception
    assert small_storage.delete(stored.path) is False


def test_resolve_refuses_paths_outside_root(small_storage):
    assert small_storage.resolve("/uploads/../../secret.txt") is None
    assert small_storage.delete("/uploads/../../secret.txt") is False
