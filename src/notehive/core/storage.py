"""
Local file storage for uploaded notes and avatars.

Files are written under ``upload_dir`` and exposed publicly as
``<uploads_url_prefix>/<stored name>``; that public path is what the
database keeps.
"""

import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from fastapi import HTTPException, UploadFile, status

from ..config import Settings, get_settings
from .logging import get_logger

logger = get_logger("storage")

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class StoredFile:
    """Result of a successful upload."""

    path: str  # public path, e.g. /uploads/1700000000000-notes.pdf
    file_type: str  # upper-case extension without the dot
    size: int
    original_name: str


def stored_name_for(filename: str, now_ms: Optional[int] = None) -> str:
    """``<epoch-ms>-<name with whitespace runs replaced by ->``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    safe = re.sub(r"\s+", "-", Path(filename).name)
    return f"{now_ms}-{safe}"


class FileStorage:
    def __init__(
        self,
        upload_dir: str,
        url_prefix: str = "/uploads",
        max_size: int = 10 * 1024 * 1024,
        allowed_extensions: Iterable[str] = (),
    ):
        self.root = Path(upload_dir)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_size = max_size
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}

    def ensure_root(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def is_allowed(self, filename: str) -> bool:
        suffix = Path(filename).suffix.lower()
        if not suffix:
            return False
        return not self.allowed_extensions or suffix in self.allowed_extensions

    async def save(self, upload: UploadFile) -> StoredFile:
        """Validate and persist an upload; 400 on a bad type or size."""
        filename = upload.filename or ""
        if not filename:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is required")
        if not self.is_allowed(filename):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid file type. Only documents, images and archives are allowed.",
            )

        target = self.ensure_root() / stored_name_for(filename)
        size = 0
        try:
            with target.open("wb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_size:
                        raise HTTPException(
                            status_code=status.HTTP_400_BAD_REQUEST,
                            detail=f"File too large. Maximum size is {self.max_size // (1024 * 1024)}MB",
                        )
                    out.write(chunk)
        except Exception:
            # oversize, disk errors and dropped clients all leave a partial file
            target.unlink(missing_ok=True)
            raise

        logger.info("Stored upload", extra={"stored_file": target.name, "size": size})
        return StoredFile(
            path=f"{self.url_prefix}/{target.name}",
            file_type=Path(filename).suffix.lstrip(".").upper(),
            size=size,
            original_name=filename,
        )

    def resolve(self, public_path: str) -> Optional[Path]:
        """Map a public path back to disk; ``None`` if it points outside the root."""
        name = public_path
        if name.startswith(self.url_prefix + "/"):
            name = name[len(self.url_prefix) + 1 :]
        candidate = (self.root / name).resolve()
        root = self.root.resolve()
        if candidate == root or root not in candidate.parents:
            return None
        return candidate

    def exists(self, public_path: str) -> bool:
        path = self.resolve(public_path)
        return path is not None and path.is_file()

    def delete(self, public_path: Optional[str]) -> bool:
        """Best effort: failures are logged and reported as ``False``."""
        if not public_path:
            return False
        path = self.resolve(public_path)
        if path is None:
            logger.warning("Refusing to delete path outside uploads", extra={"path": public_path})
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning("File already gone", extra={"path": public_path})
            return False
        except OSError as e:
            logger.error(f"Failed to delete file: {e}", extra={"path": public_path})
            return False
        return True


def build_storage(settings: Settings) -> FileStorage:
    return FileStorage(
        upload_dir=settings.upload_dir,
        url_prefix=settings.uploads_url_prefix,
        max_size=settings.max_file_size_bytes,
        allowed_extensions=settings.allowed_file_extensions,
    )


def get_storage() -> FileStorage:
    """FastAPI dependency."""
    return build_storage(get_settings())
