"""Ownership checks shared by the services."""

from uuid import UUID

from fastapi import HTTPException, status


def ensure_owner(owner_id: UUID, caller_id: UUID, action: str) -> None:
    """Raise 403 unless ``caller_id`` owns the resource.

    ``action`` completes the message, e.g. "delete this note".
    """
    if owner_id != caller_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action}",
        )


def not_found(resource: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")
