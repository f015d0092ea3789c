"""Authentication dependencies."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.context import RequestContext
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security import get_user_id_from_token

NOT_AUTHORIZED = "Not authorized to access this route"


def _unauthorized(detail: str = NOT_AUTHORIZED) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class JWTBearer(HTTPBearer):
    """Extract the raw bearer token.

    ``HTTPBearer`` itself answers 403 for a missing header; here a missing
    or non-Bearer header is a 401, or ``None`` when ``required`` is off.
    """

    def __init__(self, required: bool = True):
        super().__init__(auto_error=False)
        self.required = required

    async def __call__(self, request: Request) -> Optional[str]:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials is None or not credentials.credentials:
            if self.required:
                raise _unauthorized()
            return None
        return credentials.credentials


async def _resolve_user_id(token: str, session: AsyncSession) -> Optional[UUID]:
    user_id = await get_user_id_from_token(token)
    if user_id is None:
        return None
    if await UserRepository(session).get_by_id(user_id) is None:
        return None
    return user_id


async def get_current_token(token: str = Depends(JWTBearer())) -> str:
    """The presented token, for logout."""
    return token


async def get_current_user_id(
    token: str = Depends(JWTBearer()),
    session: AsyncSession = Depends(get_db_session),
) -> UUID:
    """Authenticated user id; 401 before the handler runs otherwise."""
    user_id = await _resolve_user_id(token, session)
    if user_id is None:
        raise _unauthorized()
    return user_id


async def get_optional_user_id(
    token: Optional[str] = Depends(JWTBearer(required=False)),
    session: AsyncSession = Depends(get_db_session),
) -> Optional[UUID]:
    """Viewer id for public reads; any bad token just means anonymous."""
    if not token:
        return None
    return await _resolve_user_id(token, session)


async def get_request_context(
    viewer_id: Optional[UUID] = Depends(get_optional_user_id),
) -> RequestContext:
    return RequestContext(viewer_id=viewer_id)
