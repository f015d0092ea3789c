"""Authentication service implementation."""

from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import blacklist_token, create_access_token, hash_password, verify_and_upgrade
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthUserResponse, LoginRequest, RegisterRequest, UserResponse
from .access import not_found
from .interfaces import IAuthService
from .mappers import user_to_response

logger = get_logger("auth")


def _with_token(user: User) -> AuthUserResponse:
    token = create_access_token(data={"sub": str(user.id)})
    return AuthUserResponse(**user_to_response(user).model_dump(), token=token)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def register_user(self, request: RegisterRequest) -> AuthUserResponse:
        """Register new user."""
        email = User.normalize_email(request.email)
        if await self.user_repo.is_email_taken(email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists"
            )

        user_data = {
            "name": request.name,
            "email": email,
            "password_hash": hash_password(request.password),
        }
        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race with a concurrent registration
            await self.session.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists"
            )

        logger.info("User registered", extra={"user_id": str(user.id)})
        return _with_token(user)

    async def authenticate_user(self, request: LoginRequest) -> AuthUserResponse:
        """Login user and return a fresh access token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
            )

        valid, new_hash = verify_and_upgrade(request.password, user.password_hash)
        if not valid:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
            )
        if new_hash:
            user = await self.user_repo.update_user(user.id, {"password_hash": new_hash})

        return _with_token(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise not_found("User")
        return user_to_response(user)

    async def logout_user(self, access_token: str) -> bool:
        """Blacklist the token; without Redis the logout still succeeds."""
        blacklisted = await blacklist_token(access_token)
        if not blacklisted:
            logger.warning("Logout without blacklist entry")
        return blacklisted
