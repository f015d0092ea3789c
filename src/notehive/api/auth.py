"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest
from ..core.schemas.common import SuccessResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_token, get_current_user_id

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user and return it with a token."""
    auth_service = AuthService(session)
    return AuthResponse(data=await auth_service.register_user(request))


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get a JWT."""
    auth_service = AuthService(session)
    return AuthResponse(data=await auth_service.authenticate_user(request))


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return CurrentUserResponse(data=await auth_service.get_current_user(current_user_id))


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    current_user_id: UUID = Depends(get_current_user_id),
    token: str = Depends(get_current_token),
    session: AsyncSession = Depends(get_db_session),
):
    """Invalidate the presented token."""
    auth_service = AuthService(session)
    await auth_service.logout_user(token)
    return SuccessResponse(message="Logged out successfully")
