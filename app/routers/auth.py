"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_session
from app.errors import ApiError
from app.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileData,
    ProfileResponse,
    RegisterRequest,
    TokenData,
    TokenResponse,
    UserProfile,
    UserSummary,
)
from app.services.auth import AuthResult, CurrentSession, get_auth_service

router = APIRouter(prefix="/api", tags=["Authentication"])


def _raise_for_failure(result: AuthResult) -> None:
    if not result.success:
        raise ApiError(result.error_kind, result.error, result.errors or None)  # type: ignore[arg-type]


def _auth_data(result: AuthResult) -> AuthData:
    return AuthData(user=UserSummary.model_validate(result.user), token=result.token)  # type: ignore[arg-type]


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(body: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Register a new user account and return its first access token."""
    auth_service = get_auth_service()
    result = auth_service.register(db, body.name, body.email, body.password)
    _raise_for_failure(result)
    return AuthResponse(message="Usuario registrado exitosamente", data=_auth_data(result))


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Authenticate and receive a fresh access token. Prior tokens are revoked."""
    auth_service = get_auth_service()
    result = auth_service.login(db, body.email, body.password)
    _raise_for_failure(result)
    return AuthResponse(message="Inicio de sesión exitoso", data=_auth_data(result))


@router.post("/logout", response_model=MessageResponse)
def logout(
    session: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Revoke the token used for this request."""
    result = get_auth_service().logout(db, session)
    _raise_for_failure(result)
    return MessageResponse(message="Sesión cerrada exitosamente")


@router.post("/logout-all", response_model=MessageResponse)
def logout_all(
    session: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Revoke every token of the current user."""
    result = get_auth_service().logout_all(db, session)
    _raise_for_failure(result)
    return MessageResponse(message="Todas las sesiones han sido cerradas exitosamente")


@router.get("/me", response_model=ProfileResponse)
def me(session: CurrentSession = Depends(get_current_session)) -> ProfileResponse:
    """Return the authenticated user's profile."""
    result = get_auth_service().me(session)
    return ProfileResponse(data=ProfileData(user=UserProfile.model_validate(result.user)))


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    session: CurrentSession = Depends(get_current_session),
    db: Session = Depends(get_db),
) -> TokenResponse:
    """Replace the presented token with a new one."""
    result = get_auth_service().refresh(db, session)
    _raise_for_failure(result)
    data = TokenData(token=result.token)  # type: ignore[arg-type]
    return TokenResponse(message="Token refrescado exitosamente", data=data)
