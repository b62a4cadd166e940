"""Authentication service."""

import logging
from dataclasses import dataclass, field

import bcrypt
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import ErrorKind
from app.models.access_token import PersonalAccessToken
from app.models.user import User
from app.services.tokens import get_token_service

logger = logging.getLogger("monitorias.auth")

INVALID_CREDENTIALS = "Credenciales inválidas"


def hash_password(password: str) -> str:
    """Return a bcrypt hash of the given plaintext password."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


# Checked against when the email is unknown so both failure paths cost one bcrypt round.
_DUMMY_HASH = hash_password("monitorias-timing-dummy")


@dataclass
class CurrentSession:
    """Authenticated user plus the token that authenticated the request."""

    user: User
    token: PersonalAccessToken


@dataclass
class AuthResult:
    """Result of an authentication operation."""

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    user: User | None = None
    token: str | None = None

    @classmethod
    def failure(cls, kind: ErrorKind, error: str, errors: dict[str, list[str]] | None = None) -> "AuthResult":
        return cls(success=False, error=error, error_kind=kind, errors=errors or {})


class AuthService:
    """Handles registration, login and token lifecycle."""

    def __init__(self) -> None:
        self.tokens = get_token_service()

    def find_by_email(self, db: Session, email: str) -> User | None:
        """Case-insensitive lookup of a user by email."""
        return db.query(User).filter(func.lower(User.email) == email.lower().strip()).first()

    @staticmethod
    def _email_taken() -> AuthResult:
        return AuthResult.failure(
            ErrorKind.VALIDATION,
            "Los datos proporcionados no son válidos",
            {"email": ["El correo electrónico ya está registrado"]},
        )

    @staticmethod
    def _token_gone() -> AuthResult:
        return AuthResult.failure(ErrorKind.INVALID_TOKEN, "Token inválido o expirado")

    def register(self, db: Session, name: str, email: str, password: str) -> AuthResult:
        """Create a user and issue its first token.

        Field shape (required, email format, password policy, confirmation) is
        checked by the request schema; uniqueness needs the store so it is
        checked here, before anything is written.
        """
        if self.find_by_email(db, email):
            return self._email_taken()

        try:
            user = User(
                name=name.strip(),
                email=email.lower().strip(),
                password_hash=hash_password(password),
            )
            db.add(user)
            db.flush()
            token = self.tokens.issue(db, user)
            db.commit()
        except IntegrityError:
            # A concurrent registration claimed the email after the check above.
            db.rollback()
            logger.info("Registration lost the race for an existing email")
            return self._email_taken()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Registration failed for %s", email)
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al registrar usuario")

        db.refresh(user)
        logger.info("Registered user %s", user.id)
        return AuthResult(success=True, user=user, token=token)

    def login(self, db: Session, email: str, password: str) -> AuthResult:
        """Verify credentials, revoke every prior token and issue a fresh one."""
        try:
            user = self.find_by_email(db, email)
        except SQLAlchemyError:
            logger.exception("Login lookup failed")
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al iniciar sesión")

        if not user:
            verify_password(password, _DUMMY_HASH)
            return AuthResult.failure(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS)

        if not verify_password(password, user.password_hash):
            return AuthResult.failure(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS)

        try:
            revoked = self.tokens.revoke_all(db, user.id)
            token = self.tokens.issue(db, user)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Login failed for user %s", user.id)
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al iniciar sesión")

        logger.info("User %s logged in, %d previous token(s) revoked", user.id, revoked)
        return AuthResult(success=True, user=user, token=token)

    def logout(self, db: Session, session: CurrentSession) -> AuthResult:
        """Revoke the token that authenticated the current request."""
        try:
            if not self.tokens.revoke(db, session.token):
                return self._token_gone()
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Logout failed for user %s", session.user.id)
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al cerrar sesión")

        logger.info("User %s logged out", session.user.id)
        return AuthResult(success=True, user=session.user)

    def logout_all(self, db: Session, session: CurrentSession) -> AuthResult:
        """Revoke every token owned by the current user, the presented one included."""
        user_id = session.user.id
        try:
            revoked = self.tokens.revoke_all(db, user_id)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Logout-all failed for user %s", user_id)
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al cerrar todas las sesiones")

        logger.info("User %s closed all sessions (%d token(s))", user_id, revoked)
        return AuthResult(success=True)

    def me(self, session: CurrentSession) -> AuthResult:
        """Return the authenticated user."""
        return AuthResult(success=True, user=session.user)

    def refresh(self, db: Session, session: CurrentSession) -> AuthResult:
        """Rotate the presented token: revoke it and issue a replacement atomically."""
        user = session.user
        try:
            # A concurrent refresh or logout may already have consumed the token.
            if not self.tokens.revoke(db, session.token):
                return self._token_gone()
            token = self.tokens.issue(db, user)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Token refresh failed for user %s", user.id)
            return AuthResult.failure(ErrorKind.INTERNAL, "Error al refrescar el token")

        logger.info("Rotated token for user %s", user.id)
        return AuthResult(success=True, user=user, token=token)


_auth_service: AuthService | None = None


def get_auth_service() -> AuthService:
    """Get singleton auth service instance."""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
