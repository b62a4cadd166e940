"""Authentication dependencies for FastAPI routes."""

import logging

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.database import get_db
from app.errors import ApiError, ErrorKind
from app.services.auth import CurrentSession
from app.services.tokens import get_token_service

logger = logging.getLogger("monitorias.auth")


def get_bearer_token(request: Request) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header, if any."""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_current_session(
    request: Request,
    db: Session = Depends(get_db),
) -> CurrentSession:
    """Resolve the bearer token to a user. Raises 401 if missing or invalid, 500 if the store fails."""
    token_value = get_bearer_token(request)
    if not token_value:
        raise ApiError(ErrorKind.UNAUTHORIZED, "Token de acceso requerido")

    token_service = get_token_service()
    try:
        token = token_service.resolve(db, token_value)
        if not token:
            raise ApiError(ErrorKind.INVALID_TOKEN, "Token inválido o expirado")

        token_service.touch(db, token)
        db.commit()
        session = CurrentSession(user=token.user, token=token)
    except StaleDataError:
        # Revoked by another request between lookup and the last_used_at stamp.
        db.rollback()
        raise ApiError(ErrorKind.INVALID_TOKEN, "Token inválido o expirado") from None
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Token resolution failed")
        raise ApiError(ErrorKind.AUTHENTICATION_ERROR, "Error de autenticación") from None

    return session
