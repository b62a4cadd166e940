"""Personal access token service.

Plaintext tokens look like ``<id>|<secret>``. Only ``sha256(secret)`` is
persisted, so a leaked database does not yield usable tokens and the
plaintext can only be handed out once, at issuance.
"""

import hashlib
import hmac
import logging
import secrets
from datetime import datetime

from sqlalchemy.orm import Session

from app.config import get_settings
from app.models.access_token import PersonalAccessToken
from app.models.user import User

logger = logging.getLogger("monitorias.tokens")

SECRET_LENGTH = 40
MAX_ID = 2**63 - 1
MAX_ID_DIGITS = len(str(MAX_ID))


def hash_token(secret: str) -> str:
    """Return the SHA-256 hex digest stored for a token secret."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def _generate_secret() -> str:
    alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    return "".join(secrets.choice(alphabet) for _ in range(SECRET_LENGTH))


class TokenService:
    """Issues, resolves and revokes personal access tokens.

    None of these methods commit: the caller decides where the transaction
    boundary is so compound operations (revoke + issue) stay atomic.
    """

    def __init__(self) -> None:
        self.default_name = get_settings().TOKEN_NAME

    def issue(self, db: Session, user: User, name: str | None = None) -> str:
        """Create a token for the user and return its plaintext form."""
        secret = _generate_secret()
        token = PersonalAccessToken(
            user_id=user.id,
            name=name or self.default_name,
            token_hash=hash_token(secret),
        )
        db.add(token)
        db.flush()
        logger.debug("Issued token %s for user %s", token.id, user.id)
        return f"{token.id}|{secret}"

    def resolve(self, db: Session, plaintext: str) -> PersonalAccessToken | None:
        """Look up the token matching a plaintext value. Returns None if unknown or revoked."""
        if not plaintext:
            return None

        if "|" not in plaintext:
            return db.query(PersonalAccessToken).filter(PersonalAccessToken.token_hash == hash_token(plaintext)).first()

        token_id, secret = plaintext.split("|", 1)
        if not (token_id.isascii() and token_id.isdigit()) or not secret:
            return None
        # Ids past the 64-bit range cannot exist and overflow the driver.
        if len(token_id) > MAX_ID_DIGITS or int(token_id) > MAX_ID:
            return None

        token = db.get(PersonalAccessToken, int(token_id))
        if not token:
            return None

        if not hmac.compare_digest(token.token_hash, hash_token(secret)):
            return None
        return token

    def touch(self, db: Session, token: PersonalAccessToken) -> None:
        """Record that the token was just used."""
        token.last_used_at = datetime.utcnow()

    def revoke(self, db: Session, token: PersonalAccessToken) -> bool:
        """Delete a single token. Returns False if another request already removed it."""
        count = (
            db.query(PersonalAccessToken)
            .filter(PersonalAccessToken.id == token.id)
            .delete(synchronize_session="fetch")
        )
        db.flush()
        return count > 0

    def revoke_all(self, db: Session, user_id: int) -> int:
        """Delete every token owned by the user. Returns the number of tokens removed."""
        count = (
            db.query(PersonalAccessToken)
            .filter(PersonalAccessToken.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
        db.flush()
        return count


_token_service: TokenService | None = None


def get_token_service() -> TokenService:
    """Get singleton token service instance."""
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service
