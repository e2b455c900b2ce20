"""Password hashing and JWT session token creation/verification."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# Session tokens live exactly 7 days; there is no refresh or rotation.
SESSION_TTL = timedelta(days=7)
SESSION_MAX_AGE_SECONDS = int(SESSION_TTL.total_seconds())

PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# Claims a decoded token must carry to identify a user.
IDENTITY_CLAIMS = ("id", "email", "role")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. Empty or malformed hashes never match."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when no account exists, so unknown emails cost a bcrypt check too."""
    return hash_password("wisata-no-such-account")


class TokenCodec:
    """
    Signs and verifies session tokens with one process-wide secret.

    The secret is passed in at construction (from Settings) so tests can use their own.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("Token secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm

    def issue(
        self,
        claims: dict[str, Any],
        ttl: timedelta = SESSION_TTL,
        now: datetime | None = None,
    ) -> str:
        """Create a signed token from claims plus iat/exp (epoch seconds)."""
        issued_at = int((now or datetime.now(UTC)).timestamp())
        payload: dict[str, Any] = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + int(ttl.total_seconds())
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> dict[str, Any] | None:
        """
        Decode and validate a token; return its payload or None.

        None covers every failure (missing, malformed, bad signature, expired,
        missing claims). The reason is only logged, never returned.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            logger.debug("Session token rejected: %s", type(e).__name__)
            return None
        if not all(isinstance(payload.get(claim), str) and payload[claim] for claim in IDENTITY_CLAIMS):
            logger.debug("Session token rejected: missing identity claims")
            return None
        return payload
