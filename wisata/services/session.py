"""Session issuing and teardown: login against a track, set and clear session cookies."""

import logging
from dataclasses import dataclass

from starlette.responses import Response

from wisata.core.security import (
    SESSION_MAX_AGE_SECONDS,
    SESSION_TTL,
    TokenCodec,
    dummy_password_hash,
    verify_password,
)
from wisata.schemas.auth import PublicUser
from wisata.services.credentials import CredentialStore
from wisata.services.errors import InvalidCredentials
from wisata.services.tracks import Track

logger = logging.getLogger(__name__)

# Expires header value for a cookie that is already expired.
EXPIRED_COOKIE_DATE = "Thu, 01 Jan 1970 00:00:00 GMT"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: PublicUser


class SessionIssuer:
    """Checks credentials for one track and issues a session token."""

    def __init__(self, store: CredentialStore, codec: TokenCodec) -> None:
        self.store = store
        self.codec = codec

    def login(self, track: Track, email: str, password: str) -> LoginResult:
        """
        Authenticate email/password for the given track.

        Raises InvalidCredentials with the same message whether the email is
        unknown, belongs to the other track, or the password is wrong.
        UpstreamUnavailable from the store propagates unchanged.
        """
        user = self.store.find_by_email(email)
        if user is None:
            verify_password(password, dummy_password_hash())
            logger.info("Login rejected", extra={"track": track.name, "reason": "unknown_email"})
            raise InvalidCredentials()
        if not track.permits(user.role):
            verify_password(password, dummy_password_hash())
            logger.info("Login rejected", extra={"track": track.name, "reason": "wrong_track"})
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.info("Login rejected", extra={"track": track.name, "reason": "bad_password"})
            raise InvalidCredentials()

        public = PublicUser.model_validate(user)
        token = self.codec.issue(public.model_dump(), ttl=SESSION_TTL)
        logger.info("Login succeeded", extra={"track": track.name, "user_id": public.id})
        return LoginResult(token=token, user=public)


def set_session_cookie(response: Response, track: Track, token: str, secure: bool) -> None:
    """Attach the track's session cookie (HttpOnly, Path=/, 7 days)."""
    response.set_cookie(
        key=track.cookie_name,
        value=token,
        max_age=SESSION_MAX_AGE_SECONDS,
        path="/",
        secure=secure,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, track: Track) -> None:
    """Overwrite the track's cookie with an empty, already-expired one. Safe to repeat."""
    response.set_cookie(
        key=track.cookie_name,
        value="",
        max_age=0,
        expires=EXPIRED_COOKIE_DATE,
        path="/",
        httponly=True,
        samesite="lax",
    )
