"""Shared dependencies: settings, token codec, credential store and track guards."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from wisata.core.config import Settings
from wisata.core.database import get_db
from wisata.core.security import TokenCodec
from wisata.schemas.auth import PublicUser
from wisata.services.credentials import CredentialStore, SqlCredentialStore
from wisata.services.errors import TokenInvalid
from wisata.services.role_gate import RoleGate
from wisata.services.tracks import ADMIN_TRACK, CONSUMER_TRACK, Track

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_role_gate(codec: Annotated[TokenCodec, Depends(get_token_codec)]) -> RoleGate:
    return RoleGate(codec)


def get_credential_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    return SqlCredentialStore(db)


def session_tokens(
    request: Request,
    track: Track,
    credentials: HTTPAuthorizationCredentials | None,
) -> list[str]:
    """Candidate tokens for a track: its cookie first, then a Bearer header for non-cookie clients."""
    tokens = []
    cookie = request.cookies.get(track.cookie_name)
    if cookie:
        tokens.append(cookie)
    if credentials is not None and credentials.credentials:
        tokens.append(credentials.credentials)
    return tokens


def authorize_request(
    gate: RoleGate,
    request: Request,
    track: Track,
    credentials: HTTPAuthorizationCredentials | None,
) -> PublicUser | None:
    """Identity from the first candidate token that authorizes on `track`.

    A stale or foreign cookie does not hide a valid Bearer token.
    """
    for token in session_tokens(request, track, credentials):
        identity = gate.authorize(token, track)
        if identity is not None:
            return identity
    return None


def require_track(track: Track) -> Callable[..., PublicUser]:
    """Build a dependency that returns the caller's identity on `track` or raises TokenInvalid."""

    def dependency(
        request: Request,
        credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
        gate: Annotated[RoleGate, Depends(get_role_gate)],
    ) -> PublicUser:
        identity = authorize_request(gate, request, track, credentials)
        if identity is None:
            logger.info(
                "Request denied",
                extra={"track": track.name, "path": request.url.path},
            )
            raise TokenInvalid()
        return identity

    dependency.__name__ = f"require_{track.name}"
    return dependency


require_consumer = require_track(CONSUMER_TRACK)
require_admin = require_track(ADMIN_TRACK)
