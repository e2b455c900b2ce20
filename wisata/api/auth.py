"""Login, logout and identity-check routes, built once per authorization track."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from wisata.api.deps import (
    authorize_request,
    get_app_settings,
    get_credential_store,
    get_role_gate,
    get_token_codec,
    security,
)
from wisata.core.config import Settings
from wisata.core.security import TokenCodec, hash_password
from wisata.models.user import Role
from wisata.schemas.auth import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    PublicUser,
    RegisterRequest,
    RegisterResponse,
)
from wisata.services.credentials import CredentialStore
from wisata.services.errors import DuplicateEmail
from wisata.services.role_gate import RoleGate
from wisata.services.session import SessionIssuer, clear_session_cookie, set_session_cookie
from wisata.services.tracks import ADMIN_TRACK, CONSUMER_TRACK, Track

logger = logging.getLogger(__name__)


def build_track_router(track: Track) -> APIRouter:
    """Routes for one track: POST /login, POST /logout, GET /me."""
    router = APIRouter()

    @router.post("/login", response_model=LoginResponse)
    def login(
        body: LoginRequest,
        response: Response,
        store: Annotated[CredentialStore, Depends(get_credential_store)],
        codec: Annotated[TokenCodec, Depends(get_token_codec)],
        app_settings: Annotated[Settings, Depends(get_app_settings)],
    ) -> LoginResponse:
        """
        Authenticate with email and password. Sets the track's HttpOnly cookie and
        also returns the token for clients that send it as Authorization: Bearer.
        """
        result = SessionIssuer(store, codec).login(track, body.email, body.password)
        set_session_cookie(response, track, result.token, secure=app_settings.cookie_secure)
        return LoginResponse(user=result.user, token=result.token)

    @router.post("/logout", response_model=LogoutResponse)
    def logout(response: Response) -> LogoutResponse:
        """Clear the session cookie. Always succeeds; the token itself stays valid until expiry."""
        clear_session_cookie(response, track)
        return LogoutResponse()

    @router.get("/me", response_model=IdentityResponse)
    def me(
        request: Request,
        credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
        gate: Annotated[RoleGate, Depends(get_role_gate)],
    ) -> IdentityResponse | JSONResponse:
        identity = authorize_request(gate, request, track, credentials)
        if identity is None:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"authenticated": False, "message": "Not authenticated"},
            )
        return IdentityResponse(user=identity)

    return router


consumer_router = build_track_router(CONSUMER_TRACK)
admin_router = build_track_router(ADMIN_TRACK)


@consumer_router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_consumer(
    body: RegisterRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> RegisterResponse:
    """Create a CONSUMER account. Does not sign the new account in."""
    if store.find_by_email(body.email) is not None:
        raise DuplicateEmail()
    user = store.create(
        email=body.email,
        password_hash=hash_password(body.password),
        role=Role.CONSUMER.value,
        name=body.name,
        phone_number=body.phone_number,
        address=body.address,
    )
    logger.info("Consumer registered", extra={"user_id": user.id})
    return RegisterResponse(user=PublicUser.model_validate(user))
