"""Route interception: redirect page requests by session state before any handler runs."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from wisata.services.role_gate import RoleGate, TrackState
from wisata.services.session import clear_session_cookie
from wisata.services.tracks import TRACKS, Track

logger = logging.getLogger(__name__)

# Only page trees under these prefixes are intercepted.
INTERCEPTED_PREFIXES = ("/consumer", "/admin")


class TrackInterceptionMiddleware(BaseHTTPMiddleware):
    """
    Per request, evaluate each track on its own cookie only.

    - protected path, not signed in to that track: redirect to its login page.
    - auth-only path (login/register), already signed in: redirect to its landing page.
    - auth-only path with an unverifiable token: continue, and clear that cookie.
    The first redirect wins; a redirect never reaches the page handler.
    """

    def __init__(
        self,
        app: ASGIApp,
        gate: RoleGate,
        tracks: tuple[Track, ...] = TRACKS,
    ) -> None:
        super().__init__(app)
        self.gate = gate
        self.tracks = tracks

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if not path.startswith(INTERCEPTED_PREFIXES):
            return await call_next(request)

        stale_cookies: list[Track] = []
        for track in self.tracks:
            protected = track.is_protected(path)
            auth_only = track.is_auth_only(path)
            if not (protected or auth_only):
                continue
            token = request.cookies.get(track.cookie_name)
            state = self.gate.state(token, track)

            if protected and state is not TrackState.CORRECT_TRACK:
                logger.info(
                    "Redirecting to login",
                    extra={"track": track.name, "path": path, "state": state.value},
                )
                return RedirectResponse(url=track.login_path)
            if auth_only and state is TrackState.CORRECT_TRACK:
                return RedirectResponse(url=track.landing_path)
            if auth_only and token and state is TrackState.ANONYMOUS:
                logger.info(
                    "Clearing unverifiable session cookie",
                    extra={"track": track.name, "path": path},
                )
                stale_cookies.append(track)

        response = await call_next(request)
        for track in stale_cookies:
            clear_session_cookie(response, track)
        return response
