"""Role gate: decide which track a session token authenticates for."""

import enum

from wisata.core.security import TokenCodec
from wisata.schemas.auth import PublicUser
from wisata.services.tracks import Track


class TrackState(str, enum.Enum):
    ANONYMOUS = "anonymous"
    WRONG_TRACK = "wrong_track"
    CORRECT_TRACK = "correct_track"


class RoleGate:
    """
    Pure check of (token, track): verifies the token and matches its role.

    The credential store is not consulted, so a demoted or deleted account
    keeps access until its token expires.
    """

    def __init__(self, codec: TokenCodec) -> None:
        self.codec = codec

    def state(self, token: str | None, track: Track) -> TrackState:
        return self._evaluate(token, track)[0]

    def authorize(self, token: str | None, track: Track) -> PublicUser | None:
        """Return the identity carried by the token when it belongs to the track, else None."""
        return self._evaluate(token, track)[1]

    def _evaluate(self, token: str | None, track: Track) -> tuple[TrackState, PublicUser | None]:
        payload = self.codec.verify(token)
        if payload is None:
            return TrackState.ANONYMOUS, None
        if not track.permits(payload.get("role")):
            return TrackState.WRONG_TRACK, None
        name = payload.get("name")
        identity = PublicUser(
            id=payload["id"],
            email=payload["email"],
            name=name if isinstance(name, str) else None,
            role=payload["role"],
        )
        return TrackState.CORRECT_TRACK, identity
