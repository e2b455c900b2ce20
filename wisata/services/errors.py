"""Authentication errors surfaced to clients with a generic message and a status code."""


class AuthError(Exception):
    """Base for auth failures; message is safe to show to the client."""

    status_code = 400
    default_message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(AuthError):
    """Unknown email, wrong password or wrong track. Deliberately indistinguishable."""

    status_code = 401
    default_message = "Invalid email or password"


class TokenInvalid(AuthError):
    """Session token missing, malformed, expired, tampered or for the wrong track."""

    status_code = 401
    default_message = "Unauthorized"


class UpstreamUnavailable(AuthError):
    """The credential store could not be reached or failed."""

    status_code = 500
    default_message = "Authentication service unavailable"


class DuplicateEmail(AuthError):
    status_code = 400
    default_message = "Email is already registered"


class SuperAdminExists(AuthError):
    status_code = 403
    default_message = "Super admin already exists"
