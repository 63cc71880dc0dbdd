"""Domain exceptions raised by services and translated to HTTP responses in main."""


class GatekeeperError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(GatekeeperError):
    """Bad credentials, or a missing, malformed or expired token."""

    status_code = 401
    default_message = "Invalid Login"


class Forbidden(GatekeeperError):
    """Authenticated, but the role lacks the required capability."""

    status_code = 403
    default_message = "Access Denied"


class NotFound(GatekeeperError):
    status_code = 404
    default_message = "Not Found"


class ValidationError(GatekeeperError):
    """Malformed request payload."""

    status_code = 422
    default_message = "Invalid payload"

    def __init__(self, message: str | None = None, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class Conflict(ValidationError):
    """Payload is well-formed but collides with existing state (e.g. duplicate username)."""

    status_code = 409
    default_message = "Conflict"
