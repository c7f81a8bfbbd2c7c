"""Domain errors raised by the services.

Each error knows the HTTP status it maps to; the handlers in ``main.py``
turn them into ``{"error": message}`` responses.
"""


class TravelError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class NotFound(TravelError):
    status_code = 404
    message = "Not found"


class DuplicateEmail(TravelError):
    status_code = 400
    message = "Email already exists"


class DuplicateFavorite(TravelError):
    status_code = 400
    message = "Already in favorites"


class InvalidCredentials(TravelError):
    status_code = 400
    message = "Invalid password"


class Unauthenticated(TravelError):
    status_code = 401
    message = "Unauthorized"


class Forbidden(TravelError):
    status_code = 403
    message = "Forbidden"


class InternalError(TravelError):
    status_code = 500
    message = "Internal server error"


class UpstreamUnavailable(TravelError):
    """Upstream AI call failed. Never leaves the hotel service."""

    status_code = 502
    message = "Upstream service unavailable"


class UserNotFound(NotFound):
    """Login with an unknown email. Answered with 400 like a bad password."""

    status_code = 400
    message = "User not found"
