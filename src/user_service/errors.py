"""Error hierarchy for the user service.

Repositories raise these; services let them through untouched; the handler
layer is the only place that turns them into HTTP responses.
"""


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, code: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def __str__(self) -> str:
        return self.message


class ValidationError(UserServiceError):
    """Malformed or missing input, detected before any persistence call."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.field = field


class UserNotFoundError(UserServiceError):
    """The store confirmed that no user has the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__("user not found", "USER_NOT_FOUND", 404)
        self.user_id = user_id


class PersistenceError(UserServiceError):
    """Any store failure other than a confirmed absence."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message, "PERSISTENCE_ERROR", 500)
        self.operation = operation


class ConfigurationError(UserServiceError):
    """Required configuration is missing or invalid at startup."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", 500)
        self.key = key
