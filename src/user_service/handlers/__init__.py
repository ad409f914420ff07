"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on
repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .user_handler import USER_RESOURCE_PATH, UserHandler

__all__ = [
    "UserHandler",
    "USER_RESOURCE_PATH",
]
