"""
Domain-specific errors for the users context.

All errors raised from the domain and application layers are defined
here. They are mapped to HTTP responses by the centralized handlers.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserDomainError):
    """Raised when a get, update or delete target does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class StoreError(UserDomainError):
    """Raised when the user store fails for any reason other than a
    missing record (connectivity, constraint violation, timeout, ...).

    ``reason`` is for operators only and must never reach a client.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"User store failure: {reason}")
        self.reason = reason
