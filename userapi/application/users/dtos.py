"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. Each endpoint has its own
result projection; the field sets differ on purpose (see DESIGN.md).
"""

from dataclasses import dataclass

USER_CREATED_MESSAGE = "User created successfully"
USER_DELETED_MESSAGE = "User deleted successfully"


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching one user.

    Attributes:
        user_id: Store-assigned identifier.
    """

    user_id: str


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user. All fields are required."""

    name: str
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for overwriting every field of an existing user.

    Attributes:
        user_id: Identifier of the user to overwrite.
        name: New display name.
        username: New username.
        email: New email address.
        password: New password, stored verbatim.
    """

    user_id: str
    name: str
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a user."""

    user_id: str


@dataclass(frozen=True)
class UserSummary:
    """List projection: everything except the password."""

    id: str
    name: str
    username: str
    email: str


@dataclass(frozen=True)
class UserProfile:
    """Get projection. The id is not echoed."""

    name: str
    username: str
    email: str


@dataclass(frozen=True)
class UserCreated:
    """Create projection: public fields plus a confirmation message."""

    name: str
    username: str
    email: str
    message: str = USER_CREATED_MESSAGE


@dataclass(frozen=True)
class UserUpdated:
    """Update projection. Echoes the stored password."""

    name: str
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class UserDeleted:
    """Delete projection: the removed user's public fields plus a message."""

    name: str
    username: str
    email: str
    message: str = USER_DELETED_MESSAGE
