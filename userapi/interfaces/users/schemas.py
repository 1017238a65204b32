"""
Pydantic schemas for users API request/response validation.

These schemas define the API contract. Each endpoint has its own
response model; the field sets intentionally differ between endpoints.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class UserPayload(BaseModel):
    """Request body for create and update. Every field is required.

    Values are coerced to strings; no format or uniqueness checks are
    made at this layer.
    """

    name: str = Field(..., description="Display name", examples=["Ann"])
    username: str = Field(..., description="Login name", examples=["ann1"])
    email: str = Field(..., description="Email address", examples=["ann@x.com"])
    password: str = Field(..., description="Password, stored as given")


class UserSummaryResponse(BaseModel):
    """Item of the ``GET /users`` response."""

    id: str
    name: str
    username: str
    email: str


class UserProfileResponse(BaseModel):
    """Response schema for ``GET /users/{id}``."""

    name: str
    username: str
    email: str


class UserMessageResponse(BaseModel):
    """Response schema for create and delete."""

    name: str
    username: str
    email: str
    message: str


class UserUpdatedResponse(BaseModel):
    """Response schema for ``PUT /users/update/{id}``."""

    name: str
    username: str
    email: str
    password: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers.

    ``code`` is an opaque incident reference set on internal errors; the
    same value is written to the server log.
    """

    error: str
    detail: str | None = None
    code: str | None = None
