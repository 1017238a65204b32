"""
FastAPI router for the users context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path

from userapi.application.users.create_user import CreateUserUseCase
from userapi.application.users.delete_user import DeleteUserUseCase
from userapi.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UpdateUserCommand,
)
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from userapi.interfaces.users.schemas import (
    ErrorResponse,
    UserMessageResponse,
    UserPayload,
    UserProfileResponse,
    UserSummaryResponse,
    UserUpdatedResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserSummaryResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List users",
    description="Return every user without passwords, in store order.",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserSummaryResponse]:
    """List all users."""
    return [
        UserSummaryResponse(
            id=r.id, name=r.name, username=r.username, email=r.email
        )
        for r in use_case.execute()
    ]


@router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a user",
    description="Return name, username and email of one user.",
)
def get_user(
    user_id: str = Path(..., min_length=1, description="Store-assigned user id"),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserProfileResponse:
    """Get a single user by id."""
    result = use_case.execute(GetUserQuery(user_id=user_id))
    return UserProfileResponse(
        name=result.name, username=result.username, email=result.email
    )


@router.post(
    "/create",
    response_model=UserMessageResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Create a user",
)
def create_user(
    payload: UserPayload,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserMessageResponse:
    """Create a user from the request body."""
    result = use_case.execute(
        CreateUserCommand(
            name=payload.name,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    )
    return UserMessageResponse(
        name=result.name,
        username=result.username,
        email=result.email,
        message=result.message,
    )


@router.put(
    "/update/{user_id}",
    response_model=UserUpdatedResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Overwrite a user",
    description="Replace every field of an existing user.",
)
def update_user(
    payload: UserPayload,
    user_id: str = Path(..., min_length=1, description="Store-assigned user id"),
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserUpdatedResponse:
    """Overwrite all fields of a user."""
    result = use_case.execute(
        UpdateUserCommand(
            user_id=user_id,
            name=payload.name,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    )
    return UserUpdatedResponse(
        name=result.name,
        username=result.username,
        email=result.email,
        password=result.password,
    )


@router.delete(
    "/delete/{user_id}",
    response_model=UserMessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a user",
)
def delete_user(
    user_id: str = Path(..., min_length=1, description="Store-assigned user id"),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> UserMessageResponse:
    """Delete a user and return what was removed."""
    result = use_case.execute(DeleteUserCommand(user_id=user_id))
    return UserMessageResponse(
        name=result.name,
        username=result.username,
        email=result.email,
        message=result.message,
    )
