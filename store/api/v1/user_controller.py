# Standard library imports
import logging
from typing import List, Optional, Union

# External package imports
from fastapi import APIRouter, Header, Query, Request, Response, status

# Local application imports
from ...application.dto.user_dto import (
    ChangePasswordRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserDto,
)
from ...application.exceptions import StoreError
from ...application.use_cases.user import (
    ChangePasswordUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from ...di.container import get_container
from ..error_handlers import error_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserDto])
async def list_users(
    sort: str = Query(default="name"),
    x_auth_token: Optional[str] = Header(default=None),
) -> List[UserDto]:
    """
    List all users

    Args:
        sort: Field to sort by ("name" or "email"; anything else sorts by name)
        x_auth_token: Optional auth token header; only its presence is logged

    Returns:
        List of UserDto objects
    """
    logger.debug(f"Listing users (auth token present: {x_auth_token is not None})")

    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute(sort=sort)


@router.get("/{user_id}", response_model=UserDto)
async def get_user(user_id: str) -> Union[UserDto, Response]:
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    try:
        return await get_user_use_case.execute(user_id)
    except StoreError as exception:
        return error_response(exception)


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: RegisterUserRequest,
    http_request: Request,
    response: Response,
) -> Union[UserDto, Response]:
    """
    Register a new user

    Returns:
        UserDto with the created user; the Location header points to it
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        user = await register_use_case.execute(request)
    except StoreError as exception:
        return error_response(exception)

    response.headers["Location"] = str(http_request.url_for("get_user", user_id=user.id))
    return user


@router.put("/{user_id}", response_model=UserDto)
async def update_user(user_id: str, request: UpdateUserRequest) -> Union[UserDto, Response]:
    container = get_container()
    update_use_case = container.get(UpdateUserUseCase)

    try:
        return await update_use_case.execute(user_id, request)
    except StoreError as exception:
        return error_response(exception)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(user_id: str) -> Response:
    container = get_container()
    delete_use_case = container.get(DeleteUserUseCase)

    try:
        await delete_use_case.execute(user_id)
    except StoreError as exception:
        return error_response(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{user_id}/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def change_password(user_id: str, request: ChangePasswordRequest) -> Response:
    """
    Change a user's password

    Responds 404 if the user does not exist and 401 if the old password
    does not match; the stored password is left unchanged in both cases.
    """
    container = get_container()
    change_password_use_case = container.get(ChangePasswordUseCase)

    try:
        await change_password_use_case.execute(user_id, request)
    except StoreError as exception:
        return error_response(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
