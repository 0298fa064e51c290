# Standard library imports
import logging
import re
from typing import NoReturn, Optional, Type, TypeVar

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ValidationError

# Local application imports
from ...application.dto.user_dto import (
    CreateUserRequest,
    CreateUserResponse,
    ErrorResponse,
    UpdateEmailRequest,
    UpdateUserRequest,
    UserResponse,
)
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.update_user_email import UpdateUserEmailUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.container import DIContainer
from ...domain.exceptions import ErrorKind, UserServiceError
from .dependencies import get_container

logger = logging.getLogger(__name__)

BAD_USER_ID = "bad user id"
BAD_USER_PAYLOAD = "bad user payload"
NO_EMAIL = "no email provided"
INTERNAL_ERROR = "internal error"

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1

RequestModel = TypeVar("RequestModel", bound=BaseModel)

router = APIRouter(
    tags=["users"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)


def _parse_user_id(raw_user_id: str) -> Optional[int]:
    """Return the path id as an int, or None if it is not a 64-bit signed integer"""
    if not _USER_ID_PATTERN.fullmatch(raw_user_id):
        return None
    try:
        user_id = int(raw_user_id)
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        return None
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        return None
    return user_id


async def _parse_body(request: Request, model: Type[RequestModel]) -> Optional[RequestModel]:
    """
    Decode a JSON object body into model

    Returns:
        Parsed model, or None if the body is not a JSON object of the expected shape
    """
    try:
        payload = await request.json()
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None

    try:
        return model.model_validate(payload)
    except ValidationError:
        return None


def _require_user_id(raw_user_id: str) -> int:
    user_id = _parse_user_id(raw_user_id)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_USER_ID)
    return user_id


def _raise_for(exception: UserServiceError, action: str) -> NoReturn:
    """
    Translate a domain error into an HTTP error.

    Validation failures are the caller's fault (400); not-found and storage
    failures are reported as a generic internal error (500).
    """
    if exception.kind == ErrorKind.VALIDATION:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)

    logger.error(f"Failed {action}: {exception}", exc_info=exception)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.post("", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    container: DIContainer = Depends(get_container),
):
    """
    Create a new user

    Create answers 400 with a plain-text body, unlike every other
    error response.
    """
    body = await _parse_body(request, CreateUserRequest)
    if body is None:
        return PlainTextResponse(BAD_USER_PAYLOAD, status_code=status.HTTP_400_BAD_REQUEST)

    create_use_case = container.get(CreateUserUseCase)

    try:
        return await create_use_case.execute(body)
    except UserServiceError as exception:
        if exception.kind == ErrorKind.VALIDATION:
            return PlainTextResponse(exception.message, status_code=status.HTTP_400_BAD_REQUEST)
        _raise_for(exception, "creating user")


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Get a user by ID

    Args:
        user_id: Numeric user ID from the path

    Returns:
        UserResponse with user information
    """
    parsed_user_id = _require_user_id(user_id)
    get_use_case = container.get(GetUserUseCase)

    try:
        return await get_use_case.execute(parsed_user_id)
    except UserServiceError as exception:
        _raise_for(exception, f"getting user {parsed_user_id}")


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: Request,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Replace email and name of a user

    Returns:
        UserResponse with the stored values
    """
    parsed_user_id = _require_user_id(user_id)

    body = await _parse_body(request, UpdateUserRequest)
    if body is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_USER_PAYLOAD)

    update_use_case = container.get(UpdateUserUseCase)

    try:
        return await update_use_case.execute(parsed_user_id, body)
    except UserServiceError as exception:
        _raise_for(exception, f"updating user {parsed_user_id}")


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_email(
    user_id: str,
    request: Request,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Change a user's email and return the refreshed record

    Returns:
        UserResponse read back after the update
    """
    parsed_user_id = _require_user_id(user_id)

    body = await _parse_body(request, UpdateEmailRequest)
    if body is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_USER_PAYLOAD)
    if body.email is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_EMAIL)

    update_email_use_case = container.get(UpdateUserEmailUseCase)
    get_use_case = container.get(GetUserUseCase)

    try:
        await update_email_use_case.execute(parsed_user_id, body.email)
        return await get_use_case.execute(parsed_user_id)
    except UserServiceError as exception:
        _raise_for(exception, f"updating email of user {parsed_user_id}")


@router.delete("/{user_id}", response_class=Response)
async def delete_user(
    user_id: str,
    container: DIContainer = Depends(get_container),
) -> Response:
    """
    Delete a user

    Returns:
        Empty 200 response
    """
    parsed_user_id = _require_user_id(user_id)
    delete_use_case = container.get(DeleteUserUseCase)

    try:
        await delete_use_case.execute(parsed_user_id)
    except UserServiceError as exception:
        _raise_for(exception, f"deleting user {parsed_user_id}")

    return Response(status_code=status.HTTP_200_OK)
