"""HTTP handlers for user operations.

Handlers convert between DTOs (API contracts) and service calls.
They own every HTTP concern: parsing input, status codes, and which
error text the caller gets to see.
"""

import logging
import re

from fastapi import HTTPException, Response, status
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from user_service.dto import CreateUserRequest, MessageResponse, UserResponse
from user_service.errors import ValidationError
from user_service.protocols import CreateUserCommand, GetUserByIdQuery

logger = logging.getLogger(__name__)

USER_RESOURCE_PATH = "/api/v1/user"

INVALID_INPUT_MESSAGE = "Invalid input"
CREATE_FAILED_MESSAGE = "Could not create user"
CREATED_MESSAGE = "User created successfully"
INVALID_USER_ID_MESSAGE = "invalid user id"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_create_request(raw_body: bytes) -> CreateUserRequest:
    """Parse a JSON body into a CreateUserRequest.

    Raises:
        ValidationError: If the body is not JSON or has the wrong shape.
            The parser's own message is not kept.
    """
    try:
        return CreateUserRequest.model_validate_json(raw_body)
    except PydanticValidationError as e:
        logger.warning(f"Rejected create-user body: {e.error_count()} error(s)")
        raise ValidationError(INVALID_INPUT_MESSAGE) from e


def parse_user_id(raw_id: str) -> int:
    """Parse a path segment as a signed 64-bit decimal integer.

    Raises:
        ValidationError: If the segment is not such an integer
    """
    if _INT_PATTERN.fullmatch(raw_id):
        value = int(raw_id)
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
    logger.warning(f"Rejected user id {raw_id!r}")
    raise ValidationError(INVALID_USER_ID_MESSAGE, field="id")


class UserHandler:
    """HTTP handlers for user operations.

    Each method calls exactly one service. Create failures are reported
    with a fixed generic message; lookup failures echo the service
    error's message.

    Example:
        ```python
        handler = UserHandler(
            get_user_by_id_service=GetUserByIdService.create(repository=repo),
            create_user_service=CreateUserService.create(repository=repo),
        )
        ```
    """

    def __init__(
        self,
        get_user_by_id_service: GetUserByIdQuery,
        create_user_service: CreateUserCommand,
    ) -> None:
        """Initialize the user handler.

        Args:
            get_user_by_id_service: Query service for reads (required).
            create_user_service: Command service for inserts (required).
        """
        self._get_user_by_id = get_user_by_id_service
        self._create_user = create_user_service

    async def create_user(self, raw_body: bytes, response: Response) -> MessageResponse:
        """Handle POST /api/v1/user/ requests.

        Args:
            raw_body: The unparsed request body
            response: Outgoing response, used to set the Location header

        Returns:
            MessageResponse with the static confirmation message

        Raises:
            HTTPException: 400 if the body does not parse, 500 if creation fails
        """
        try:
            request = parse_create_request(raw_body)
        except ValidationError as e:
            raise HTTPException(status_code=e.http_status, detail=e.message) from e

        try:
            user = await run_in_threadpool(self._create_user.execute, request.name, request.phone)
        except Exception as e:
            logger.error(f"Create user failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=CREATE_FAILED_MESSAGE,
            ) from e

        response.headers["Location"] = f"{USER_RESOURCE_PATH}/{user.id}"
        return MessageResponse(message=CREATED_MESSAGE)

    async def get_user_by_id(self, raw_id: str) -> UserResponse:
        """Handle GET /api/v1/user/{id} requests.

        Args:
            raw_id: The id path segment, unparsed

        Returns:
            UserResponse with the full user record

        Raises:
            HTTPException: 400 if the id is not an integer, 404 if the lookup fails
        """
        try:
            user_id = parse_user_id(raw_id)
        except ValidationError as e:
            raise HTTPException(status_code=e.http_status, detail=e.message) from e

        try:
            user = await run_in_threadpool(self._get_user_by_id.execute, user_id)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            ) from e

        return UserResponse.from_entity(user)
