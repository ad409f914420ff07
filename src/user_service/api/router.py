"""Route table for the user API.

Two static routes under /api/v1/user; no extra middleware.
"""

from fastapi import APIRouter, Request, Response, status

from user_service.api.dependencies import HandlerDep
from user_service.dto import ErrorResponse, MessageResponse, UserResponse
from user_service.handlers import USER_RESOURCE_PATH

router = APIRouter(prefix=USER_RESOURCE_PATH, tags=["user"])


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_user_by_id(user_id: str, handler: HandlerDep) -> UserResponse:
    """Fetch a user by id."""
    return await handler.get_user_by_id(user_id)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_user(request: Request, response: Response, handler: HandlerDep) -> MessageResponse:
    """Create a user from a JSON body."""
    return await handler.create_user(await request.body(), response)
