# Username registration and sign-in routes

from fastapi import APIRouter, Depends

from taskboard.dependencies import get_auth_service
from taskboard.schemas import ErrorResponse, OkResponse, UsernameRequest
from taskboard.services import AuthService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register_user(
    user_data: UsernameRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new username. Fails if the username is empty or taken."""
    await auth_service.register(user_data.username)
    return OkResponse()


@router.post(
    "/signin",
    response_model=OkResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def signin_user(
    user_data: UsernameRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Succeeds when the username is registered. No credential is checked."""
    await auth_service.signin(user_data.username)
    return OkResponse()
