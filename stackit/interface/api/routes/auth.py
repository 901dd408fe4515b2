"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from stackit.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registration.

    Fields are optional here so that missing ones are reported by the use
    case with a single message.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginAPIRequest(BaseModel):
    """API request for login."""

    email: str | None = None
    password: str | None = None


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account and return a bearer token.

    Example:
        POST /auth/register

        Request:
        {"username": "alice", "email": "alice@example.com", "password": "secret1"}

        Response (201):
        {
            "token": "eyJ...",
            "user": {"id": "...", "username": "alice", "email": "alice@example.com"}
        }
    """
    return await register_use_case.execute(
        RegisterRequest(
            username=request.username or "",
            email=request.email or "",
            password=request.password or "",
        )
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Raises:
        AuthenticationError: If the credentials are invalid (401)
    """
    return await login_use_case.execute(
        LoginRequest(email=request.email or "", password=request.password or "")
    )
