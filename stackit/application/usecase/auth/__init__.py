"""Authentication use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import AuthUser, RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "AuthUser",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
