"""Authentication use cases."""

from .dev_login import DevLoginRequest, DevLoginResponse, DevLoginUseCase
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

__all__ = [
    "DevLoginRequest",
    "DevLoginResponse",
    "DevLoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
]
