from .get_user_by_id_use_case import GetUserByIdUseCase
from .login_user_use_case import LoginUserUseCase
from .logout_user_use_case import LogoutUserUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "GetUserByIdUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshTokenUseCase",
    "RegisterUserUseCase",
]
