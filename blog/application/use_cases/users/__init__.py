# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authenticate_session import AuthenticateSessionUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = ["AuthenticateSessionUseCase", "LoginUserUseCase", "RegisterUserUseCase"]
