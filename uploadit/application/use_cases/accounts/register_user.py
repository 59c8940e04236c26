# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uploadit.application.interfaces import UserService
from uploadit.domain.users.entities import User
from uploadit.domain.users.exceptions import (InvalidFormDataError,
                                              UserAlreadyExistsError)
from uploadit.domain.users.results import ServiceStatus
from uploadit.shared.logging import logger


class RegisterUserUseCase:
    def __init__(self, *, users: UserService) -> None:
        self._users = users

    def execute(self, username: str, password: str, email: str) -> User:
        result = self._users.create_user(username, password, email)

        if result.status is ServiceStatus.MALFORMED:
            logger.warning(f"auth.register: invalid form data ({result.message})")
            raise InvalidFormDataError()
        if result.status is ServiceStatus.DUPLICATE or result.value is None:
            logger.warning(f"auth.register: duplicate account username={username!r}")
            raise UserAlreadyExistsError()

        return result.value
