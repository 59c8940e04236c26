# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uploadit.application.interfaces import UserService
from uploadit.domain.tokens.entities import Principal
from uploadit.domain.users.exceptions import UserNotFoundError
from uploadit.shared.logging import logger

from ._identity import parse_user_id


class DeleteUserUseCase:
    def __init__(self, *, users: UserService) -> None:
        self._users = users

    def execute(self, principal: Principal) -> int:
        user_id = parse_user_id(principal)

        result = self._users.delete_user(user_id)
        if not result.succeeded:
            logger.warning(f"auth.delete: {result.message}")
            raise UserNotFoundError(message=result.message)

        return user_id
