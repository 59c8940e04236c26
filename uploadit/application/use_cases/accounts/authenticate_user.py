# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from uploadit.application.interfaces import TokenIssuer, UserService
from uploadit.domain.tokens.entities import IssuedToken
from uploadit.domain.tokens.exceptions import TokenConfigurationError
from uploadit.domain.users.entities import User
from uploadit.domain.users.exceptions import InvalidCredentialsError
from uploadit.domain.users.results import ServiceStatus
from uploadit.shared.errors import InfrastructureError
from uploadit.shared.logging import logger

TOKEN_VALIDITY_MINUTES = 15


@dataclass(slots=True, frozen=True)
class AuthenticatedUser:
    user: User
    token: IssuedToken


class AuthenticateUserUseCase:
    def __init__(
        self,
        *,
        users: UserService,
        tokens: TokenIssuer,
        secret: str,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._secret = secret

    def execute(self, username: str, password: str) -> AuthenticatedUser:
        result = self._users.authenticate(username, password)

        # Malformed input and bad credentials share one response.
        if result.status is ServiceStatus.MALFORMED:
            logger.warning(f"auth.authenticate: malformed credentials ({result.message})")
            raise InvalidCredentialsError()
        if not result.succeeded or result.value is None:
            logger.warning(f"auth.authenticate: rejected username={username!r}")
            raise InvalidCredentialsError()

        user = result.value
        try:
            token = self._tokens.issue(
                self._secret, {"sub": str(user.id)}, TOKEN_VALIDITY_MINUTES
            )
        except TokenConfigurationError as exc:
            logger.error(f"auth.authenticate: cannot sign token: {exc}")
            raise InfrastructureError("token_configuration_error") from exc

        return AuthenticatedUser(user=user, token=token)
