# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HMAC-signed JWT issuance and verification.

Tokens carry the caller's claims plus ``iat``/``exp``. Timestamps are
whole seconds, so the returned expiry equals the ``exp`` claim exactly.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from uploadit.application.interfaces import TokenIssuer
from uploadit.domain.tokens.entities import IssuedToken
from uploadit.domain.tokens.exceptions import (InvalidTokenError,
                                               TokenConfigurationError)

_REQUIRED_CLAIMS = ["exp", "iat", "sub"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._algorithm = algorithm
        self._clock = clock

    def issue(
        self, secret: str, claims: Mapping[str, Any], validity_minutes: int
    ) -> IssuedToken:
        if not secret:
            raise TokenConfigurationError("token signing secret is not configured")
        if validity_minutes <= 0:
            raise ValueError("validity_minutes must be positive")

        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + timedelta(minutes=validity_minutes)
        payload = dict(claims)
        payload.update({"iat": issued_at, "exp": expires_at})

        token = jwt.encode(payload, secret, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def decode(self, secret: str, token: str) -> dict[str, Any]:
        if not secret:
            raise TokenConfigurationError("token signing secret is not configured")
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(str(exc)) from exc


__all__ = ["JwtTokenIssuer"]
