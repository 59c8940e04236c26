# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import jsonify, request

from uploadit.application.interfaces import TokenIssuer
from uploadit.domain.tokens.entities import Principal
from uploadit.domain.tokens.exceptions import InvalidTokenError
from uploadit.shared.logging import logger

_BEARER_PREFIX = "Bearer "


def _bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth[: len(_BEARER_PREFIX)].lower() == _BEARER_PREFIX.lower():
        return auth[len(_BEARER_PREFIX):].strip()
    return ""


def _unauthorized():
    response = jsonify({"error": "unauthorized"})
    response.headers["WWW-Authenticate"] = "Bearer"
    return response, 401


class BearerAuthenticator:
    """Verifies bearer tokens and hands the resolved principal to views."""

    def __init__(self, *, issuer: TokenIssuer, secret: str) -> None:
        self._issuer = issuer
        self._secret = secret

    def principal_for(self, token: str) -> Principal | None:
        try:
            claims = self._issuer.decode(self._secret, token)
        except InvalidTokenError as exc:
            logger.warning(f"Auth failed (invalid token: {exc}) on {request.method} {request.path}")
            return None

        subject = claims.get("sub")
        if not isinstance(subject, str):
            logger.warning(f"Auth failed (subject claim missing) on {request.method} {request.path}")
            return None
        return Principal(name=subject)

    def required(self, f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a, **kw):
            token = _bearer_token()
            if not token:
                logger.warning(
                    f"No Authorization header on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                return _unauthorized()

            principal = self.principal_for(token)
            if principal is None:
                return _unauthorized()

            kw["principal"] = principal
            logger.debug(f"Auth OK: subject={principal.name} {request.method} {request.path}")
            return f(*a, **kw)

        return inner
