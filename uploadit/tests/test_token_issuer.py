from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from uploadit.application.services.token_issuer import JwtTokenIssuer
from uploadit.domain.tokens.exceptions import (InvalidTokenError,
                                               TokenConfigurationError)

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, 123456, tzinfo=UTC)


def test_issue_binds_subject_and_fifteen_minute_expiry(jwt_secret: str) -> None:
    issuer = JwtTokenIssuer(clock=lambda: FIXED_NOW)

    issued = issuer.issue(jwt_secret, {"sub": "42"}, 15)

    assert issued.expires_at == datetime(2026, 1, 1, 12, 15, 0, tzinfo=UTC)
    claims = jwt.decode(
        issued.token, jwt_secret, algorithms=["HS256"], options={"verify_exp": False}
    )
    assert claims["sub"] == "42"
    assert claims["exp"] - claims["iat"] == 15 * 60
    assert claims["exp"] == int(issued.expires_at.timestamp())


def test_issue_rejects_empty_secret() -> None:
    with pytest.raises(TokenConfigurationError):
        JwtTokenIssuer().issue("", {"sub": "1"}, 15)


def test_issue_rejects_non_positive_validity(jwt_secret: str) -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer().issue(jwt_secret, {"sub": "1"}, 0)


def test_decode_returns_claims_for_fresh_token(jwt_secret: str) -> None:
    issuer = JwtTokenIssuer()
    issued = issuer.issue(jwt_secret, {"sub": "7"}, 15)

    assert issuer.decode(jwt_secret, issued.token)["sub"] == "7"


def test_decode_rejects_token_signed_with_other_secret(jwt_secret: str) -> None:
    issuer = JwtTokenIssuer()
    issued = issuer.issue("another-secret-0123456789abcdef0123456789", {"sub": "7"}, 15)

    with pytest.raises(InvalidTokenError):
        issuer.decode(jwt_secret, issued.token)


def test_decode_rejects_expired_token(jwt_secret: str) -> None:
    an_hour_ago = datetime.now(UTC) - timedelta(hours=1)
    issued = JwtTokenIssuer(clock=lambda: an_hour_ago).issue(jwt_secret, {"sub": "7"}, 15)

    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer().decode(jwt_secret, issued.token)


def test_decode_requires_subject_claim(jwt_secret: str) -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"iat": now, "exp": now + timedelta(minutes=5)}, jwt_secret, algorithm="HS256"
    )

    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer().decode(jwt_secret, token)


def test_decode_rejects_garbage(jwt_secret: str) -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer().decode(jwt_secret, "not-a-token")
