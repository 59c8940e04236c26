from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from uploadit.application.services.token_issuer import JwtTokenIssuer
from uploadit.application.services.user_service import AccountUserService
from uploadit.application.use_cases.accounts.authenticate_user import \
    AuthenticateUserUseCase
from uploadit.application.use_cases.accounts.delete_user import \
    DeleteUserUseCase
from uploadit.application.use_cases.accounts.get_user import GetUserUseCase
from uploadit.application.use_cases.accounts.register_user import \
    RegisterUserUseCase
from uploadit.domain.tokens.entities import Principal
from uploadit.domain.users.exceptions import (InvalidCredentialsError,
                                              InvalidFormDataError,
                                              InvalidUserIdError,
                                              UserAlreadyExistsError,
                                              UserNotFoundError)
from uploadit.shared.errors import InfrastructureError

FIXED_NOW = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)


@pytest.fixture()
def authenticate(user_service: AccountUserService, jwt_secret: str) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        users=user_service,
        tokens=JwtTokenIssuer(clock=lambda: FIXED_NOW),
        secret=jwt_secret,
    )


@pytest.fixture()
def register(user_service: AccountUserService) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=user_service)


def test_register_then_authenticate_issues_token_for_new_user(
    register: RegisterUserUseCase, authenticate: AuthenticateUserUseCase, jwt_secret: str
) -> None:
    user = register.execute("alice", "secret123", "alice@example.com")

    result = authenticate.execute("alice", "secret123")

    assert result.user == user
    assert result.token.expires_at == FIXED_NOW + timedelta(minutes=15)
    claims = jwt.decode(
        result.token.token, jwt_secret, algorithms=["HS256"], options={"verify_exp": False}
    )
    assert claims["sub"] == str(user.id)


def test_authenticate_failure_is_identical_for_unknown_user_and_wrong_password(
    register: RegisterUserUseCase, authenticate: AuthenticateUserUseCase
) -> None:
    register.execute("alice", "secret123", "alice@example.com")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        authenticate.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        authenticate.execute("mallory", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.to_dict() == {
        "error": "invalid_credentials",
        "message": "Invalid credentials",
    }


def test_authenticate_malformed_input_uses_generic_failure(
    authenticate: AuthenticateUserUseCase,
) -> None:
    with pytest.raises(InvalidCredentialsError):
        authenticate.execute("", "")


def test_authenticate_without_secret_is_a_server_fault(
    user_service: AccountUserService, register: RegisterUserUseCase
) -> None:
    register.execute("alice", "secret123", "alice@example.com")
    use_case = AuthenticateUserUseCase(users=user_service, tokens=JwtTokenIssuer(), secret="")

    with pytest.raises(InfrastructureError) as exc_info:
        use_case.execute("alice", "secret123")

    assert exc_info.value.status == 500


def test_register_twice_creates_exactly_one_account(register: RegisterUserUseCase, users) -> None:
    register.execute("alice", "secret123", "alice@example.com")

    with pytest.raises(UserAlreadyExistsError):
        register.execute("alice", "secret123", "alice2@example.com")

    assert len(users) == 1


def test_register_malformed_input(register: RegisterUserUseCase) -> None:
    with pytest.raises(InvalidFormDataError) as exc_info:
        register.execute("alice", "secret123", "not-an-email")

    assert exc_info.value.message == "Invalid form data"


def test_delete_with_non_integer_subject_deletes_nothing(
    user_service: AccountUserService, register: RegisterUserUseCase, users
) -> None:
    register.execute("alice", "secret123", "alice@example.com")

    with pytest.raises(InvalidUserIdError):
        DeleteUserUseCase(users=user_service).execute(Principal(name="alice"))

    assert len(users) == 1


def test_delete_removes_user(
    user_service: AccountUserService, register: RegisterUserUseCase, users
) -> None:
    user = register.execute("alice", "secret123", "alice@example.com")

    deleted_id = DeleteUserUseCase(users=user_service).execute(Principal(name=str(user.id)))

    assert deleted_id == user.id
    assert len(users) == 0


def test_delete_missing_user_surfaces_service_message(user_service: AccountUserService) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        DeleteUserUseCase(users=user_service).execute(Principal(name="12"))

    assert exc_info.value.message == "User with id 12 does not exist"


@pytest.mark.parametrize("name", ["", "abc", "1.5", "--1", "1_000", "0x10"])
def test_get_user_rejects_unparseable_subject(user_service: AccountUserService, name: str) -> None:
    with pytest.raises(InvalidUserIdError):
        GetUserUseCase(users=user_service).execute(Principal(name=name))


def test_get_user_returns_entity(
    user_service: AccountUserService, register: RegisterUserUseCase
) -> None:
    user = register.execute("alice", "secret123", "alice@example.com")

    assert GetUserUseCase(users=user_service).execute(Principal(name=str(user.id))) == user


def test_get_user_missing(user_service: AccountUserService) -> None:
    with pytest.raises(UserNotFoundError):
        GetUserUseCase(users=user_service).execute(Principal(name="5"))


@pytest.mark.parametrize(
    "name", ["2147483648", "-2147483649", "9223372036854775808", "99999999999999999999999"]
)
def test_out_of_range_subject_is_invalid_user_id(
    user_service: AccountUserService, register: RegisterUserUseCase, users, name: str
) -> None:
    register.execute("alice", "secret123", "alice@example.com")

    with pytest.raises(InvalidUserIdError):
        GetUserUseCase(users=user_service).execute(Principal(name=name))
    with pytest.raises(InvalidUserIdError):
        DeleteUserUseCase(users=user_service).execute(Principal(name=name))

    assert len(users) == 1


def test_largest_32_bit_subject_is_looked_up(user_service: AccountUserService) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        GetUserUseCase(users=user_service).execute(Principal(name="2147483647"))

    assert exc_info.value.message == "User with id 2147483647 does not exist"
