# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from uploadit.application.services.password_hashing import \
    WerkzeugPasswordHasher
from uploadit.application.services.token_issuer import JwtTokenIssuer
from uploadit.application.services.user_service import AccountUserService
from uploadit.application.use_cases.accounts.authenticate_user import \
    AuthenticateUserUseCase
from uploadit.application.use_cases.accounts.delete_user import \
    DeleteUserUseCase
from uploadit.application.use_cases.accounts.get_user import GetUserUseCase
from uploadit.application.use_cases.accounts.register_user import \
    RegisterUserUseCase
from uploadit.infrastructure.auth import BearerAuthenticator
from uploadit.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from uploadit.interfaces.http.controllers.account_controller import \
    AccountController
from uploadit.interfaces.http.controllers.misc_controller import MiscController
from uploadit.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def user_service(self) -> AccountUserService:
        return AccountUserService(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(algorithm=self.config.auth.jwt_algorithm)

    @cached_property
    def bearer_authenticator(self) -> BearerAuthenticator:
        return BearerAuthenticator(
            issuer=self.token_issuer,
            secret=self.config.auth.jwt_secret,
        )

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(
            users=self.user_service,
            tokens=self.token_issuer,
            secret=self.config.auth.jwt_secret,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.user_service)

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_service)

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_service)

    @cached_property
    def account_controller(self) -> AccountController:
        return AccountController(
            authenticate_use_case=self.authenticate_user_use_case,
            register_use_case=self.register_user_use_case,
            delete_use_case=self.delete_user_use_case,
            get_user_use_case=self.get_user_use_case,
            bearer=self.bearer_authenticator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
