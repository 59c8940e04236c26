# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from uploadit.application.use_cases.accounts.authenticate_user import \
    AuthenticateUserUseCase
from uploadit.application.use_cases.accounts.delete_user import \
    DeleteUserUseCase
from uploadit.application.use_cases.accounts.get_user import GetUserUseCase
from uploadit.application.use_cases.accounts.register_user import \
    RegisterUserUseCase
from uploadit.domain.tokens.entities import Principal
from uploadit.domain.users.exceptions import (AccountError,
                                              InvalidCredentialsError,
                                              InvalidFormDataError)
from uploadit.infrastructure.auth import BearerAuthenticator
from uploadit.interfaces.http.dto.account import (AuthenticatedUserDTO,
                                                  AuthenticateFormDTO,
                                                  MessageDTO, RegisterFormDTO,
                                                  UserDTO)
from uploadit.shared.errors.validation import format_pydantic_errors
from uploadit.shared.logging import logger

FormT = TypeVar("FormT", bound=BaseModel)


def _parse_form(model: type[FormT], error: type[AccountError]) -> FormT:
    try:
        return model.model_validate(request.form.to_dict())
    except ValidationError as exc:
        logger.warning(
            f"account.form: rejected {model.__name__} fields={format_pydantic_errors(exc)['fields']}"
        )
        raise error() from exc


class AccountController:
    """Issues bearer tokens and manages the caller's account."""

    def __init__(
        self,
        *,
        authenticate_use_case: AuthenticateUserUseCase,
        register_use_case: RegisterUserUseCase,
        delete_use_case: DeleteUserUseCase,
        get_user_use_case: GetUserUseCase,
        bearer: BearerAuthenticator,
    ) -> None:
        self._authenticate_use_case = authenticate_use_case
        self._register_use_case = register_use_case
        self._delete_use_case = delete_use_case
        self._get_user_use_case = get_user_use_case
        self._bearer = bearer

    def authenticate(self) -> tuple[Response, int]:
        form = _parse_form(AuthenticateFormDTO, InvalidCredentialsError)

        result = self._authenticate_use_case.execute(form.username, form.password)

        payload = AuthenticatedUserDTO(
            username=result.user.username,
            email=result.user.email,
            token=result.token.token,
            expiry=result.token.expires_at,
        ).model_dump(mode="json")
        logger.info(f"account.authenticate: ok user_id={result.user.id}")
        return jsonify(payload), 200

    def register(self) -> tuple[Response, int]:
        form = _parse_form(RegisterFormDTO, InvalidFormDataError)

        user = self._register_use_case.execute(form.username, form.password, form.email)

        logger.info(f"account.register: ok user_id={user.id}")
        return jsonify(MessageDTO(message="Account created").model_dump()), 200

    def delete(self, *, principal: Principal) -> tuple[Response, int]:
        user_id = self._delete_use_case.execute(principal)

        logger.info(f"account.delete: ok user_id={user_id}")
        message = f"User with id {user_id} successfully deleted"
        return jsonify(MessageDTO(message=message).model_dump()), 200

    def get(self, *, principal: Principal) -> tuple[Response, int]:
        user = self._get_user_use_case.execute(principal)

        payload = UserDTO(id=user.id, username=user.username, email=user.email)
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("account", __name__, url_prefix="/api/account")
        bp.add_url_rule("/authenticate", view_func=self.authenticate, methods=["POST"])
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule(
            "/delete", view_func=self._bearer.required(self.delete), methods=["DELETE"]
        )
        bp.add_url_rule(
            "/get", view_func=self._bearer.required(self.get), methods=["GET"]
        )
        return bp
