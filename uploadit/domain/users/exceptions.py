# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uploadit.domain.exceptions import PersistenceError
from uploadit.shared.errors.base import DomainError


class UserConflictError(PersistenceError):
    """Raised by repositories when a unique username/email constraint trips."""


class AccountError(DomainError):
    code = "account_error"


class InvalidCredentialsError(AccountError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class InvalidFormDataError(AccountError):
    code = "invalid_form_data"
    message = "Invalid form data"


class UserAlreadyExistsError(AccountError):
    code = "user_already_exists"
    message = "User with the provided username or email already exists"


class InvalidUserIdError(AccountError):
    code = "invalid_user_id"
    message = "Invalid user id"


class UserNotFoundError(AccountError):
    code = "user_not_found"
