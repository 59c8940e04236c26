# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainError, PersistenceError
from .tokens.entities import IssuedToken, Principal
from .users.entities import User
from .users.results import ServiceResult, ServiceStatus

__all__ = [
    "DomainError",
    "IssuedToken",
    "PersistenceError",
    "Principal",
    "ServiceResult",
    "ServiceStatus",
    "User",
]
