# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class Principal:
    """Identity resolved from a verified bearer token.

    ``name`` is the raw subject claim; handlers parse it themselves.
    """

    name: str
