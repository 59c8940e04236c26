# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uploadit.domain.exceptions import DomainError


class TokenConfigurationError(DomainError):
    """The signing secret is missing or empty."""


class InvalidTokenError(DomainError):
    """Signature, expiry or required claims failed verification."""
