# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class DomainError(Exception):
    pass


class PersistenceError(DomainError):
    """Raised by repositories when the store rejects a write."""
