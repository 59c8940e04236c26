# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import BearerAuthenticator

__all__ = ["BearerAuthenticator"]
