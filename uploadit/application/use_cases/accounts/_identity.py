# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from uploadit.domain.tokens.entities import Principal
from uploadit.domain.users.exceptions import InvalidUserIdError
from uploadit.shared.logging import logger

_USER_ID_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
USER_ID_MIN = -(2**31)
USER_ID_MAX = 2**31 - 1


def parse_user_id(principal: Principal) -> int:
    """Return the integer user id carried by ``principal``.

    A subject that is not a base-10 integer within the 32-bit signed range
    means the token was minted by something other than this service, so it
    is rejected outright.
    """
    name = (principal.name or "").strip()
    if not _USER_ID_RE.fullmatch(name):
        logger.warning(f"auth.identity: unparseable subject {principal.name!r}")
        raise InvalidUserIdError()
    user_id = int(name)
    if not USER_ID_MIN <= user_id <= USER_ID_MAX:
        logger.warning(f"auth.identity: subject out of range {principal.name!r}")
        raise InvalidUserIdError()
    return user_id
