# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Outcome values returned by the user service instead of raised exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ServiceStatus(str, Enum):
    OK = "ok"
    MALFORMED = "malformed"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    status: ServiceStatus
    value: T | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is ServiceStatus.OK

    @classmethod
    def ok(cls, value: T | None = None) -> ServiceResult[T]:
        return cls(ServiceStatus.OK, value=value)

    @classmethod
    def malformed(cls, message: str) -> ServiceResult[T]:
        return cls(ServiceStatus.MALFORMED, message=message)

    @classmethod
    def not_found(cls, message: str) -> ServiceResult[T]:
        return cls(ServiceStatus.NOT_FOUND, message=message)

    @classmethod
    def duplicate(cls, message: str) -> ServiceResult[T]:
        return cls(ServiceStatus.DUPLICATE, message=message)
