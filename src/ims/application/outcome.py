"""Tagged result returned by every use-case handler.

Handlers are the boundary where store failures stop being exceptions:
the CLI inspects ``status`` (and ``error_kind`` for errors) and never
needs to know about sqlite3.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from ims.domain.exceptions import ErrorKind, StoreError

T = TypeVar("T")


class OutcomeStatus(Enum):
    SUCCESS = "SUCCESS"
    EMPTY = "EMPTY"
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    status: OutcomeStatus
    value: T | None = None
    message: str = ""
    error_kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        """True for SUCCESS and EMPTY: the statement itself worked."""
        return self.status in (OutcomeStatus.SUCCESS, OutcomeStatus.EMPTY)

    @classmethod
    def success(cls, value: T, message: str = "") -> Outcome[T]:
        return cls(OutcomeStatus.SUCCESS, value=value, message=message)

    @classmethod
    def empty(cls, value: T, message: str = "") -> Outcome[T]:
        return cls(OutcomeStatus.EMPTY, value=value, message=message)

    @classmethod
    def not_found(cls, message: str) -> Outcome[T]:
        return cls(OutcomeStatus.NOT_FOUND, message=message)

    @classmethod
    def invalid(cls, message: str) -> Outcome[T]:
        return cls(OutcomeStatus.INVALID, message=message)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Outcome[T]:
        return cls(OutcomeStatus.ERROR, message=message, error_kind=kind)


def store_failure(logger: logging.Logger, action: str, exc: StoreError) -> Outcome:
    """Log a store error and wrap it as an ERROR outcome."""
    logger.error("%s failed (%s): %s", action, exc.kind.value, exc)
    return Outcome.failure(exc.kind, f"{action} failed: {exc}")
