"""Domain-level exceptions.

Record rule violations and store failures are expressed as subclasses of
DomainException so the application layer can catch them uniformly and turn
them into outcomes.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A record invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested record does not exist."""


class ErrorKind(Enum):
    PREPARE_FAILED = "PREPARE_FAILED"
    BIND_FAILED = "BIND_FAILED"
    EXEC_FAILED = "EXEC_FAILED"


class StoreError(DomainException):
    """The data store rejected a statement.

    ``kind`` tells the caller at which stage the statement failed without
    exposing store-native error codes.
    """

    kind: ErrorKind = ErrorKind.EXEC_FAILED


class PrepareFailed(StoreError):
    """The statement could not be compiled."""

    kind = ErrorKind.PREPARE_FAILED


class BindFailed(StoreError):
    """Parameter type or arity did not match the statement."""

    kind = ErrorKind.BIND_FAILED


class ExecFailed(StoreError):
    """The store refused to execute the statement or to step its rows."""

    kind = ErrorKind.EXEC_FAILED


class StoreUnavailableError(DomainException):
    """The store could not be opened or initialized. Fatal at startup."""
