"""SQLite-backed store connection.

One ``StoreConnection`` is opened at startup and handed to every
repository. Each statement runs inside ``statement()``, which closes its
cursor on every exit path and translates sqlite3 errors into the domain's
``StoreError`` taxonomy.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from ims.domain.exceptions import (
    BindFailed,
    ExecFailed,
    PrepareFailed,
    StoreError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

# OperationalError messages SQLite emits while compiling a statement.
_COMPILE_ERROR_MARKERS = (
    "syntax error",
    "no such table",
    "no such column",
    "incomplete input",
    "unrecognized token",
    "no such function",
)

# Errors SQLite reports when the database file itself is damaged.
_CORRUPTION_MARKERS = (
    "file is not a database",
    "database disk image is malformed",
)


def classify_error(exc: sqlite3.Error, stepping: bool = False) -> StoreError:
    """Map a sqlite3 error to a StoreError.

    A damaged database file is PrepareFailed wherever it shows up. Anything
    else raised while stepping rows (``stepping=True``) is ExecFailed.
    """
    message = str(exc)
    lowered = message.lower()
    if any(marker in lowered for marker in _CORRUPTION_MARKERS):
        return PrepareFailed(message)
    if stepping:
        return ExecFailed(message)
    if isinstance(exc, (sqlite3.ProgrammingError, sqlite3.InterfaceError)):
        return BindFailed(message)
    if isinstance(exc, sqlite3.OperationalError) and any(
        marker in lowered for marker in _COMPILE_ERROR_MARKERS
    ):
        return PrepareFailed(message)
    return ExecFailed(message)


class StoreConnection:
    """Owns the open handle to the SQLite database file."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = str(db_path)
        self._connection: sqlite3.Connection | None = None

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self) -> StoreConnection:
        if self._connection is not None:
            return self
        try:
            # Autocommit: every statement is its own transaction.
            self._connection = sqlite3.connect(self._db_path, isolation_level=None)
        except sqlite3.Error as exc:
            raise StoreUnavailableError(
                f"Can't open database '{self._db_path}': {exc}"
            ) from exc
        logger.info("Opened database %s", self._db_path)
        return self

    def close(self) -> None:
        if self._connection is None:
            return
        self._connection.close()
        self._connection = None
        logger.info("Database connection closed")

    def __enter__(self) -> StoreConnection:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    @contextmanager
    def statement(
        self, sql: str, params: Sequence[Any] = ()
    ) -> Iterator[sqlite3.Cursor]:
        """Execute ``sql`` with bound ``params`` and yield the cursor.

        Errors are classified with ``classify_error``; those raised while
        stepping rows are ExecFailed unless the file is damaged.
        """
        if self._connection is None:
            raise ExecFailed(f"Database '{self._db_path}' is not open")

        cursor = self._connection.cursor()
        try:
            try:
                cursor.execute(sql, params)
            except sqlite3.Error as exc:
                raise classify_error(exc) from exc
            try:
                yield cursor
            except sqlite3.Error as exc:
                raise classify_error(exc, stepping=True) from exc
        finally:
            cursor.close()
