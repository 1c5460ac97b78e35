"""Store error taxonomy.

Every failure raised by the store layer derives from ``StoreError`` so callers
can tell store problems apart from programming errors. Write paths raise
``DuplicateKeyError`` for unique-key collisions and ``IntegrityViolationError``
for any other constraint failure; multi-table operations raise
``TransactionAbortedError`` after rolling back.
"""

from __future__ import annotations

from typing import Sequence


class StoreError(RuntimeError):
    """Base class for store failures."""


class DuplicateKeyError(StoreError):
    """An insert/update would duplicate a value in a unique key."""

    def __init__(self, table: str, columns: Sequence[str], message: str | None = None):
        self.table = table
        self.columns = tuple(columns)
        key = ", ".join(self.columns) if self.columns else "unknown"
        super().__init__(message or f"Duplicate key in {table} ({key})")


class IntegrityViolationError(StoreError):
    """A constraint other than uniqueness failed (NOT NULL, FOREIGN KEY, CHECK)."""


class SchemaVersionMismatchError(StoreError):
    """The store was written by a different (newer or unknown) schema."""

    def __init__(self, found: int, expected: int, reason: str | None = None):
        self.found = found
        self.expected = expected
        detail = reason or (
            f"store schema version {found} is newer than supported version {expected}"
        )
        super().__init__(detail)


class StoreCorruptedError(StoreError):
    """The store file cannot be read as a database."""


class TransactionAbortedError(StoreError):
    """A multi-table write failed and was rolled back as a whole."""


class RestoreFailedError(TransactionAbortedError):
    """A validated backup could not be loaded; the previous data is intact."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            f"Backup restore failed and was rolled back; previous data left intact: {detail}"
        )


class MalformedBackupError(StoreError):
    """A backup document failed shape validation; nothing was modified."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f"; ... ({len(self.problems) - 5} more)"
        super().__init__(f"Malformed backup document: {summary}")


class RecordNotFoundError(StoreError):
    """A referenced row does not exist where the operation requires it."""

    def __init__(self, table: str, key: object):
        self.table = table
        self.key = key
        super().__init__(f"{table} row {key!r} not found")


class RecordInUseError(StoreError):
    """A row cannot be deleted while other rows refer to it."""

    def __init__(self, table: str, key: object, usage: int):
        self.table = table
        self.key = key
        self.usage = usage
        super().__init__(f"{table} row {key!r} is in use by {usage} record(s)")


class AuthenticationError(StoreError):
    """Credentials or security answers did not match."""
