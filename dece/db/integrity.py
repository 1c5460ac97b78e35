"""Translate SQLite constraint failures into store errors."""

import re

from sqlalchemy.exc import IntegrityError

from dece.core.errors import DuplicateKeyError, IntegrityViolationError, StoreError

# e.g. "UNIQUE constraint failed: courses.name, courses.parallel, courses.shift"
_UNIQUE_FAILED = re.compile(r"UNIQUE constraint failed: (?P<columns>[\w.]+(?:, [\w.]+)*)")


def _message(error: IntegrityError) -> str:
    return str(error.orig) if error.orig else str(error)


def translate_integrity_error(error: IntegrityError) -> StoreError:
    """Map an IntegrityError to DuplicateKeyError or IntegrityViolationError."""
    message = _message(error)
    match = _UNIQUE_FAILED.search(message)
    if match:
        qualified = [part.strip() for part in match.group("columns").split(",")]
        table = qualified[0].split(".", 1)[0]
        columns = [part.split(".", 1)[-1] for part in qualified]
        return DuplicateKeyError(table, columns)
    return IntegrityViolationError(message)
