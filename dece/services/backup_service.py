"""Whole-store backup and restore.

A backup document is a JSON object with one key per table name, each mapping
to the list of that table's rows as plain objects (dates as ISO strings).

Restore validates the entire document before touching the store, then
replaces every table inside a single transaction. Tables missing from the
document end up empty. Any failure after validation rolls everything back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model
from sqlalchemy import JSON, Column, Integer, Table
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dece.core.config import settings
from dece.core.errors import MalformedBackupError, RestoreFailedError
from dece.core.structured_logging import build_log_context
from dece.db.registry import TABLES, table_for, table_names

logger = logging.getLogger(__name__)

BACKUP_FILENAME = "dece_backup_{day}.json"


# =============================================================================
# Export
# =============================================================================


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def export_backup(db: Session) -> dict[str, list[dict[str, Any]]]:
    """Every row of every declared table, JSON-ready, ordered by primary key."""
    document: dict[str, list[dict[str, Any]]] = {}
    for name in table_names():
        table = table_for(name)
        result = db.execute(table.select().order_by(*table.primary_key.columns))
        document[name] = [
            {key: _serialize_value(value) for key, value in row.items()}
            for row in result.mappings()
        ]
    return document


def dump_backup(db: Session) -> str:
    return json.dumps(export_backup(db), ensure_ascii=False, indent=2)


def write_backup_file(
    db: Session, directory: str | Path | None = None, day: date | None = None
) -> Path:
    """Write ``dece_backup_YYYY-MM-DD.json`` into ``directory`` and return its path."""
    target_dir = Path(directory or settings.BACKUP_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / BACKUP_FILENAME.format(day=(day or date.today()).isoformat())
    document = export_backup(db)
    path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info(
        "Wrote backup %s",
        path.name,
        extra=build_log_context(
            operation="export",
            row_count=sum(len(rows) for rows in document.values()),
        ),
    )
    return path


# =============================================================================
# Validation
# =============================================================================


def _is_generated_key(column: Column) -> bool:
    return (
        column.primary_key
        and isinstance(column.type, Integer)
        and column.autoincrement in (True, "auto")
    )


def _field_for(column: Column) -> tuple[Any, Any]:
    if isinstance(column.type, JSON):
        python_type: Any = Any
    else:
        python_type = column.type.python_type

    if _is_generated_key(column) or column.nullable:
        return Optional[python_type], None

    default = column.default
    if default is None:
        return python_type, ...
    if default.is_callable:
        return python_type, Field(default_factory=lambda arg=default.arg: arg(None))
    return python_type, default.arg


def _row_model(table: Table) -> type[BaseModel]:
    fields = {column.name: _field_for(column) for column in table.columns}
    return create_model(
        f"{table.name}_backup_row",
        __config__=ConfigDict(extra="forbid"),
        **fields,
    )


ROW_MODELS: dict[str, type[BaseModel]] = {
    name: _row_model(model.__table__) for name, model in TABLES.items()
}


def parse_backup(raw: str | bytes) -> dict[str, Any]:
    """Decode a backup file's contents; only checks that it is a JSON object."""
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedBackupError([f"not valid JSON: {exc}"]) from exc
    if not isinstance(document, dict):
        raise MalformedBackupError(["top level must be an object keyed by table name"])
    return document


def load_backup_file(path: str | Path) -> dict[str, Any]:
    return parse_backup(Path(path).read_bytes())


def validate_backup(document: Any) -> dict[str, list[dict[str, Any]]]:
    """
    Check a backup document and return its rows with Python-typed values.

    All problems are collected and raised together as MalformedBackupError:
    unknown table keys, non-list table values, non-object rows, and rows
    failing their table's column types, required fields or unknown fields.
    """
    if not isinstance(document, dict):
        raise MalformedBackupError(["top level must be an object keyed by table name"])

    problems: list[str] = []
    unknown = sorted(set(document) - set(TABLES))
    if unknown:
        problems.append(f"unknown tables: {', '.join(map(str, unknown))}")
    if not set(document) & set(TABLES):
        problems.append("document contains none of the store's tables")

    validated: dict[str, list[dict[str, Any]]] = {}
    for name in table_names():
        if name not in document:
            continue
        rows = document[name]
        if not isinstance(rows, list):
            problems.append(f"{name}: expected a list of rows")
            continue
        row_model = ROW_MODELS[name]
        clean_rows = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                problems.append(f"{name}[{index}]: expected an object")
                continue
            try:
                clean_rows.append(row_model.model_validate(row).model_dump())
            except ValidationError as exc:
                for error in exc.errors():
                    location = ".".join(str(part) for part in error["loc"])
                    problems.append(f"{name}[{index}].{location}: {error['msg']}")
        validated[name] = clean_rows

    if problems:
        raise MalformedBackupError(problems)
    return validated


# =============================================================================
# Restore
# =============================================================================


@dataclass
class RestoreReport:
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def _replace_all(db: Session, rows_by_table: dict[str, list[dict[str, Any]]]) -> RestoreReport:
    report = RestoreReport()
    for name in reversed(table_names()):
        db.execute(table_for(name).delete())
    for name in table_names():
        rows = rows_by_table.get(name, [])
        if rows:
            db.execute(table_for(name).insert(), rows)
        report.counts[name] = len(rows)
    return report


def restore_backup(target: Any, document: Any) -> RestoreReport:
    """
    Replace the store's contents with ``document``.

    ``target`` is a Session or a store handle (anything with ``session()``).
    Raises MalformedBackupError before any change, or RestoreFailedError after
    rolling back, in which case the previous contents are intact.
    """
    rows_by_table = validate_backup(document)

    owns_session = not isinstance(target, Session)
    db: Session = target.session() if owns_session else target
    log_context = build_log_context(operation="restore")
    try:
        report = _replace_all(db, rows_by_table)
        db.commit()
    except Exception as exc:
        db.rollback()
        logger.exception("Backup restore rolled back", extra=log_context)
        detail = str(exc.orig) if isinstance(exc, IntegrityError) and exc.orig else str(exc)
        raise RestoreFailedError(detail) from exc
    finally:
        if owns_session:
            db.close()

    if not owns_session:
        # Rows were replaced underneath the ORM
        db.expire_all()
    logger.info(
        "Restored %d rows",
        report.total,
        extra=build_log_context(operation="restore", row_count=report.total),
    )
    return report
