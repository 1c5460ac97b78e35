"""Settings key-value store.

Raw access stores any JSON value unmodified. Typed access goes through
``SETTINGS_SCHEMAS`` so a key is always read and written with the same shape.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, TypeAdapter
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from dece.db.models import AppSetting
from dece.schemas.settings import SETTINGS_SCHEMAS
from dece.services.record_service import translated_integrity_errors

logger = logging.getLogger(__name__)

MISSING = object()


def get_setting(db: Session, key: str) -> AppSetting | None:
    """Return the row for ``key``; a row holding None differs from no row."""
    return db.get(AppSetting, key)


def get_value(db: Session, key: str, default: Any = MISSING) -> Any:
    """
    Return the stored value for ``key``.

    Raises KeyError when the key is absent and no default is given.
    """
    row = get_setting(db, key)
    if row is None:
        if default is MISSING:
            raise KeyError(key)
        return default
    return row.value


def put_setting(db: Session, key: str, value: Any) -> AppSetting:
    """Insert or replace the value stored under ``key``."""
    row = get_setting(db, key)
    if row is None:
        row = AppSetting(key=key, value=value)
        db.add(row)
    else:
        row.value = value
        flag_modified(row, "value")
    with translated_integrity_errors(db):
        db.flush()
        db.commit()
    logger.debug("Stored setting %s", key)
    return row


def delete_setting(db: Session, key: str) -> bool:
    row = get_setting(db, key)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True


def list_settings(db: Session) -> dict[str, Any]:
    return {row.key: row.value for row in db.query(AppSetting).order_by(AppSetting.key)}


def _schema_for(key: str) -> tuple[Any, Any]:
    try:
        return SETTINGS_SCHEMAS[key]
    except KeyError:
        raise KeyError(f"No typed schema registered for setting {key!r}") from None


def _merge(defaults: Any, stored: Any) -> Any:
    """Overlay stored dict values on defaults, one level of nesting at a time."""
    if not isinstance(defaults, dict) or not isinstance(stored, dict):
        return stored
    merged = dict(defaults)
    for name, value in stored.items():
        merged[name] = _merge(defaults.get(name), value)
    return merged


def get_typed(db: Session, key: str) -> Any:
    """
    Read a typed setting.

    Stored fields are merged over the registered default, so a partially
    written value still parses. Returns the default when the key is absent,
    or None when the key is absent and has no default. Raises
    pydantic.ValidationError when the stored value has the wrong shape.
    """
    value_type, default = _schema_for(key)
    row = get_setting(db, key)
    if row is None or row.value is None:
        return default
    raw = row.value
    if isinstance(default, BaseModel):
        raw = _merge(default.model_dump(mode="json"), raw)
    return TypeAdapter(value_type).validate_python(raw)


def put_typed(db: Session, key: str, value: Any) -> AppSetting:
    """Validate ``value`` against the key's schema and store its JSON form."""
    value_type, _ = _schema_for(key)
    adapter = TypeAdapter(value_type)
    validated = adapter.validate_python(value)
    return put_setting(db, key, adapter.dump_python(validated, mode="json"))
