"""Generic record access for any declared table.

Write helpers flush immediately so constraint failures surface here, then
commit. Any IntegrityError is rolled back and re-raised as
``DuplicateKeyError`` or ``IntegrityViolationError``; the stored row is left
as it was.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dece.core.errors import RecordNotFoundError
from dece.db.base import Base
from dece.db.integrity import translate_integrity_error

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def translated_integrity_errors(db: Session) -> Iterator[None]:
    """Roll back and translate constraint failures raised inside the block."""
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        raise translate_integrity_error(exc) from exc


def create(db: Session, model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    record = model(**data)
    with translated_integrity_errors(db):
        db.add(record)
        db.flush()
        db.commit()
    db.refresh(record)
    return record


def get(db: Session, model: type[ModelT], record_id: Any) -> ModelT | None:
    return db.get(model, record_id)


def get_or_raise(db: Session, model: type[ModelT], record_id: Any) -> ModelT:
    record = db.get(model, record_id)
    if record is None:
        raise RecordNotFoundError(model.__tablename__, record_id)
    return record


def update(
    db: Session, model: type[ModelT], record_id: Any, changes: Mapping[str, Any]
) -> ModelT:
    """Apply ``changes`` to one row; unknown column names raise AttributeError."""
    record = get_or_raise(db, model, record_id)
    columns = model.__table__.columns
    unknown = [field for field in changes if field not in columns]
    if unknown:
        raise AttributeError(f"{model.__tablename__} has no column {unknown[0]!r}")
    for field, value in changes.items():
        setattr(record, field, value)
    with translated_integrity_errors(db):
        db.flush()
        db.commit()
    db.refresh(record)
    return record


def delete(db: Session, model: type[ModelT], record_id: Any) -> bool:
    """Delete one row; owned children go with it. Returns False if absent."""
    record = db.get(model, record_id)
    if record is None:
        return False
    with translated_integrity_errors(db):
        db.delete(record)
        db.flush()
        db.commit()
    return True


def find_by(db: Session, model: type[ModelT], **equals: Any) -> list[ModelT]:
    return (
        db.query(model)
        .filter_by(**equals)
        .order_by(*model.__table__.primary_key.columns)
        .all()
    )


def find_one_by(db: Session, model: type[ModelT], **equals: Any) -> ModelT | None:
    return db.query(model).filter_by(**equals).first()


def find_between(
    db: Session, model: type[ModelT], column: str, start: Any, end: Any
) -> list[ModelT]:
    """Rows whose ``column`` lies in [start, end] (inclusive), ordered by it."""
    attr = getattr(model, column)
    return db.query(model).filter(attr >= start, attr <= end).order_by(attr).all()


def count(db: Session, model: type[ModelT]) -> int:
    return db.query(func.count()).select_from(model).scalar() or 0


def list_all(db: Session, model: type[ModelT]) -> list[ModelT]:
    return db.query(model).order_by(*model.__table__.primary_key.columns).all()
