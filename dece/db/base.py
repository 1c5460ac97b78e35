from datetime import date, datetime

from sqlalchemy import Date, DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase

# Deterministic constraint names (SQLite reports unique failures by column list)
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
    type_annotation_map = {
        date: Date,
        datetime: DateTime(timezone=False),
    }
