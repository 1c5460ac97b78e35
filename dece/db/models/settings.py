"""Key-value application settings."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base


class AppSetting(Base):
    """
    One setting; ``value`` is any JSON value and is stored unmodified.

    A row whose value is JSON null is distinct from a missing key.
    """

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
