"""Operator accounts."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base
from dece.db.enums import UserStatus


class User(Base):
    """
    A counseling-office operator.

    Cédula and email are each globally unique; the cédula doubles as the
    login name. ``security_questions`` holds exactly two
    ``{"question", "answer_hash"}`` pairs once the profile is completed.
    Users are never hard-deleted in normal operation.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=UserStatus.PENDING.value, nullable=False
    )
    first_login: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Optional contact fields (filled on profile completion)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    position: Mapped[str | None] = mapped_column(String(150), nullable=True)

    security_questions: Mapped[list[dict[str, Any]] | None] = mapped_column(
        JSON, nullable=True
    )
