"""SQLAlchemy ORM models for case files and their owned records."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dece.db.base import Base
from dece.db.enums import CasePriority, CaseStatus

if TYPE_CHECKING:
    from dece.db.models.actors import Student


class CaseCategory(Base):
    """
    A case category; protected categories get restricted handling in the UI.

    Cases refer to categories by *name*, so renaming a category does not
    update existing cases.
    """

    __tablename__ = "case_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    is_protected: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class CaseFile(Base):
    """
    A counseling case opened for one student.

    ``student_id`` and ``category`` are soft references. Follow-ups,
    sexual-violence details and psychosocial interviews are owned children
    and are deleted with the case.
    """

    __tablename__ = "case_files"
    __table_args__ = (
        Index("idx_case_files_student", "student_id"),
        Index("idx_case_files_category", "category"),
        Index("idx_case_files_priority", "priority"),
        Index("idx_case_files_status", "status"),
        Index("idx_case_files_due_date", "due_date"),
        Index("idx_case_files_opening_date", "opening_date"),
        Index("idx_case_files_category_status", "category", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(Integer, nullable=False)
    code: Mapped[str] = mapped_column(String(60), unique=True, nullable=False)
    category: Mapped[str] = mapped_column(String(150), nullable=False)
    priority: Mapped[str] = mapped_column(
        String(20), default=CasePriority.MEDIUM.value, nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(20), default=CaseStatus.OPEN.value, nullable=False
    )
    opening_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    due_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    observations: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachments: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)
    accompaniment_plan_base64: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    student: Mapped["Student | None"] = relationship(
        primaryjoin="foreign(CaseFile.student_id) == Student.id",
        viewonly=True,
    )
    follow_ups: Mapped[list["FollowUp"]] = relationship(
        back_populates="case_file",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="FollowUp.date",
    )


class FollowUp(Base):
    """
    A dated follow-up note on a case.

    ``responsible`` is the operator's display name at write time.
    """

    __tablename__ = "follow_ups"
    __table_args__ = (
        Index("idx_follow_ups_case", "case_id"),
        Index("idx_follow_ups_date", "date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("case_files.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    responsible: Mapped[str] = mapped_column(String(200), nullable=False)
    intervention_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    observations: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    is_effective: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    participant_types: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    case_file: Mapped["CaseFile"] = relationship(back_populates="follow_ups")


class PsychosocialInterview(Base):
    """
    Structured interview form; at most one per (case, interview type).

    ``form_data`` is opaque to the store.
    """

    __tablename__ = "psychosocial_interviews"
    __table_args__ = (
        UniqueConstraint(
            "case_file_id", "interview_type", name="uq_interview_case_type"
        ),
        Index("idx_interviews_case", "case_file_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_file_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("case_files.id", ondelete="CASCADE"), nullable=False
    )
    interview_type: Mapped[str] = mapped_column(String(30), nullable=False)
    form_data: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)
    completed_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
