"""SQLAlchemy ORM models for pregnancy tracking and assisted classes."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base
from dece.db.enums import HealthCareType


class PregnancyCase(Base):
    """
    Pregnancy / maternity follow-up for a student.

    ``estimated_due_date`` and the leave end dates are derived at write time
    from the start dates and the ``leaveSettings`` value then in force.
    ``related_case_id`` is a soft reference to a case file.
    """

    __tablename__ = "pregnancy_cases"
    __table_args__ = (
        Index("idx_pregnancy_cases_student", "student_id"),
        Index("idx_pregnancy_cases_related_case", "related_case_id"),
        Index("idx_pregnancy_cases_start", "pregnancy_start_date"),
        Index("idx_pregnancy_cases_birth", "birth_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(Integer, nullable=False)
    related_case_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    pregnancy_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    estimated_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    health_institution: Mapped[str | None] = mapped_column(String(200), nullable=True)
    health_professional: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_high_risk: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    needs_alternative_education: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    alternative_education_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    flexibility_details: Mapped[str | None] = mapped_column(Text, nullable=True)

    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    maternity_leave_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    maternity_leave_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    lactation_leave_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    lactation_leave_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    birth_certificate_base64: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_from_violence: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    receives_health_care: Mapped[str] = mapped_column(
        String(20), default=HealthCareType.NONE.value, nullable=False
    )


class AssistedClass(Base):
    """Home-study permission for a student on medical leave."""

    __tablename__ = "assisted_classes"
    __table_args__ = (
        Index("idx_assisted_classes_student", "student_id"),
        Index("idx_assisted_classes_return", "tentative_return_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    permission_period: Mapped[str] = mapped_column(String(50), nullable=False)  # e.g. "30 días"
    tentative_return_date: Mapped[date] = mapped_column(Date, nullable=False)
    authorization_doc_base64: Mapped[str | None] = mapped_column(Text, nullable=True)
