"""SQLAlchemy ORM models for the Educando en Familia (PEF) program."""

from __future__ import annotations

from datetime import date

from sqlalchemy import JSON, Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base
from dece.db.enums import EvaluationStatus, PefModality


class PefModule(Base):
    """A program module; evaluations refer to it by name."""

    __tablename__ = "pef_modules"
    __table_args__ = (Index("idx_pef_modules_start", "start_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)


class EducandoEnFamilia(Base):
    """
    A teacher's evaluation for one module.

    ``score`` is the number of true entries in ``criteria_met``; status and
    hours follow from score and modality.
    """

    __tablename__ = "educando_en_familia"
    __table_args__ = (
        Index("idx_pef_evaluations_teacher", "teacher_id"),
        Index("idx_pef_evaluations_start", "start_date"),
        Index("idx_pef_evaluations_report", "report_id"),
        Index("idx_pef_evaluations_module", "module_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    teacher_id: Mapped[int] = mapped_column(Integer, nullable=False)
    module_name: Mapped[str] = mapped_column(String(200), nullable=False)
    modality: Mapped[str] = mapped_column(
        String(20), default=PefModality.IN_PERSON.value, nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    hours: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=EvaluationStatus.NOT_APPROVED.value, nullable=False
    )
    criteria_met: Mapped[list[bool]] = mapped_column(JSON, default=list, nullable=False)
    report_id: Mapped[int | None] = mapped_column(Integer, nullable=True)


class PefReport(Base):
    __tablename__ = "pef_reports"
    __table_args__ = (Index("idx_pef_reports_date", "report_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_date: Mapped[date] = mapped_column(Date, nullable=False)
