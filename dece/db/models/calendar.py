"""SQLAlchemy ORM models for the calendar: appointments, activities, meetings."""

from __future__ import annotations

import datetime as dt

from sqlalchemy import JSON, Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base
from dece.db.enums import DEFAULT_APPOINTMENT_STATUS


class Appointment(Base):
    """
    A scheduled meeting with a student, representative or teacher.

    ``attendee_id`` points into the table named by ``attendee_type``.
    ``student_id`` / ``case_id`` optionally tie the appointment to a case.
    Times are "HH:MM" strings.
    """

    __tablename__ = "appointments"
    __table_args__ = (
        Index("idx_appointments_date", "date"),
        Index("idx_appointments_start_time", "start_time"),
        Index("idx_appointments_status", "status"),
        Index("idx_appointments_student", "student_id"),
        Index("idx_appointments_case", "case_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    attendee_id: Mapped[int] = mapped_column(Integer, nullable=False)
    attendee_type: Mapped[str] = mapped_column(String(20), nullable=False)
    reason: Mapped[str] = mapped_column(Text, default="", nullable=False)
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), default=DEFAULT_APPOINTMENT_STATUS.value, nullable=False
    )
    responsible_user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    student_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    case_id: Mapped[int | None] = mapped_column(Integer, nullable=True)


class PreventiveActivity(Base):
    """A workshop or talk; attendance is counted per audience group."""

    __tablename__ = "preventive_activities"
    __table_args__ = (
        Index("idx_preventive_activities_date", "date"),
        Index("idx_preventive_activities_start_time", "start_time"),
        Index("idx_preventive_activities_end_date", "end_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    topic: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_executed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    audience: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    cooperating_institution: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Attendance
    attendees_male: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    attendees_female: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    attendees_parents: Mapped[int | None] = mapped_column(Integer, nullable=True)
    attendees_teachers: Mapped[int | None] = mapped_column(Integer, nullable=True)
    attendees_directors: Mapped[int | None] = mapped_column(Integer, nullable=True)

    results: Mapped[str] = mapped_column(Text, default="", nullable=False)


class CourseMeetingReport(Base):
    __tablename__ = "course_meeting_reports"
    __table_args__ = (
        Index("idx_course_meeting_reports_date", "date"),
        Index("idx_course_meeting_reports_course", "course"),
        Index("idx_course_meeting_reports_parallel", "parallel"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    course: Mapped[str] = mapped_column(String(100), nullable=False)
    parallel: Mapped[str] = mapped_column(String(10), nullable=False)
    attendees: Mapped[str] = mapped_column(Text, default="", nullable=False)
    agenda: Mapped[str] = mapped_column(Text, default="", nullable=False)
    conclusions: Mapped[str] = mapped_column(Text, default="", nullable=False)
    attachment_base64: Mapped[str | None] = mapped_column(Text, nullable=True)
