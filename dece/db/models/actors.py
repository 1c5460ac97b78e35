"""SQLAlchemy ORM models for teachers, representatives, students and the roster."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dece.db.base import Base
from dece.db.enums import RosterStatus

if TYPE_CHECKING:
    from dece.db.models.institution import Course


class Teacher(Base):
    """
    A teacher; may tutor one course.

    ``tutor_of_course_id`` is a soft reference: deleting the course leaves it
    dangling and ``tutor_of_course`` then reads as None.
    """

    __tablename__ = "teachers"
    __table_args__ = (
        Index("idx_teachers_full_name", "full_name"),
        Index("idx_teachers_tutor_course", "tutor_of_course_id"),
        Index("idx_teachers_is_tutor", "is_tutor"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    tutor_of_course_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_tutor: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tutor_of_course: Mapped["Course | None"] = relationship(
        primaryjoin="foreign(Teacher.tutor_of_course_id) == Course.id",
        viewonly=True,
    )


class Representative(Base):
    """A student's legal representative (parent or guardian)."""

    __tablename__ = "representatives"
    __table_args__ = (Index("idx_representatives_full_name", "full_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    age: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    address: Mapped[str] = mapped_column(String(300), default="", nullable=False)
    phone: Mapped[str] = mapped_column(String(30), default="", nullable=False)


class Student(Base):
    """
    An enrolled student.

    ``course`` / ``parallel`` are the course's name and parallel copied at
    write time, not a reference. ``representative_id`` and ``tutor_id`` are
    soft references.
    """

    __tablename__ = "students"
    __table_args__ = (
        Index("idx_students_representative", "representative_id"),
        Index("idx_students_tutor", "tutor_id"),
        Index("idx_students_full_name", "full_name"),
        Index("idx_students_course_parallel", "course", "parallel"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    course: Mapped[str] = mapped_column(String(100), nullable=False)
    parallel: Mapped[str] = mapped_column(String(10), nullable=False)
    representative_id: Mapped[int] = mapped_column(Integer, nullable=False)
    tutor_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    special_condition: Mapped[str | None] = mapped_column(String(300), nullable=True)
    special_condition_doc_base64: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_base64: Mapped[str | None] = mapped_column(Text, nullable=True)

    representative: Mapped["Representative | None"] = relationship(
        primaryjoin="foreign(Student.representative_id) == Representative.id",
        viewonly=True,
    )
    tutor: Mapped["Teacher | None"] = relationship(
        primaryjoin="foreign(Student.tutor_id) == Teacher.id",
        viewonly=True,
    )


class StudentRoster(Base):
    """
    Imported enrollment list entry, before (or after) it becomes a Student.

    Status flow: Pendiente → Creado
    """

    __tablename__ = "student_roster"
    __table_args__ = (
        Index("idx_student_roster_full_name", "full_name"),
        Index("idx_student_roster_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cedula: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    course: Mapped[str] = mapped_column(String(100), nullable=False)
    parallel: Mapped[str] = mapped_column(String(10), nullable=False)
    representative_cedula: Mapped[str] = mapped_column(String(20), nullable=False)
    representative_name: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=RosterStatus.PENDING.value, nullable=False
    )
