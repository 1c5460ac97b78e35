"""Teachers, representatives and students."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from dece.core.errors import RecordNotFoundError
from dece.db.enums import Gender, RosterStatus
from dece.db.models import Representative, Student, StudentRoster, Teacher
from dece.schemas.actors import RepresentativeCreate, StudentCreate, TeacherCreate
from dece.services import record_service, roster_service

logger = logging.getLogger(__name__)


def create_representative(db: Session, data: RepresentativeCreate) -> Representative:
    return record_service.create(db, Representative, data.model_dump())


def create_teacher(db: Session, data: TeacherCreate) -> Teacher:
    return record_service.create(db, Teacher, data.model_dump())


def create_student(db: Session, data: StudentCreate) -> Student:
    """
    Store a student.

    ``representative_id`` and ``tutor_id`` are not checked; a dangling id
    reads back as None through the relationship.
    """
    values = data.model_dump()
    values["gender"] = data.gender.value
    student = record_service.create(db, Student, values)
    logger.info("Created student %s", student.id)
    return student


def create_student_from_roster(
    db: Session, cedula: str, gender: Gender | str, birth_date: date
) -> Student:
    """
    Turn a pending roster entry into a student record.

    The representative is looked up by cédula (and created bare if new);
    the entry is then marked as created.
    """
    entry = (
        db.query(StudentRoster)
        .filter(
            StudentRoster.cedula == cedula,
            StudentRoster.status == RosterStatus.PENDING.value,
        )
        .first()
    )
    if entry is None:
        raise RecordNotFoundError(StudentRoster.__tablename__, cedula)

    representative = roster_service.ensure_representative(db, entry)
    student = create_student(
        db,
        StudentCreate(
            full_name=entry.full_name,
            cedula=entry.cedula,
            gender=Gender(gender),
            birth_date=birth_date,
            course=entry.course,
            parallel=entry.parallel,
            representative_id=representative.id,
        ),
    )
    roster_service.mark_roster_created(db, cedula)
    return student
