"""Case files, case categories and sexual-violence case intake."""

from __future__ import annotations

import logging
import time
from datetime import date, timedelta

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dece.core.errors import (
    RecordInUseError,
    RecordNotFoundError,
    StoreError,
    TransactionAbortedError,
)
from dece.db.enums import (
    DEFAULT_FOLLOW_UP_DAYS,
    SEXUAL_VIOLENCE_CATEGORY,
    CasePriority,
    CaseStatus,
)
from dece.db.integrity import translate_integrity_error
from dece.db.models import (
    INSTITUTION_ID,
    CaseCategory,
    CaseFile,
    Institution,
    SexualViolenceCaseDetails,
    SexualViolenceVictim,
    Student,
)
from dece.schemas.cases import (
    CaseFileCreate,
    CaseFileUpdate,
    SexualViolenceDetailsCreate,
    VictimCreate,
)
from dece.services import record_service
from dece.utils.normalization import initials

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_case_code(
    institution_name: str | None,
    student_name: str | None,
    today: date,
    now_ms: int,
) -> str:
    """
    Build ``<institution initials>-<student initials>-<YYYYMMDD>-<ms tail>``.

    Missing names fall back to ``IE`` / ``XX``. Two codes generated in the
    same millisecond-tail window for the same student collide; the unique
    key on ``case_files.code`` rejects the second one.
    """
    return "-".join(
        [
            initials(institution_name) or "IE",
            initials(student_name) or "XX",
            today.strftime("%Y%m%d"),
            str(now_ms)[-4:],
        ]
    )


# =============================================================================
# Case files
# =============================================================================


def get_case_student(db: Session, case: CaseFile) -> Student | None:
    """The case's student, or None when the reference dangles."""
    return db.get(Student, case.student_id)


def create_case(
    db: Session,
    data: CaseFileCreate,
    today: date | None = None,
    now_ms: int | None = None,
) -> CaseFile:
    today = today or date.today()
    institution = db.get(Institution, INSTITUTION_ID)
    student = db.get(Student, data.student_id)
    opening = data.opening_date or today

    case = record_service.create(
        db,
        CaseFile,
        {
            "student_id": data.student_id,
            "code": generate_case_code(
                institution.name if institution else None,
                student.full_name if student else None,
                today,
                now_ms if now_ms is not None else _now_ms(),
            ),
            "category": data.category,
            "priority": data.priority.value,
            "status": data.status.value,
            "opening_date": opening,
            "due_date": data.due_date or opening + timedelta(days=DEFAULT_FOLLOW_UP_DAYS),
            "description": data.description,
            "observations": data.observations,
            "attachments": [item.model_dump() for item in data.attachments],
        },
    )
    logger.info("Created case %s", case.id)
    return case


def update_case(db: Session, case_id: int, data: CaseFileUpdate) -> CaseFile:
    changes = data.model_dump(exclude_unset=True)
    for name in ("priority", "status"):
        if changes.get(name) is not None:
            changes[name] = changes[name].value
    return record_service.update(db, CaseFile, case_id, changes)


def list_cases_for_student(db: Session, student_id: int) -> list[CaseFile]:
    return (
        db.query(CaseFile)
        .filter(CaseFile.student_id == student_id)
        .order_by(CaseFile.opening_date.desc(), CaseFile.id.desc())
        .all()
    )


def list_cases_by_category_status(
    db: Session, category: str, status: CaseStatus | str
) -> list[CaseFile]:
    status_value = CaseStatus(status).value
    return (
        db.query(CaseFile)
        .filter(CaseFile.category == category, CaseFile.status == status_value)
        .order_by(CaseFile.due_date)
        .all()
    )


def list_cases_due_between(db: Session, start: date, end: date) -> list[CaseFile]:
    return record_service.find_between(db, CaseFile, "due_date", start, end)


# =============================================================================
# Sexual violence
# =============================================================================


def create_sexual_violence_case(
    db: Session,
    details: SexualViolenceDetailsCreate,
    victims: list[VictimCreate],
    today: date | None = None,
    now_ms: int | None = None,
) -> CaseFile:
    """
    Open a sexual-violence case with its details and victims atomically.

    The first victim must be an enrolled student (matched by cédula); the
    case is opened for that student. Any failure rolls back every row and
    raises TransactionAbortedError.
    """
    if not victims:
        raise ValueError("at least one victim is required")
    today = today or date.today()
    now_ms = now_ms if now_ms is not None else _now_ms()

    try:
        student = db.query(Student).filter(Student.cedula == victims[0].cedula).first()
        if student is None:
            raise RecordNotFoundError(Student.__tablename__, victims[0].cedula)

        case = CaseFile(
            student_id=student.id,
            code=f"VS-{student.cedula}-{now_ms}",
            category=SEXUAL_VIOLENCE_CATEGORY,
            priority=CasePriority.CRITICAL.value,
            status=CaseStatus.OPEN.value,
            opening_date=today,
            due_date=details.denunciation_date or today,
            description=f"Caso de Violencia Sexual: {details.crime_type or 'No especificado'}.",
            attachments=[],
        )
        db.add(case)
        db.flush()

        details_row = SexualViolenceCaseDetails(
            case_file_id=case.id,
            **details.model_dump(exclude={"denunciation_date"}),
            denunciation_date=details.denunciation_date or today,
        )
        db.add(details_row)
        db.flush()

        db.add_all(
            SexualViolenceVictim(sv_case_details_id=details_row.id, **victim.model_dump())
            for victim in victims
        )
        db.flush()
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        cause = translate_integrity_error(exc)
        raise TransactionAbortedError(
            f"Sexual-violence case was not created: {cause}"
        ) from exc
    except (StoreError, ValueError) as exc:
        db.rollback()
        raise TransactionAbortedError(
            f"Sexual-violence case was not created: {exc}"
        ) from exc

    logger.info("Created sexual-violence case %s", case.id)
    return case


# =============================================================================
# Categories
# =============================================================================


def list_categories(db: Session) -> list[CaseCategory]:
    return db.query(CaseCategory).order_by(CaseCategory.name).all()


def create_category(db: Session, name: str, is_protected: bool = False) -> CaseCategory:
    return record_service.create(
        db, CaseCategory, {"name": " ".join(name.split()), "is_protected": is_protected}
    )


def rename_category(db: Session, category_id: int, new_name: str) -> CaseCategory:
    """Rename a category; existing cases keep the old name."""
    return record_service.update(
        db, CaseCategory, category_id, {"name": " ".join(new_name.split())}
    )


def toggle_protected(db: Session, category_id: int) -> CaseCategory:
    category = record_service.get_or_raise(db, CaseCategory, category_id)
    return record_service.update(
        db, CaseCategory, category_id, {"is_protected": not category.is_protected}
    )


def category_usage(db: Session) -> dict[str, int]:
    """Number of cases per category name (names with no cases are omitted)."""
    rows = db.query(CaseFile.category, func.count(CaseFile.id)).group_by(CaseFile.category)
    return {name: total for name, total in rows}


def delete_category(db: Session, category_id: int) -> None:
    category = record_service.get_or_raise(db, CaseCategory, category_id)
    usage = (
        db.query(func.count(CaseFile.id))
        .filter(CaseFile.category == category.name)
        .scalar()
        or 0
    )
    if usage:
        raise RecordInUseError(CaseCategory.__tablename__, category.name, usage)
    record_service.delete(db, CaseCategory, category_id)
