"""Psychosocial interviews (one per case and interview type)."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from dece.db.enums import InterviewType
from dece.db.models import PsychosocialInterview
from dece.schemas.cases import InterviewSave
from dece.services.record_service import translated_integrity_errors


def get_interview(
    db: Session, case_file_id: int, interview_type: InterviewType | str
) -> PsychosocialInterview | None:
    return (
        db.query(PsychosocialInterview)
        .filter(
            PsychosocialInterview.case_file_id == case_file_id,
            PsychosocialInterview.interview_type == InterviewType(interview_type).value,
        )
        .first()
    )


def save_interview(db: Session, data: InterviewSave) -> PsychosocialInterview:
    """Update the interview for (case, type) in place, or insert it."""
    interview = get_interview(db, data.case_file_id, data.interview_type)
    if interview is None:
        interview = PsychosocialInterview(
            case_file_id=data.case_file_id,
            interview_type=data.interview_type.value,
        )
        db.add(interview)
    interview.form_data = dict(data.form_data)
    interview.completed_date = data.completed_date or date.today()
    with translated_integrity_errors(db):
        db.flush()
        db.commit()
    return interview


def list_interviews(db: Session, case_file_id: int) -> list[PsychosocialInterview]:
    return (
        db.query(PsychosocialInterview)
        .filter(PsychosocialInterview.case_file_id == case_file_id)
        .order_by(PsychosocialInterview.interview_type)
        .all()
    )
