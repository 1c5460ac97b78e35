"""Case follow-ups and the DECE follow-up form."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from dece.core.errors import RecordNotFoundError
from dece.db.models import CaseFile, DeceFollowUpForm, FollowUp
from dece.schemas.cases import DeceFollowUpFormCreate, FollowUpCreate
from dece.services import record_service
from dece.services.record_service import translated_integrity_errors

logger = logging.getLogger(__name__)

DECE_FORM_FOLLOW_UP_TEXT = "Formulario DECE de V.S. creado."


def _follow_up_values(data: FollowUpCreate) -> dict:
    values = data.model_dump()
    if data.intervention_type is not None:
        values["intervention_type"] = data.intervention_type.value
    if data.participant_types is not None:
        values["participant_types"] = [item.value for item in data.participant_types]
    return values


def add_follow_up(db: Session, data: FollowUpCreate) -> FollowUp:
    """Add a follow-up; the case must exist (IntegrityViolationError otherwise)."""
    return record_service.create(db, FollowUp, _follow_up_values(data))


def list_follow_ups(db: Session, case_id: int) -> list[FollowUp]:
    return (
        db.query(FollowUp)
        .filter(FollowUp.case_id == case_id)
        .order_by(FollowUp.date, FollowUp.id)
        .all()
    )


def add_dece_follow_up_form(
    db: Session,
    case_id: int,
    form: DeceFollowUpFormCreate,
    responsible: str,
    on_date: date | None = None,
) -> DeceFollowUpForm:
    """Create a follow-up entry and its DECE form together."""
    if db.get(CaseFile, case_id) is None:
        raise RecordNotFoundError(CaseFile.__tablename__, case_id)

    with translated_integrity_errors(db):
        follow_up = FollowUp(
            case_id=case_id,
            date=on_date or date.today(),
            description=DECE_FORM_FOLLOW_UP_TEXT,
            responsible=responsible,
        )
        db.add(follow_up)
        db.flush()
        row = DeceFollowUpForm(
            case_file_id=case_id, follow_up_id=follow_up.id, **form.model_dump()
        )
        db.add(row)
        db.flush()
        db.commit()
    logger.info("Added DECE follow-up form %s to case %s", row.id, case_id)
    return row


def get_dece_form_for_follow_up(db: Session, follow_up_id: int) -> DeceFollowUpForm | None:
    return (
        db.query(DeceFollowUpForm)
        .filter(DeceFollowUpForm.follow_up_id == follow_up_id)
        .first()
    )
