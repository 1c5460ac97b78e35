"""Student roster import and conversion into student records."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from dece.core.errors import RecordNotFoundError
from dece.db.enums import RosterStatus
from dece.db.models import Representative, StudentRoster
from dece.schemas.actors import RosterEntryCreate
from dece.services import record_service
from dece.services.record_service import translated_integrity_errors

logger = logging.getLogger(__name__)


def add_roster_entries(db: Session, rows: Iterable[RosterEntryCreate]) -> tuple[int, int]:
    """
    Add roster rows, skipping cédulas already on the roster or repeated in the batch.

    Returns ``(added, skipped)``.
    """
    existing = {cedula for (cedula,) in db.query(StudentRoster.cedula)}
    added = skipped = 0
    for row in rows:
        if row.cedula in existing:
            skipped += 1
            continue
        existing.add(row.cedula)
        db.add(StudentRoster(**row.model_dump(), status=RosterStatus.PENDING.value))
        added += 1
    with translated_integrity_errors(db):
        db.flush()
        db.commit()
    logger.info("Roster import: %d added, %d skipped", added, skipped)
    return added, skipped


def ensure_representative(db: Session, entry: StudentRoster) -> Representative:
    """Find the entry's representative by cédula, creating a bare record if absent."""
    representative = (
        db.query(Representative)
        .filter(Representative.cedula == entry.representative_cedula)
        .first()
    )
    if representative is not None:
        return representative
    return record_service.create(
        db,
        Representative,
        {
            "full_name": entry.representative_name,
            "cedula": entry.representative_cedula,
            "age": 0,
            "address": "",
            "phone": "",
        },
    )


def mark_roster_created(db: Session, cedula: str) -> StudentRoster:
    entry = db.query(StudentRoster).filter(StudentRoster.cedula == cedula).first()
    if entry is None:
        raise RecordNotFoundError(StudentRoster.__tablename__, cedula)
    return record_service.update(
        db, StudentRoster, entry.id, {"status": RosterStatus.CREATED.value}
    )


def pending_entries(db: Session) -> list[StudentRoster]:
    return (
        db.query(StudentRoster)
        .filter(StudentRoster.status == RosterStatus.PENDING.value)
        .order_by(StudentRoster.full_name)
        .all()
    )
