"""Tests for roster import and conversion bookkeeping."""

import pytest

from dece.core.errors import RecordNotFoundError
from dece.db.models import Representative
from dece.schemas.actors import RosterEntryCreate
from dece.services import record_service, roster_service


def _entry(cedula: str, name: str = "Lucas Flores Vera") -> RosterEntryCreate:
    return RosterEntryCreate(
        cedula=cedula,
        full_name=name,
        course="DÉCIMO EGB",
        parallel="C",
        representative_cedula="0911000222",
        representative_name="Gabriela Vera Ortiz",
    )


def test_import_skips_repeated_cedulas(db):
    added, skipped = roster_service.add_roster_entries(
        db, [_entry("0950000001"), _entry("0950000002"), _entry("0950000001")]
    )
    assert (added, skipped) == (2, 1)

    added, skipped = roster_service.add_roster_entries(
        db, [_entry("0950000002"), _entry("0950000003", "Adrián Mora")]
    )
    assert (added, skipped) == (1, 1)
    assert len(roster_service.pending_entries(db)) == 3


def test_ensure_representative_creates_once(db):
    roster_service.add_roster_entries(db, [_entry("0950000001"), _entry("0950000002")])
    first, second = roster_service.pending_entries(db)

    created = roster_service.ensure_representative(db, first)
    reused = roster_service.ensure_representative(db, second)

    assert created.id == reused.id
    assert created.full_name == "Gabriela Vera Ortiz"
    assert record_service.count(db, Representative) == 1


def test_mark_roster_created_removes_entry_from_pending(db):
    roster_service.add_roster_entries(db, [_entry("0950000001")])

    entry = roster_service.mark_roster_created(db, "0950000001")

    assert entry.status == "Creado"
    assert roster_service.pending_entries(db) == []
    with pytest.raises(RecordNotFoundError):
        roster_service.mark_roster_created(db, "0999999990")
