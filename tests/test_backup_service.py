"""Tests for whole-store backup export and restore."""

import json
from datetime import date

import pytest

from dece.core.errors import MalformedBackupError, RestoreFailedError
from dece.db.models import AppSetting, Representative, Student, User
from dece.db.registry import table_names
from dece.db.session import open_store
from dece.services import backup_service, record_service


def _counts(store) -> dict[str, int]:
    with store.transaction() as db:
        return {name: len(rows) for name, rows in backup_service.export_backup(db).items()}


def test_export_has_every_table_with_plain_values(seeded_db):
    document = backup_service.export_backup(seeded_db)

    assert list(document) == table_names()
    assert len(document["institution"]) == 1
    assert len(document["students"]) == record_service.count(seeded_db, Student)
    student = document["students"][0]
    assert isinstance(student["birth_date"], str)
    date.fromisoformat(student["birth_date"])
    # Round-trips through JSON unchanged
    assert json.loads(json.dumps(document)) == document


def test_restore_into_empty_store_reproduces_export(seeded_db, tmp_path):
    document = json.loads(backup_service.dump_backup(seeded_db))

    target, _ = open_store(str(tmp_path / "restored.db"), seed=False)
    try:
        report = backup_service.restore_backup(target, document)
        with target.transaction() as db:
            assert backup_service.export_backup(db) == document
    finally:
        target.close()

    assert report.counts["students"] == len(document["students"])
    assert report.total == sum(len(rows) for rows in document.values())


def test_write_backup_file_uses_dated_name(seeded_db, tmp_path):
    path = backup_service.write_backup_file(seeded_db, tmp_path / "out", day=date(2024, 5, 1))

    assert path.name == "dece_backup_2024-05-01.json"
    assert backup_service.load_backup_file(path) == backup_service.export_backup(seeded_db)


def test_tables_absent_from_document_end_up_empty(seeded_store):
    backup_service.restore_backup(
        seeded_store, {"settings": [{"key": "workingHours", "value": {"start": "08:00"}}]}
    )

    counts = _counts(seeded_store)
    assert counts["settings"] == 1
    assert counts["students"] == 0
    assert counts["users"] == 0


def test_restore_through_session_refreshes_loaded_objects(db, representative):
    backup_service.restore_backup(
        db,
        {
            "representatives": [
                {"id": representative.id, "full_name": "Nombre Restaurado", "cedula": "0944444444"}
            ]
        },
    )

    assert representative.full_name == "Nombre Restaurado"
    assert representative.age == 0


def test_json_null_setting_survives_restore(db):
    backup_service.restore_backup(db, {"settings": [{"key": "pdfBackgroundBase64", "value": None}]})

    row = db.get(AppSetting, "pdfBackgroundBase64")
    assert row is not None
    assert row.value is None


@pytest.mark.parametrize(
    "document, expected",
    [
        ({"students": [], "pupils": []}, "unknown tables: pupils"),
        ({}, "none of the store's tables"),
        ({"students": {"id": 1}}, "students: expected a list"),
        ({"representatives": ["row"]}, "representatives[0]: expected an object"),
        (
            {"representatives": [{"id": 1, "cedula": "0911111111"}]},
            "representatives[0].full_name",
        ),
        (
            {"representatives": [{"full_name": "Ana", "cedula": "09", "nickname": "x"}]},
            "representatives[0].nickname",
        ),
        (
            {"case_files": [{
                "student_id": 1,
                "code": "X",
                "category": "Otros",
                "opening_date": "ayer",
                "due_date": "2024-10-01",
            }]},
            "case_files[0].opening_date",
        ),
    ],
)
def test_malformed_documents_are_rejected_before_any_change(seeded_store, document, expected):
    before = _counts(seeded_store)

    with pytest.raises(MalformedBackupError) as exc_info:
        backup_service.restore_backup(seeded_store, document)

    assert any(expected in problem for problem in exc_info.value.problems)
    assert _counts(seeded_store) == before


def test_all_problems_are_reported_together():
    with pytest.raises(MalformedBackupError) as exc_info:
        backup_service.validate_backup(
            {
                "students": [{"id": "uno"}],
                "users": "todos",
                "extra": [],
            }
        )

    problems = exc_info.value.problems
    assert any(p.startswith("unknown tables") for p in problems)
    assert any(p.startswith("users:") for p in problems)
    assert any(p.startswith("students[0].id") for p in problems)


def test_parse_backup_rejects_non_json_and_non_objects():
    with pytest.raises(MalformedBackupError, match="not valid JSON"):
        backup_service.parse_backup("{not json")
    with pytest.raises(MalformedBackupError, match="top level"):
        backup_service.parse_backup("[1, 2, 3]")


def test_constraint_failure_rolls_back_and_keeps_previous_data(seeded_store, seeded_db):
    before = _counts(seeded_store)
    document = {
        "representatives": [
            {"full_name": "Ana Ponce", "cedula": "0955555555"},
            {"full_name": "Ana Ponce Bis", "cedula": "0955555555"},
        ]
    }

    with pytest.raises(RestoreFailedError) as exc_info:
        backup_service.restore_backup(seeded_store, document)

    assert "UNIQUE" in exc_info.value.detail
    assert _counts(seeded_store) == before
    assert record_service.count(seeded_db, User) == 3


def test_dangling_owned_child_fails_restore(seeded_store):
    before = _counts(seeded_store)
    document = {
        "follow_ups": [
            {
                "id": 1,
                "case_id": 999,
                "date": "2024-10-02",
                "description": "Sin caso",
                "responsible": "Analista DECE",
            }
        ]
    }

    with pytest.raises(RestoreFailedError):
        backup_service.restore_backup(seeded_store, document)

    assert _counts(seeded_store) == before


def test_dangling_soft_reference_is_restored_as_is(db):
    document = {
        "students": [
            {
                "full_name": "Mateo Vera",
                "cedula": "0966666666",
                "gender": "Masculino",
                "birth_date": "2010-02-02",
                "course": "NOVENO EGB",
                "parallel": "B",
                "representative_id": 77,
            }
        ]
    }

    backup_service.restore_backup(db, document)

    student = record_service.find_one_by(db, Student, cedula="0966666666")
    assert student.representative_id == 77
    assert student.representative is None
    assert record_service.count(db, Representative) == 0
