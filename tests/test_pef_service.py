"""Tests for Educando en Familia scoring, modules and evaluations."""

from datetime import date

import pytest
from pydantic import ValidationError

from dece.core.errors import DuplicateKeyError, RecordInUseError, RecordNotFoundError
from dece.db.enums import EvaluationStatus, PefModality
from dece.db.models import PefModule, Teacher
from dece.schemas.pef import EvaluationCreate, PefModuleCreate
from dece.services import pef_service, record_service

MODULE = PefModuleCreate(
    name="Módulo 1: Convivencia Armónica",
    start_date=date(2024, 5, 1),
    end_date=date(2024, 6, 30),
)


@pytest.fixture
def teacher(db) -> Teacher:
    return record_service.create(
        db, Teacher, {"full_name": "Carlos Ortiz Reyes", "cedula": "0977000111"}
    )


def _evaluation(teacher_id: int, met: int, **overrides) -> EvaluationCreate:
    values = {
        "teacher_id": teacher_id,
        "module_name": MODULE.name,
        "start_date": MODULE.start_date,
        "end_date": MODULE.end_date,
        "criteria_met": [i < met for i in range(8)],
    }
    values.update(overrides)
    return EvaluationCreate(**values)


@pytest.mark.parametrize(
    "met, modality, status, hours",
    [
        (8, PefModality.IN_PERSON, EvaluationStatus.APPROVED, 15),
        (6, PefModality.IN_PERSON, EvaluationStatus.APPROVED, 15),
        (6, PefModality.REMOTE, EvaluationStatus.APPROVED, 10),
        (5, PefModality.IN_PERSON, EvaluationStatus.NOT_APPROVED, 0),
        (0, PefModality.REMOTE, EvaluationStatus.NOT_APPROVED, 0),
    ],
)
def test_evaluate_criteria(met, modality, status, hours):
    result = pef_service.evaluate_criteria([i < met for i in range(8)], modality)

    assert result.score == met
    assert result.status is status
    assert result.hours == hours


def test_record_evaluation_derives_score_status_and_hours(db, teacher):
    pef_service.create_module(db, MODULE)

    evaluation = pef_service.record_evaluation(
        db, _evaluation(teacher.id, 7, modality=PefModality.REMOTE)
    )

    assert evaluation.score == 7
    assert evaluation.status == "Aprobado"
    assert evaluation.hours == 10
    assert pef_service.list_teacher_evaluations(db, teacher.id) == [evaluation]


def test_evaluation_needs_known_module(db, teacher):
    with pytest.raises(RecordNotFoundError):
        pef_service.record_evaluation(db, _evaluation(teacher.id, 6))


def test_evaluation_schema_checks_criteria_and_dates():
    with pytest.raises(ValidationError):
        EvaluationCreate(
            teacher_id=1,
            module_name="M",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 2, 1),
            criteria_met=[True] * 7,
        )
    with pytest.raises(ValidationError):
        PefModuleCreate(name="M", start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))


def test_module_names_are_unique(db):
    pef_service.create_module(db, MODULE)

    with pytest.raises(DuplicateKeyError):
        pef_service.create_module(db, MODULE)


def test_module_in_use_cannot_be_deleted(db, teacher):
    module = pef_service.create_module(db, MODULE)
    pef_service.record_evaluation(db, _evaluation(teacher.id, 4))

    with pytest.raises(RecordInUseError) as exc_info:
        pef_service.delete_module(db, module.id)
    assert exc_info.value.usage == 1

    unused = pef_service.create_module(
        db,
        PefModuleCreate(name="Módulo 2", start_date=date(2024, 7, 1), end_date=date(2024, 8, 31)),
    )
    pef_service.delete_module(db, unused.id)
    assert record_service.count(db, PefModule) == 1
