"""Educando en Familia: modules and teacher evaluations."""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from dece.core.errors import RecordInUseError, RecordNotFoundError
from dece.db.enums import (
    PEF_HOURS_BY_MODALITY,
    PEF_PASSING_SCORE,
    EvaluationStatus,
    PefModality,
)
from dece.db.models import EducandoEnFamilia, PefModule
from dece.schemas.pef import EvaluationCreate, PefModuleCreate
from dece.services import record_service

logger = logging.getLogger(__name__)


class CriteriaResult(NamedTuple):
    score: int
    status: EvaluationStatus
    hours: int


def evaluate_criteria(criteria: Sequence[bool], modality: PefModality | str) -> CriteriaResult:
    """
    Score = number of criteria met.

    A score of PEF_PASSING_SCORE or more approves the teacher and credits the
    modality's hours; otherwise no hours are credited.
    """
    score = sum(1 for met in criteria if met)
    if score >= PEF_PASSING_SCORE:
        return CriteriaResult(
            score, EvaluationStatus.APPROVED, PEF_HOURS_BY_MODALITY[PefModality(modality)]
        )
    return CriteriaResult(score, EvaluationStatus.NOT_APPROVED, 0)


def create_module(db: Session, data: PefModuleCreate) -> PefModule:
    return record_service.create(db, PefModule, data.model_dump())


def get_module_by_name(db: Session, name: str) -> PefModule | None:
    return db.query(PefModule).filter(PefModule.name == name).first()


def module_usage(db: Session, name: str) -> int:
    return (
        db.query(func.count(EducandoEnFamilia.id))
        .filter(EducandoEnFamilia.module_name == name)
        .scalar()
        or 0
    )


def delete_module(db: Session, module_id: int) -> None:
    """Delete a module unless an evaluation still refers to it by name."""
    module = record_service.get_or_raise(db, PefModule, module_id)
    usage = module_usage(db, module.name)
    if usage:
        raise RecordInUseError(PefModule.__tablename__, module.name, usage)
    record_service.delete(db, PefModule, module_id)


def record_evaluation(db: Session, data: EvaluationCreate) -> EducandoEnFamilia:
    if get_module_by_name(db, data.module_name) is None:
        raise RecordNotFoundError(PefModule.__tablename__, data.module_name)
    result = evaluate_criteria(data.criteria_met, data.modality)
    evaluation = record_service.create(
        db,
        EducandoEnFamilia,
        {
            "teacher_id": data.teacher_id,
            "module_name": data.module_name,
            "modality": data.modality.value,
            "start_date": data.start_date,
            "end_date": data.end_date,
            "score": result.score,
            "hours": result.hours,
            "status": result.status.value,
            "criteria_met": list(data.criteria_met),
            "report_id": data.report_id,
        },
    )
    logger.info("Recorded PEF evaluation %s", evaluation.id)
    return evaluation


def list_teacher_evaluations(db: Session, teacher_id: int) -> list[EducandoEnFamilia]:
    return (
        db.query(EducandoEnFamilia)
        .filter(EducandoEnFamilia.teacher_id == teacher_id)
        .order_by(EducandoEnFamilia.start_date)
        .all()
    )
