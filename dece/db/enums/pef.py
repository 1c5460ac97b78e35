"""Educando en Familia (PEF) enums and credit rules."""

from enum import Enum


class PefModality(str, Enum):
    IN_PERSON = "Presencial"
    REMOTE = "Virtual"


class EvaluationStatus(str, Enum):
    APPROVED = "Aprobado"
    NOT_APPROVED = "No Aprobado"


PEF_CRITERIA_COUNT = 8
PEF_PASSING_SCORE = 6
PEF_HOURS_BY_MODALITY = {
    PefModality.IN_PERSON: 15,
    PefModality.REMOTE: 10,
}
