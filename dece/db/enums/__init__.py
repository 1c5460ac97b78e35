"""Enum definitions for application constants."""

from dece.db.enums.actors import Gender, RosterStatus, Shift
from dece.db.enums.auth import SECURITY_QUESTION_COUNT, UserRole, UserStatus
from dece.db.enums.calendar import (
    DEFAULT_APPOINTMENT_STATUS,
    AppointmentStatus,
    AttendeeType,
    AudienceType,
)
from dece.db.enums.cases import (
    DEFAULT_CASE_CATEGORIES,
    DEFAULT_FOLLOW_UP_DAYS,
    PREGNANCY_CATEGORY,
    SEXUAL_VIOLENCE_CATEGORY,
    CasePriority,
    CaseStatus,
    InterventionType,
    InterviewType,
    ParticipantType,
)
from dece.db.enums.pef import (
    PEF_CRITERIA_COUNT,
    PEF_HOURS_BY_MODALITY,
    PEF_PASSING_SCORE,
    EvaluationStatus,
    PefModality,
)
from dece.db.enums.pregnancy import (
    FULL_TERM_WEEKS,
    GESTATION_DAYS,
    AlternativeEducationType,
    HealthCareType,
    LeaveUnit,
)

__all__ = [
    "AlternativeEducationType",
    "AppointmentStatus",
    "AttendeeType",
    "AudienceType",
    "CasePriority",
    "CaseStatus",
    "DEFAULT_APPOINTMENT_STATUS",
    "DEFAULT_CASE_CATEGORIES",
    "DEFAULT_FOLLOW_UP_DAYS",
    "EvaluationStatus",
    "FULL_TERM_WEEKS",
    "GESTATION_DAYS",
    "Gender",
    "HealthCareType",
    "InterventionType",
    "InterviewType",
    "LeaveUnit",
    "PEF_CRITERIA_COUNT",
    "PEF_HOURS_BY_MODALITY",
    "PEF_PASSING_SCORE",
    "PREGNANCY_CATEGORY",
    "ParticipantType",
    "PefModality",
    "RosterStatus",
    "SECURITY_QUESTION_COUNT",
    "SEXUAL_VIOLENCE_CATEGORY",
    "Shift",
    "UserRole",
    "UserStatus",
]
