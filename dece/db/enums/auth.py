"""Operator account enums."""

from enum import Enum


class UserRole(str, Enum):
    """Role shown in the UI (not enforced by the store)."""

    COORDINATOR = "Coordinador"
    ANALYST = "Analista"
    PROFESSIONAL = "Profesional DECE"


class UserStatus(str, Enum):
    """
    Account lifecycle.

    Flow: pending (registered, first login) → active (profile completed)
    """

    PENDING = "Pendiente"
    ACTIVE = "Activo"


# Number of security question/answer pairs a completed profile carries
SECURITY_QUESTION_COUNT = 2
