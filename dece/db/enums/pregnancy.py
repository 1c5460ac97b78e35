"""Pregnancy / maternity tracking enums."""

from enum import Enum


class HealthCareType(str, Enum):
    PUBLIC = "Pública"
    PRIVATE = "Privada"
    NONE = "Ninguna"


class AlternativeEducationType(str, Enum):
    ASSISTED = "assisted"
    FLEXIBLE = "flexible"


class LeaveUnit(str, Enum):
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


# Estimated due date offset from pregnancy start
GESTATION_DAYS = 280
FULL_TERM_WEEKS = 40
