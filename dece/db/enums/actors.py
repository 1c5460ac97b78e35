"""Enums for students, teachers, representatives and courses."""

from enum import Enum


class Gender(str, Enum):
    MALE = "Masculino"
    FEMALE = "Femenino"
    OTHER = "Otro"


class Shift(str, Enum):
    """School shift (jornada)."""

    MORNING = "Matutina"
    AFTERNOON = "Vespertina"
    EVENING = "Nocturna"


class RosterStatus(str, Enum):
    """Roster entry state: imported, or already turned into a student record."""

    PENDING = "Pendiente"
    CREATED = "Creado"
