"""Case file enums."""

from enum import Enum


class CasePriority(str, Enum):
    LOW = "Baja"
    MEDIUM = "Media"
    HIGH = "Alta"
    CRITICAL = "Crítica"


class CaseStatus(str, Enum):
    """
    Case lifecycle status.

    Flow: open → in_progress → closed
    """

    OPEN = "Abierto"
    IN_PROGRESS = "En proceso"
    CLOSED = "Cerrado"


class InterventionType(str, Enum):
    INDIVIDUAL = "Individual"
    FAMILY = "Familiar"
    GROUP = "Grupal"
    CRISIS = "Crisis"


class ParticipantType(str, Enum):
    STUDENT = "Estudiante"
    REPRESENTATIVE = "Representante"
    TEACHER = "Docente"
    AUTHORITY = "Autoridad"


class InterviewType(str, Enum):
    """Psychosocial interview subject; at most one interview per case and type."""

    STUDENT = "Estudiante"
    TEACHER = "Docente"
    REPRESENTATIVE = "Representante"


# Category names other modules key on (soft references by name)
SEXUAL_VIOLENCE_CATEGORY = "Violencia Sexual"
PREGNANCY_CATEGORY = "Embarazo/ maternidad/ paternidad adolescente"

# (name, is_protected) in the order they are seeded
DEFAULT_CASE_CATEGORIES: list[tuple[str, bool]] = [
    ("Dificultades de aprendizaje", False),
    ("Problemas de comportamiento", False),
    ("Necesidades Educativas Especiales", False),
    ("Violencia Física", True),
    ("Violencia Psicológica", True),
    (SEXUAL_VIOLENCE_CATEGORY, True),
    ("Acoso Escolar (Bullying)", True),
    ("Consumo de alcohol, tabaco y/o drogas", True),
    ("Situación de vulnerabilidad económica", False),
    ("Conflictos familiares", False),
    (PREGNANCY_CATEGORY, False),
    ("Ideación/Intento de suicidio", True),
    ("Uso problemático de internet/redes sociales", False),
    ("Ausentismo y/o deserción escolar", False),
    ("Otros", False),
]

# Default next follow-up window for a new case
DEFAULT_FOLLOW_UP_DAYS = 30
