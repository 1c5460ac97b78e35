"""Calendar enums (appointments and preventive activities)."""

from enum import Enum


class AppointmentStatus(str, Enum):
    """
    Appointment lifecycle status.

    Flow: scheduled → done
              ↘ cancelled
    """

    SCHEDULED = "Programada"
    DONE = "Realizada"
    CANCELLED = "Cancelada"


class AttendeeType(str, Enum):
    """Which actor table an appointment's attendee_id points into."""

    STUDENT = "Estudiante"
    REPRESENTATIVE = "Representante"
    TEACHER = "Docente"


class AudienceType(str, Enum):
    STUDENTS = "Estudiantes"
    PARENTS = "Padres"
    TEACHERS = "Docentes"
    AUTHORITIES = "Autoridades"


DEFAULT_APPOINTMENT_STATUS = AppointmentStatus.SCHEDULED
