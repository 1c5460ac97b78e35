"""Pydantic schemas for students, representatives, teachers and roster entries."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from dece.db.enums import Gender
from dece.utils.normalization import normalize_cedula, normalize_name


class _PersonBase(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=200)
    cedula: str = Field(..., min_length=1, max_length=20)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        return normalize_name(v) or v

    @field_validator("cedula")
    @classmethod
    def validate_cedula(cls, v: str) -> str:
        cleaned = normalize_cedula(v)
        if not cleaned:
            raise ValueError("cédula is required")
        return cleaned


class RepresentativeCreate(_PersonBase):
    age: int = Field(0, ge=0, le=120)
    address: str = Field("", max_length=300)
    phone: str = Field("", max_length=30)


class TeacherCreate(_PersonBase):
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=30)
    tutor_of_course_id: int | None = None
    is_tutor: bool = False


class StudentCreate(_PersonBase):
    gender: Gender
    birth_date: date
    course: str = Field(..., min_length=1, max_length=100)
    parallel: str = Field(..., min_length=1, max_length=10)
    representative_id: int
    tutor_id: int | None = None
    special_condition: str | None = Field(None, max_length=300)


class RosterEntryCreate(_PersonBase):
    """One row of an imported enrollment list."""

    course: str = Field(..., min_length=1, max_length=100)
    parallel: str = Field(..., min_length=1, max_length=10)
    representative_cedula: str = Field(..., min_length=1, max_length=20)
    representative_name: str = Field(..., min_length=1, max_length=200)
