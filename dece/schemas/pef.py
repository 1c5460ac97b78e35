"""Pydantic schemas for Educando en Familia."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from dece.db.enums import PEF_CRITERIA_COUNT, PefModality


class PefModuleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def validate_dates(self) -> "PefModuleCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class EvaluationCreate(BaseModel):
    """A teacher's module evaluation; score, status and hours are derived."""

    teacher_id: int
    module_name: str = Field(..., min_length=1, max_length=200)
    modality: PefModality = PefModality.IN_PERSON
    start_date: date
    end_date: date
    criteria_met: list[bool] = Field(
        ..., min_length=PEF_CRITERIA_COUNT, max_length=PEF_CRITERIA_COUNT
    )
    report_id: int | None = None

    @model_validator(mode="after")
    def validate_dates(self) -> "EvaluationCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
