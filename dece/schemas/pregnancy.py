"""Pydantic schemas for pregnancy tracking."""

from datetime import date

from pydantic import BaseModel, Field

from dece.db.enums import AlternativeEducationType, HealthCareType


class PregnancyCaseCreate(BaseModel):
    """
    Request schema for a pregnancy case.

    Due date and leave end dates are derived; callers only give start dates.
    """

    student_id: int
    related_case_id: int | None = None
    pregnancy_start_date: date | None = None
    health_institution: str | None = Field(None, max_length=200)
    health_professional: str | None = Field(None, max_length=200)
    is_high_risk: bool = False
    needs_alternative_education: bool = False
    alternative_education_type: AlternativeEducationType | None = None
    flexibility_details: str | None = None
    birth_date: date | None = None
    maternity_leave_start_date: date | None = None
    lactation_leave_start_date: date | None = None
    is_from_violence: bool = False
    receives_health_care: HealthCareType = HealthCareType.NONE
