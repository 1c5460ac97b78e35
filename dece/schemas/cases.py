"""Pydantic schemas for case files, follow-ups, interviews and sexual-violence cases."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from dece.db.enums import (
    CasePriority,
    CaseStatus,
    InterventionType,
    InterviewType,
    ParticipantType,
)


class Attachment(BaseModel):
    name: str
    base64: str
    type: str


class CaseFileCreate(BaseModel):
    """Request schema for opening a case; the code is generated."""

    student_id: int
    category: str = Field(..., min_length=1, max_length=150)
    priority: CasePriority = CasePriority.MEDIUM
    status: CaseStatus = CaseStatus.OPEN
    opening_date: date | None = None
    # Defaults to opening date + DEFAULT_FOLLOW_UP_DAYS
    due_date: date | None = None
    description: str = ""
    observations: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)


class CaseFileUpdate(BaseModel):
    """Request schema for updating a case (partial)."""

    category: str | None = Field(None, min_length=1, max_length=150)
    priority: CasePriority | None = None
    status: CaseStatus | None = None
    due_date: date | None = None
    description: str | None = None
    observations: str | None = None
    attachments: list[Attachment] | None = None
    accompaniment_plan_base64: str | None = None


class FollowUpCreate(BaseModel):
    case_id: int
    date: date
    description: str = Field(..., min_length=1)
    responsible: str = Field(..., min_length=1, max_length=200)
    intervention_type: InterventionType | None = None
    observations: str | None = None
    attachment: Attachment | None = None
    is_effective: bool | None = None
    participant_types: list[ParticipantType] | None = None


class InterviewSave(BaseModel):
    case_file_id: int
    interview_type: InterviewType
    form_data: dict[str, Any] = Field(default_factory=dict)
    completed_date: date | None = None


# =============================================================================
# Sexual violence
# =============================================================================


class SexualViolenceDetailsCreate(BaseModel):
    """Everything on the sexual-violence intake form except the victims."""

    responsible_name: str
    responsible_cedula: str
    responsible_phone: str = ""
    responsible_cell_phone: str = ""
    responsible_email: str = ""
    responsible_position: str = ""

    incident_institution_amie: str
    incident_institution_name: str
    zone: str = ""
    district: str = ""
    province: str = ""
    canton: str = ""
    parish: str = ""
    has_dece: bool = True
    dece_professional_name: str | None = None
    rector_name: str = ""
    rector_position: str = ""

    infractor_doc_type: str | None = None
    infractor_cedula: str | None = None
    infractor_full_name: str
    infractor_birth_date: date | None = None
    infractor_age: int | None = Field(None, ge=0, le=120)
    infractor_sex: str
    infractor_relationship: str

    district_process_number: str | None = None
    denunciation_date: date | None = None
    denunciator_relationship: str
    incident_date: date
    crime_type: str = ""
    has_fiscalia_denunciation: bool = False
    fiscalia_denunciation_date: date | None = None
    fiscalia_denunciation_number: str | None = None
    fiscalia_city: str | None = None
    fiscalia_crime_type: str | None = None
    initial_observations: str | None = None


class VictimCreate(BaseModel):
    doc_type: str = "CÉDULA"
    cedula: str = Field(..., min_length=1, max_length=20)
    full_name: str = Field(..., min_length=1, max_length=200)
    representative_cedula: str = ""
    representative_name: str = ""
    sex: str
    birth_date: date
    age_at_incident: int = Field(..., ge=0, le=120)
    has_disability: bool = False
    disability_type: str | None = None
    education_level: str


class DeceFollowUpFormCreate(BaseModel):
    """Ministry follow-up questionnaire (q1-q23)."""

    q1_has_plan: bool = False
    q2_plan_remitted: bool = False
    q3_plan_has_objective: bool = False
    q4_has_legal_support: bool = False
    q5_has_psychological_support: bool = False
    q6_has_family_psychological_support: bool = False
    q7_has_community_psychological_support: bool = False
    q8_has_medical_support: bool = False
    q9_has_family_medical_support: bool = False
    q10_has_community_medical_support: bool = False
    q11_has_pedagogical_support: bool = False
    q12_has_community_pedagogical_support: bool = False
    q13_has_infrastructure_measures: bool = False
    q14_plan_has_budget: bool = False
    q15_plan_has_schedule: bool = False
    q16_monitor_name: str = ""
    q17_monitor_position: str = ""
    q18_victim_changed_institution: bool = False
    q18a_new_amie: str | None = None
    q18b_new_institution_name: str | None = None
    q18c_new_zone: str | None = None
    q18d_new_district: str | None = None
    q19_psychological_support_provider: str = ""
    q20_has_intervention_plan: bool = False
    q21_victim_in_education_system: bool = False
    q22_dece_supports_in_new_institution: bool = False
    q23_resulted_in_pregnancy: bool = False
    observations: str = ""
