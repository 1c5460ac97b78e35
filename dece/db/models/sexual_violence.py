"""SQLAlchemy ORM models for the sexual-violence case module.

All three tables are owned by a case file (hard foreign keys, cascade on
delete). A case has at most one details row; each follow-up has at most one
DECE follow-up form.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dece.db.base import Base


class SexualViolenceCaseDetails(Base):
    __tablename__ = "sexual_violence_case_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_file_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("case_files.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Reporting professional
    responsible_name: Mapped[str] = mapped_column(String(200), nullable=False)
    responsible_cedula: Mapped[str] = mapped_column(String(20), nullable=False)
    responsible_phone: Mapped[str] = mapped_column(String(30), default="", nullable=False)
    responsible_cell_phone: Mapped[str] = mapped_column(String(30), default="", nullable=False)
    responsible_email: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    responsible_position: Mapped[str] = mapped_column(String(150), default="", nullable=False)

    # Institution where the incident happened
    incident_institution_amie: Mapped[str] = mapped_column(String(20), nullable=False)
    incident_institution_name: Mapped[str] = mapped_column(String(300), nullable=False)
    zone: Mapped[str] = mapped_column(String(20), default="", nullable=False)
    district: Mapped[str] = mapped_column(String(20), default="", nullable=False)
    province: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    canton: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    parish: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    has_dece: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    dece_professional_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    rector_name: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    rector_position: Mapped[str] = mapped_column(String(150), default="", nullable=False)

    # Alleged offender
    infractor_doc_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    infractor_cedula: Mapped[str | None] = mapped_column(String(20), nullable=True)
    infractor_full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    infractor_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    infractor_age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    infractor_sex: Mapped[str] = mapped_column(String(20), nullable=False)
    infractor_relationship: Mapped[str] = mapped_column(String(50), nullable=False)

    # Case identification
    district_process_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    denunciation_date: Mapped[date] = mapped_column(Date, nullable=False)
    denunciator_relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    incident_date: Mapped[date] = mapped_column(Date, nullable=False)
    crime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    has_fiscalia_denunciation: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    fiscalia_denunciation_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    fiscalia_denunciation_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    fiscalia_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    fiscalia_crime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    initial_observations: Mapped[str | None] = mapped_column(Text, nullable=True)


class SexualViolenceVictim(Base):
    """A victim listed on a sexual-violence case (usually one)."""

    __tablename__ = "sexual_violence_victims"
    __table_args__ = (
        Index("idx_sv_victims_details", "sv_case_details_id"),
        Index("idx_sv_victims_cedula", "cedula"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sv_case_details_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("sexual_violence_case_details.id", ondelete="CASCADE"),
        nullable=False,
    )
    doc_type: Mapped[str] = mapped_column(String(30), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), nullable=False)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    representative_cedula: Mapped[str] = mapped_column(String(20), default="", nullable=False)
    representative_name: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    sex: Mapped[str] = mapped_column(String(20), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    age_at_incident: Mapped[int] = mapped_column(Integer, nullable=False)
    has_disability: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    disability_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    education_level: Mapped[str] = mapped_column(String(100), nullable=False)


class DeceFollowUpForm(Base):
    """
    Ministry follow-up questionnaire attached to one follow-up entry.

    Questions 1-15 check the accompaniment plan; 16-23 record who monitors
    the case and where the victim is now.
    """

    __tablename__ = "dece_follow_up_forms"
    __table_args__ = (Index("idx_dece_forms_case", "case_file_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    case_file_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("case_files.id", ondelete="CASCADE"), nullable=False
    )
    follow_up_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("follow_ups.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Accompaniment plan (q1-q15)
    q1_has_plan: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q2_plan_remitted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q3_plan_has_objective: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q4_has_legal_support: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q5_has_psychological_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q6_has_family_psychological_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q7_has_community_psychological_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q8_has_medical_support: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q9_has_family_medical_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q10_has_community_medical_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q11_has_pedagogical_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q12_has_community_pedagogical_support: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q13_has_infrastructure_measures: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q14_plan_has_budget: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    q15_plan_has_schedule: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Monitoring and current situation (q16-q23)
    q16_monitor_name: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    q17_monitor_position: Mapped[str] = mapped_column(String(150), default="", nullable=False)
    q18_victim_changed_institution: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q18a_new_amie: Mapped[str | None] = mapped_column(String(20), nullable=True)
    q18b_new_institution_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    q18c_new_zone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    q18d_new_district: Mapped[str | None] = mapped_column(String(20), nullable=True)
    q19_psychological_support_provider: Mapped[str] = mapped_column(
        String(100), default="", nullable=False
    )
    q20_has_intervention_plan: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q21_victim_in_education_system: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q22_dece_supports_in_new_institution: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    q23_resulted_in_pregnancy: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    observations: Mapped[str] = mapped_column(Text, default="", nullable=False)
