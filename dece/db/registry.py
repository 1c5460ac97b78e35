"""Table registry: every declared table, in dependency order, under one version."""

from sqlalchemy import Table

from dece.db.base import Base
from dece.db.models import (
    AppSetting,
    Appointment,
    AssistedClass,
    CaseCategory,
    CaseFile,
    Course,
    CourseMeetingReport,
    DeceFollowUpForm,
    EducandoEnFamilia,
    FollowUp,
    Institution,
    PefModule,
    PefReport,
    PregnancyCase,
    PreventiveActivity,
    PsychosocialInterview,
    Representative,
    SexualViolenceCaseDetails,
    SexualViolenceVictim,
    Student,
    StudentRoster,
    Teacher,
    User,
)

# Bump whenever a table is added. Opening an older store creates the missing
# tables; existing tables are never altered.
SCHEMA_VERSION = 26

# Parents before the children that hold hard foreign keys to them.
TABLES: dict[str, type[Base]] = {
    model.__tablename__: model
    for model in (
        User,
        Institution,
        AppSetting,
        CaseCategory,
        Course,
        Teacher,
        Representative,
        Student,
        StudentRoster,
        CaseFile,
        FollowUp,
        PsychosocialInterview,
        SexualViolenceCaseDetails,
        SexualViolenceVictim,
        DeceFollowUpForm,
        AssistedClass,
        PregnancyCase,
        Appointment,
        PreventiveActivity,
        CourseMeetingReport,
        PefModule,
        PefReport,
        EducandoEnFamilia,
    )
}


def table_names() -> list[str]:
    """Declared table names in dependency order."""
    return list(TABLES)


def table_for(name: str) -> Table:
    return TABLES[name].__table__
