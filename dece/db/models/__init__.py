"""SQLAlchemy ORM models, re-exported so every table registers on Base.metadata."""

from dece.db.models.actors import Representative, Student, StudentRoster, Teacher
from dece.db.models.auth import User
from dece.db.models.calendar import Appointment, CourseMeetingReport, PreventiveActivity
from dece.db.models.cases import CaseCategory, CaseFile, FollowUp, PsychosocialInterview
from dece.db.models.institution import INSTITUTION_ID, Course, Institution
from dece.db.models.pef import EducandoEnFamilia, PefModule, PefReport
from dece.db.models.pregnancy import AssistedClass, PregnancyCase
from dece.db.models.settings import AppSetting
from dece.db.models.sexual_violence import (
    DeceFollowUpForm,
    SexualViolenceCaseDetails,
    SexualViolenceVictim,
)

__all__ = [
    "AppSetting",
    "Appointment",
    "AssistedClass",
    "CaseCategory",
    "CaseFile",
    "Course",
    "CourseMeetingReport",
    "DeceFollowUpForm",
    "EducandoEnFamilia",
    "FollowUp",
    "INSTITUTION_ID",
    "Institution",
    "PefModule",
    "PefReport",
    "PregnancyCase",
    "PreventiveActivity",
    "PsychosocialInterview",
    "Representative",
    "SexualViolenceCaseDetails",
    "SexualViolenceVictim",
    "Student",
    "StudentRoster",
    "Teacher",
    "User",
]
