"""Pydantic schemas for service inputs and typed settings."""

from dece.schemas.actors import (
    RepresentativeCreate,
    RosterEntryCreate,
    StudentCreate,
    TeacherCreate,
)
from dece.schemas.cases import (
    Attachment,
    CaseFileCreate,
    CaseFileUpdate,
    DeceFollowUpFormCreate,
    FollowUpCreate,
    InterviewSave,
    SexualViolenceDetailsCreate,
    VictimCreate,
)
from dece.schemas.pef import EvaluationCreate, PefModuleCreate
from dece.schemas.pregnancy import PregnancyCaseCreate
from dece.schemas.settings import (
    SETTINGS_SCHEMAS,
    AutoBackupConfig,
    LeaveDuration,
    LeaveSettings,
    MspAuthority,
    WorkingHours,
)
from dece.schemas.users import (
    PasswordReset,
    ProfileCompletion,
    SecurityQuestionAnswer,
    UserCreate,
    UserRead,
)

__all__ = [
    "Attachment",
    "AutoBackupConfig",
    "CaseFileCreate",
    "CaseFileUpdate",
    "DeceFollowUpFormCreate",
    "EvaluationCreate",
    "FollowUpCreate",
    "InterviewSave",
    "LeaveDuration",
    "LeaveSettings",
    "MspAuthority",
    "PasswordReset",
    "PefModuleCreate",
    "PregnancyCaseCreate",
    "ProfileCompletion",
    "RepresentativeCreate",
    "RosterEntryCreate",
    "SETTINGS_SCHEMAS",
    "SecurityQuestionAnswer",
    "SexualViolenceDetailsCreate",
    "StudentCreate",
    "TeacherCreate",
    "UserCreate",
    "UserRead",
    "VictimCreate",
    "WorkingHours",
]
