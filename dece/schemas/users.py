"""Pydantic schemas for operator accounts."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from dece.db.enums import SECURITY_QUESTION_COUNT, UserRole, UserStatus
from dece.utils.normalization import normalize_cedula, normalize_email, normalize_name

MIN_PASSWORD_LENGTH = 4


class UserCreate(BaseModel):
    """Registration request; new accounts start Pendiente with first login pending."""

    full_name: str = Field(..., min_length=1, max_length=200)
    cedula: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    role: UserRole = UserRole.PROFESSIONAL

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

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v) or v


class SecurityQuestionAnswer(BaseModel):
    question: str = Field(..., min_length=1, max_length=300)
    answer: str = Field(..., min_length=1, max_length=200)


class ProfileCompletion(BaseModel):
    """First-login profile: contact data, two security questions, optional new password."""

    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=300)
    position: str | None = Field(None, max_length=150)
    security_questions: list[SecurityQuestionAnswer] = Field(
        ..., min_length=SECURITY_QUESTION_COUNT, max_length=SECURITY_QUESTION_COUNT
    )
    new_password: str | None = Field(None, min_length=MIN_PASSWORD_LENGTH)


class PasswordReset(BaseModel):
    """Answers in the order the questions are stored, plus the new password."""

    answers: list[str] = Field(
        ..., min_length=SECURITY_QUESTION_COUNT, max_length=SECURITY_QUESTION_COUNT
    )
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class UserRead(BaseModel):
    """Account as shown to callers; never carries hashes."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    cedula: str
    email: str
    role: UserRole
    status: UserStatus
    first_login: bool
    phone: str | None = None
    address: str | None = None
    position: str | None = None
