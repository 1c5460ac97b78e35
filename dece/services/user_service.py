"""Operator accounts: registration, login checks, profile completion, recovery."""

from __future__ import annotations

import logging

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from dece.core.errors import AuthenticationError, DuplicateKeyError
from dece.core.security import hash_secret, normalize_answer, verify_secret
from dece.db.enums import SECURITY_QUESTION_COUNT, UserStatus
from dece.db.models import User
from dece.schemas.users import PasswordReset, ProfileCompletion, UserCreate
from dece.services import record_service
from dece.utils.normalization import normalize_email

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def find_user_by_identifier(db: Session, identifier: str) -> User | None:
    """Look a user up by cédula or email, ignoring case and surrounding spaces."""
    cleaned = (identifier or "").strip().lower()
    if not cleaned:
        return None
    return (
        db.query(User)
        .filter(or_(func.lower(User.cedula) == cleaned, func.lower(User.email) == cleaned))
        .first()
    )


def register_user(db: Session, data: UserCreate) -> User:
    """
    Create a Pendiente account that must complete its profile on first login.

    Raises DuplicateKeyError when the cédula or email is taken.
    """
    existing = (
        db.query(User)
        .filter(
            or_(
                User.cedula == data.cedula,
                func.lower(User.email) == normalize_email(data.email),
            )
        )
        .first()
    )
    if existing is not None:
        column = "cedula" if existing.cedula == data.cedula else "email"
        raise DuplicateKeyError(User.__tablename__, [column])

    user = record_service.create(
        db,
        User,
        {
            "full_name": data.full_name,
            "cedula": data.cedula,
            "email": data.email,
            "password_hash": hash_secret(data.password),
            "role": data.role.value,
            "status": UserStatus.PENDING.value,
            "first_login": True,
        },
    )
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, identifier: str, password: str) -> User:
    """Return the user whose cédula or email and password match."""
    user = find_user_by_identifier(db, identifier)
    if user is None or not verify_secret(password, user.password_hash):
        raise AuthenticationError("Invalid credentials")
    return user


def complete_profile(db: Session, user_id: int, data: ProfileCompletion) -> User:
    """Store contact data and hashed security answers; activates the account."""
    user = record_service.get_or_raise(db, User, user_id)
    changes = {
        "phone": data.phone,
        "address": data.address,
        "position": data.position,
        "security_questions": [
            {
                "question": item.question,
                "answer_hash": hash_secret(normalize_answer(item.answer)),
            }
            for item in data.security_questions
        ],
        "status": UserStatus.ACTIVE.value,
        "first_login": False,
    }
    if data.new_password:
        changes["password_hash"] = hash_secret(data.new_password)
    return record_service.update(db, User, user_id, changes)


def find_recoverable_user(db: Session, identifier: str) -> User | None:
    """A user can recover a password only with both security questions set."""
    user = find_user_by_identifier(db, identifier)
    if user is None or len(user.security_questions or []) != SECURITY_QUESTION_COUNT:
        return None
    return user


def security_questions_for(user: User) -> list[str]:
    return [item["question"] for item in user.security_questions or []]


def verify_security_answers(user: User, answers: list[str]) -> bool:
    stored = user.security_questions or []
    if len(stored) != SECURITY_QUESTION_COUNT or len(answers) != SECURITY_QUESTION_COUNT:
        return False
    return all(
        verify_secret(normalize_answer(answer), item.get("answer_hash"))
        for answer, item in zip(answers, stored)
    )


def reset_password(db: Session, identifier: str, data: PasswordReset) -> User:
    user = find_recoverable_user(db, identifier)
    if user is None:
        raise AuthenticationError("Password recovery is not available for this account")
    if not verify_security_answers(user, data.answers):
        raise AuthenticationError("One or more security answers are incorrect")
    updated = record_service.update(
        db, User, user.id, {"password_hash": hash_secret(data.new_password)}
    )
    logger.info("Password reset for user %s", user.id)
    return updated
