"""Tests for operator accounts and password recovery."""

import pytest
from pydantic import ValidationError

from dece.core.errors import AuthenticationError, DuplicateKeyError
from dece.core.security import hash_secret, verify_secret
from dece.db.enums import UserRole, UserStatus
from dece.schemas.users import PasswordReset, ProfileCompletion, UserCreate
from dece.services import user_service


def _register(db, **overrides):
    values = {
        "full_name": "  María   Torres ",
        "cedula": "0912121212",
        "email": "Maria.Torres@Colegio.edu.ec",
        "password": "clave123",
    }
    values.update(overrides)
    return user_service.register_user(db, UserCreate(**values))


def _profile(**overrides):
    values = {
        "phone": "0991112233",
        "position": "Psicóloga",
        "security_questions": [
            {"question": "¿Nombre de su mascota?", "answer": "Firulais"},
            {"question": "¿Ciudad natal?", "answer": "Manta"},
        ],
    }
    values.update(overrides)
    return ProfileCompletion(**values)


def test_register_creates_pending_account_with_hashed_password(db):
    user = _register(db)

    assert user.full_name == "María Torres"
    assert user.email == "maria.torres@colegio.edu.ec"
    assert user.role == UserRole.PROFESSIONAL.value
    assert user.status == UserStatus.PENDING.value
    assert user.first_login is True
    assert user.password_hash != "clave123"
    assert verify_secret("clave123", user.password_hash)


def test_duplicate_cedula_or_email_is_rejected(db):
    _register(db)

    with pytest.raises(DuplicateKeyError) as exc_info:
        _register(db, email="otra@colegio.edu.ec")
    assert exc_info.value.columns == ("cedula",)

    with pytest.raises(DuplicateKeyError) as exc_info:
        _register(db, cedula="0934343434", email="MARIA.TORRES@colegio.edu.ec")
    assert exc_info.value.columns == ("email",)


def test_authenticate_by_cedula_or_email(db):
    user = _register(db)

    assert user_service.authenticate(db, " 0912121212 ", "clave123").id == user.id
    assert user_service.authenticate(db, "MARIA.TORRES@colegio.edu.ec", "clave123").id == user.id

    with pytest.raises(AuthenticationError):
        user_service.authenticate(db, "0912121212", "otra")
    with pytest.raises(AuthenticationError):
        user_service.authenticate(db, "0000000000", "clave123")


def test_complete_profile_activates_account(db):
    user = _register(db)

    updated = user_service.complete_profile(db, user.id, _profile(new_password="nueva456"))

    assert updated.status == UserStatus.ACTIVE.value
    assert updated.first_login is False
    assert updated.position == "Psicóloga"
    assert user_service.security_questions_for(updated) == [
        "¿Nombre de su mascota?",
        "¿Ciudad natal?",
    ]
    assert all(item["answer_hash"] != "firulais" for item in updated.security_questions)
    assert user_service.authenticate(db, "0912121212", "nueva456").id == user.id


def test_profile_needs_exactly_two_questions():
    with pytest.raises(ValidationError):
        _profile(security_questions=[{"question": "¿Color?", "answer": "azul"}])


def test_recovery_requires_completed_profile(db):
    _register(db)

    assert user_service.find_recoverable_user(db, "0912121212") is None
    with pytest.raises(AuthenticationError):
        user_service.reset_password(
            db, "0912121212", PasswordReset(answers=["a", "b"], new_password="abcd")
        )


def test_reset_password_with_normalized_answers(db):
    user = _register(db)
    user_service.complete_profile(db, user.id, _profile())

    user_service.reset_password(
        db,
        "maria.torres@colegio.edu.ec",
        PasswordReset(answers=["  FIRULAIS", "manta "], new_password="recuperada"),
    )

    assert user_service.authenticate(db, "0912121212", "recuperada").id == user.id


def test_wrong_security_answer_keeps_password(db):
    user = _register(db)
    user_service.complete_profile(db, user.id, _profile())

    with pytest.raises(AuthenticationError):
        user_service.reset_password(
            db,
            "0912121212",
            PasswordReset(answers=["Firulais", "Quito"], new_password="robada1"),
        )

    assert user_service.authenticate(db, "0912121212", "clave123").id == user.id


def test_invalid_email_is_rejected():
    with pytest.raises(ValidationError):
        UserCreate(full_name="Ana", cedula="0911111111", email="no-es-correo", password="1234")


def test_verify_secret_handles_bad_hashes():
    hashed = hash_secret("secreto")

    assert verify_secret("secreto", hashed) is True
    assert verify_secret("otro", hashed) is False
    assert verify_secret("secreto", None) is False
    assert verify_secret("secreto", "not-a-bcrypt-hash") is False
