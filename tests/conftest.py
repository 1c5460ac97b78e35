"""
Test configuration and fixtures.

Provides:
- Fresh store per test in a temporary directory (empty or seeded)
- Session bound to that store
- Small sample records (student with representative, case file)
"""
import random
from datetime import date
from typing import Generator

import pytest
from sqlalchemy.orm import Session

from dece.core.config import settings
from dece.db.models import CaseFile, Representative, Student
from dece.db.session import Store, open_store
from dece.services import record_service
from dece.services.seed_service import SeedPlan

# Small plan: every generated table gets rows, the run stays fast
SMALL_PLAN = SeedPlan(
    teachers=6,
    representatives=12,
    students=20,
    case_files=30,
    pregnancies=2,
    assisted_classes=2,
    appointments=5,
    preventive_activities=3,
    pef_evaluations=6,
)

SEED_TODAY = date(2024, 11, 15)


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """bcrypt at its minimum cost; hashes stay valid bcrypt."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "BACKUP_DIR", "backups")


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def store_path(tmp_path) -> str:
    return str(tmp_path / "gestion_dece.db")


@pytest.fixture(scope="function")
def store(store_path) -> Generator[Store, None, None]:
    """An empty store at the current schema version (no seed data)."""
    opened = open_store(store_path, seed=False)
    yield opened.store
    opened.store.close()


@pytest.fixture(scope="function")
def seed_plan() -> SeedPlan:
    return SMALL_PLAN


@pytest.fixture(scope="function")
def seed_today() -> date:
    return SEED_TODAY


@pytest.fixture(scope="function")
def seeded_store(store_path, seed_plan) -> Generator[Store, None, None]:
    """A store created with a small, deterministic seed."""
    opened = open_store(store_path, seed=True, plan=seed_plan, rng=random.Random(7))
    yield opened.store
    opened.store.close()


@pytest.fixture(scope="function")
def db(store: Store) -> Generator[Session, None, None]:
    session = store.session()
    yield session
    session.close()


@pytest.fixture(scope="function")
def seeded_db(seeded_store: Store) -> Generator[Session, None, None]:
    session = seeded_store.session()
    yield session
    session.close()


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def representative(db: Session) -> Representative:
    return record_service.create(
        db,
        Representative,
        {"full_name": "Rosa Vera Pincay", "cedula": "0912345678", "age": 41},
    )


@pytest.fixture(scope="function")
def student(db: Session, representative: Representative) -> Student:
    return record_service.create(
        db,
        Student,
        {
            "full_name": "Ana Cedeño Vera",
            "cedula": "0923456789",
            "gender": "Femenino",
            "birth_date": date(2009, 3, 14),
            "course": "OCTAVO EGB",
            "parallel": "A",
            "representative_id": representative.id,
        },
    )


@pytest.fixture(scope="function")
def case_file(db: Session, student: Student) -> CaseFile:
    return record_service.create(
        db,
        CaseFile,
        {
            "student_id": student.id,
            "code": "IE-ACV-20241001-0001",
            "category": "Conflictos familiares",
            "opening_date": date(2024, 10, 1),
            "due_date": date(2024, 10, 31),
        },
    )
