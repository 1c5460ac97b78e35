"""Tests for normalization helpers and log context."""

from dece.core.errors import DuplicateKeyError, MalformedBackupError
from dece.core.security import normalize_answer
from dece.core.structured_logging import build_log_context
from dece.utils.normalization import initials, normalize_cedula, normalize_email, normalize_name


def test_normalize_helpers():
    assert normalize_email("  Ana.Ponce@Colegio.EDU.ec ") == "ana.ponce@colegio.edu.ec"
    assert normalize_email("") is None
    assert normalize_name("  Ana   María  Ponce ") == "Ana María Ponce"
    assert normalize_cedula(" 0912345678 ") == "0912345678"
    assert normalize_cedula("   ") is None
    assert normalize_answer("  Mi   Perro  FIRULAIS ") == "mi perro firulais"


def test_initials():
    assert initials('Unidad Educativa Fiscal "Simón Bolívar"') == 'UEF"B'
    assert initials("ana cedeño") == "AC"
    assert initials(None) == ""


def test_build_log_context_includes_only_provided_fields():
    assert build_log_context(store_path="x.db", schema_version=26, operation="open") == {
        "store_path": "x.db",
        "schema_version": 26,
        "operation": "open",
    }
    assert build_log_context(table="", row_count=0) == {"row_count": 0}


def test_error_messages():
    assert str(DuplicateKeyError("courses", ["name", "parallel"])) == (
        "Duplicate key in courses (name, parallel)"
    )
    error = MalformedBackupError([f"problem {i}" for i in range(7)])
    assert "(2 more)" in str(error)
    assert len(error.problems) == 7
