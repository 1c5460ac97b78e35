"""Password and security-answer hashing."""

import bcrypt

from dece.core.config import settings

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _to_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_secret(secret: str, rounds: int | None = None) -> str:
    """Hash a password or security answer with a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_to_bytes(secret), salt).decode("utf-8")


def verify_secret(secret: str, hashed: str | None) -> bool:
    """Check a plain secret against a stored bcrypt hash."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_to_bytes(secret), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def normalize_answer(answer: str) -> str:
    """Security answers compare case- and whitespace-insensitively."""
    return " ".join(answer.split()).lower()
