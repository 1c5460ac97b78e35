"""Utility modules."""

from dece.utils.normalization import (
    initials,
    normalize_cedula,
    normalize_email,
    normalize_name,
)

__all__ = [
    "initials",
    "normalize_cedula",
    "normalize_email",
    "normalize_name",
]
