"""Data normalization utilities for consistent data quality."""

from typing import Optional


def normalize_email(email: Optional[str]) -> Optional[str]:
    """
    Normalize email to lowercase.

    Args:
        email: Raw email input

    Returns:
        Lowercased email or None if empty
    """
    if not email:
        return None
    return email.strip().lower()


def normalize_name(name: Optional[str]) -> Optional[str]:
    """
    Normalize name by stripping whitespace and collapsing multiple spaces.

    Args:
        name: Raw name input

    Returns:
        Cleaned name or None if empty
    """
    if not name:
        return None
    return " ".join(name.split())


def normalize_cedula(cedula: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace; cédulas keep their leading zeros."""
    if not cedula:
        return None
    return cedula.strip() or None


def initials(name: Optional[str]) -> str:
    """
    Uppercased first letter of every word ("Unidad Educativa Fiscal" → "UEF").

    Returns an empty string for empty input so callers can fall back.
    """
    if not name:
        return ""
    return "".join(word[0] for word in name.split()).upper()
