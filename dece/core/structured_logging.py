"""Structured logging helpers (PII-safe)."""

import logging
from typing import Any

from dece.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for CLI runs."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )


def build_log_context(
    *,
    store_path: str | None = None,
    schema_version: int | None = None,
    table: str | None = None,
    row_count: int | None = None,
    operation: str | None = None,
) -> dict[str, Any]:
    """Return a PII-safe log context dict (no names, cédulas or hashes)."""
    context: dict[str, Any] = {}
    if store_path:
        context["store_path"] = store_path
    if schema_version is not None:
        context["schema_version"] = schema_version
    if table:
        context["table"] = table
    if row_count is not None:
        context["row_count"] = row_count
    if operation:
        context["operation"] = operation
    return context
