"""Typed application settings.

The settings table stores arbitrary JSON under string keys. Keys that the
application reads with a known shape are declared once in ``SETTINGS_SCHEMAS``
together with their default, so every reader validates the same way.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from dece.db.enums import LeaveUnit

LEAVE_SETTINGS = "leaveSettings"
WORKING_HOURS = "workingHours"
MSP_AUTHORITY = "mspAuthority"
AUTO_BACKUP_CONFIG = "autoBackupConfig"
PDF_BACKGROUND = "pdfBackgroundBase64"


class LeaveDuration(BaseModel):
    value: int = Field(..., ge=0)
    unit: LeaveUnit


class LeaveSettings(BaseModel):
    """Maternity and lactation leave lengths."""

    maternity: LeaveDuration = LeaveDuration(value=90, unit=LeaveUnit.DAYS)
    lactation: LeaveDuration = LeaveDuration(value=12, unit=LeaveUnit.MONTHS)


class WorkingHours(BaseModel):
    start: str = Field("09:00", pattern=r"^\d{2}:\d{2}$")
    end: str = Field("18:00", pattern=r"^\d{2}:\d{2}$")


class MspAuthority(BaseModel):
    """Ministry of Public Health contact printed on referral letters."""

    name: str = ""
    position: str = ""
    district: str = ""
    city: str = ""


class AutoBackupConfig(BaseModel):
    enabled: bool = False
    interval: Literal["daily", "weekly", "monthly"] = "weekly"


# key -> (value type, default when the key is absent)
SETTINGS_SCHEMAS: dict[str, tuple[Any, Any]] = {
    LEAVE_SETTINGS: (LeaveSettings, LeaveSettings()),
    WORKING_HOURS: (WorkingHours, WorkingHours()),
    MSP_AUTHORITY: (MspAuthority, MspAuthority()),
    AUTO_BACKUP_CONFIG: (AutoBackupConfig, AutoBackupConfig()),
    PDF_BACKGROUND: (str, None),
}
