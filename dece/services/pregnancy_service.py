"""Pregnancy / maternity tracking."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from dece.db.enums import FULL_TERM_WEEKS, GESTATION_DAYS, LeaveUnit
from dece.db.models import PregnancyCase
from dece.schemas.pregnancy import PregnancyCaseCreate
from dece.schemas.settings import LEAVE_SETTINGS, LeaveDuration, LeaveSettings
from dece.services import record_service, settings_service

logger = logging.getLogger(__name__)


def estimated_due_date(start: date) -> date:
    return start + timedelta(days=GESTATION_DAYS)


def leave_end_date(start: date, duration: LeaveDuration) -> date:
    """End of a leave period; month and year steps clamp to month end."""
    unit = LeaveUnit(duration.unit)
    if unit is LeaveUnit.DAYS:
        return start + timedelta(days=duration.value)
    if unit is LeaveUnit.WEEKS:
        return start + timedelta(weeks=duration.value)
    if unit is LeaveUnit.YEARS:
        return start + relativedelta(years=duration.value)
    return start + relativedelta(months=duration.value)


def create_pregnancy_case(db: Session, data: PregnancyCaseCreate) -> PregnancyCase:
    """
    Store a pregnancy case with derived dates.

    Leave lengths come from the ``leaveSettings`` value in force (defaults
    when unset); the setting itself is never written here.
    """
    leave: LeaveSettings = settings_service.get_typed(db, LEAVE_SETTINGS)
    values = data.model_dump(mode="python")
    values["alternative_education_type"] = (
        data.alternative_education_type.value if data.alternative_education_type else None
    )
    values["receives_health_care"] = data.receives_health_care.value

    if data.pregnancy_start_date:
        values["estimated_due_date"] = estimated_due_date(data.pregnancy_start_date)
    if data.maternity_leave_start_date:
        values["maternity_leave_end_date"] = leave_end_date(
            data.maternity_leave_start_date, leave.maternity
        )
    if data.lactation_leave_start_date:
        values["lactation_leave_end_date"] = leave_end_date(
            data.lactation_leave_start_date, leave.lactation
        )
    case = record_service.create(db, PregnancyCase, values)
    logger.info("Created pregnancy case %s", case.id)
    return case


def pregnancy_status(case: PregnancyCase, today: date | None = None) -> str:
    """Display status, checked from the latest stage backwards."""
    today = today or date.today()
    if case.lactation_leave_end_date and today > case.lactation_leave_end_date:
        return "Finalizado"
    if case.lactation_leave_start_date and today >= case.lactation_leave_start_date:
        return "Permiso Lactancia"
    if case.maternity_leave_start_date and today >= case.maternity_leave_start_date:
        return "Permiso Maternidad"
    if case.birth_date:
        return "Post-parto"
    if case.pregnancy_start_date:
        weeks = (today - case.pregnancy_start_date).days // 7
        if weeks >= FULL_TERM_WEEKS:
            return "40 semanas cumplidas"
        return f"Gestación ({weeks} sem)"
    return "Registro Incompleto"
