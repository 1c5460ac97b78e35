"""Service layer modules."""

# Import service modules (not individual functions) for cleaner access
from dece.services import record_service
from dece.services import actor_service
from dece.services import settings_service
from dece.services import pef_service
from dece.services import seed_service
from dece.services import backup_service
from dece.services import user_service
from dece.services import case_service
from dece.services import follow_up_service
from dece.services import interview_service
from dece.services import pregnancy_service
from dece.services import roster_service

__all__ = [
    "actor_service",
    "backup_service",
    "case_service",
    "follow_up_service",
    "interview_service",
    "pef_service",
    "pregnancy_service",
    "record_service",
    "roster_service",
    "seed_service",
    "settings_service",
    "user_service",
]
