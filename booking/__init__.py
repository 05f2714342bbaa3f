"""Booking operations over an in-memory clinic registry."""

from .activity import ActivityLog
from .registry import DEFAULT_PROFESSIONALS, ClinicRegistry, OperationResult, load_professionals

__all__ = [
    "ActivityLog",
    "ClinicRegistry",
    "DEFAULT_PROFESSIONALS",
    "OperationResult",
    "load_professionals",
]
