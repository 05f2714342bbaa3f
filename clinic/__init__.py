"""Object model for the clinic appointment system."""

from .appointments import Appointment, Patient
from .errors import BookingError, NotFoundError, ValidationError
from .professionals import (
    Cardiologist,
    GeneralPractitioner,
    HealthProfessional,
    ProfessionalKind,
    format_base_details,
    professional_from_dict,
    professional_header,
)

__all__ = [
    "Appointment",
    "BookingError",
    "Cardiologist",
    "GeneralPractitioner",
    "HealthProfessional",
    "NotFoundError",
    "Patient",
    "ProfessionalKind",
    "ValidationError",
    "format_base_details",
    "professional_from_dict",
    "professional_header",
]
