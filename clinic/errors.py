"""Exceptions raised by clinic booking operations."""

from __future__ import annotations

INVALID_DOCTOR_ID = "invalid doctor id"
PATIENT_NAME_EMPTY = "patient name empty"
PHONE_NUMBER_EMPTY = "phone number empty"
APPOINTMENT_TIME_EMPTY = "appointment time empty"
PHONE_NUMBER_NOT_FOUND = "phone number not found"


class BookingError(ValueError):
    """Base exception for rejected booking operations."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class ValidationError(BookingError):
    """Raised when a required field is missing or blank."""


class NotFoundError(BookingError):
    """Raised when a doctor id or phone number does not match any record."""


__all__ = [
    "APPOINTMENT_TIME_EMPTY",
    "BookingError",
    "INVALID_DOCTOR_ID",
    "NotFoundError",
    "PATIENT_NAME_EMPTY",
    "PHONE_NUMBER_EMPTY",
    "PHONE_NUMBER_NOT_FOUND",
    "ValidationError",
]
