"""Clinic registry: owns the professionals and appointments and the four
booking operations over them."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from clinic import (
    Appointment,
    Cardiologist,
    GeneralPractitioner,
    HealthProfessional,
    Patient,
    ProfessionalKind,
    professional_from_dict,
    professional_header,
)
from clinic.errors import (
    APPOINTMENT_TIME_EMPTY,
    INVALID_DOCTOR_ID,
    PATIENT_NAME_EMPTY,
    PHONE_NUMBER_EMPTY,
    PHONE_NUMBER_NOT_FOUND,
    BookingError,
    NotFoundError,
    ValidationError,
)
from connector import (
    APPOINTMENT_CANCELLED,
    APPOINTMENT_CREATED,
    BookingNotifier,
    LoggingNotifier,
    NotificationError,
)

from .activity import ActivityLog

logger = logging.getLogger(__name__)

DIVIDER = "-" * 36

DEFAULT_PROFESSIONALS: Tuple[HealthProfessional, ...] = (
    GeneralPractitioner(1, "Alice Smith", 35, "General Practitioner", 15, True),
    GeneralPractitioner(2, "Bob Johnson", 47, "General Practitioner", 20, False),
    GeneralPractitioner(3, "Clara Lee", 25, "General Practitioner", 15, True),
    Cardiologist(4, "Carol Dan", 30, "Cardiologist", "Electrophysiology", True),
    Cardiologist(5, "Peter Quill", 55, "Cardiologist", "Vascular Medicine", True),
)


@dataclass
class OperationResult:
    """Outcome of a booking or cancellation request."""

    success: bool
    message: str
    reason: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "reason": self.reason,
            "details": self.details,
        }


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _require(value: Optional[str], reason: str, message: str) -> None:
    if _is_blank(value):
        raise ValidationError(reason, message)


def load_professionals(path: Path | str) -> List[HealthProfessional]:
    """Load professional records from a JSON list on disk."""

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Professional seed file not found: {source}")

    try:
        raw_data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid professional data in {source}: {exc.msg}") from exc

    if not isinstance(raw_data, list):
        raise ValueError("Professional data must be a list of records.")

    professionals = [professional_from_dict(entry) for entry in raw_data]
    logger.info("Loaded %d professionals from %s", len(professionals), source)
    return professionals


class ClinicRegistry:
    """Holds the clinic's professionals and booked appointments.

    Every public operation runs under one lock per registry, so a registry may
    be shared by the web view's request threads.
    """

    def __init__(
        self,
        professionals: Optional[Iterable[HealthProfessional]] = None,
        *,
        notifier: Optional[BookingNotifier] = None,
        activity: Optional[ActivityLog] = None,
    ) -> None:
        self._professionals: Tuple[HealthProfessional, ...] = tuple(professionals or ())
        self._appointments: List[Appointment] = []
        self._notifier = notifier if notifier is not None else LoggingNotifier()
        self._activity = activity if activity is not None else ActivityLog()
        self._lock = threading.Lock()

    @classmethod
    def with_default_professionals(cls, **kwargs: Any) -> "ClinicRegistry":
        return cls(DEFAULT_PROFESSIONALS, **kwargs)

    @property
    def professionals(self) -> Tuple[HealthProfessional, ...]:
        return self._professionals

    @property
    def appointments(self) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._appointments)

    @property
    def activity(self) -> ActivityLog:
        return self._activity

    def _of_kind(self, kind: ProfessionalKind) -> Tuple[HealthProfessional, ...]:
        return tuple(
            professional
            for professional in self._professionals
            if getattr(professional, "kind", None) is kind
        )

    def general_practitioners(self) -> Tuple[HealthProfessional, ...]:
        return self._of_kind(ProfessionalKind.GENERAL_PRACTITIONER)

    def cardiologists(self) -> Tuple[HealthProfessional, ...]:
        return self._of_kind(ProfessionalKind.CARDIOLOGIST)

    def list_professionals(self) -> str:
        """Render GPs then cardiologists, each under its own column header."""

        sections = ["Show Information of All Health Professionals\n\n"]
        sections.append("General Practitioners\n")
        sections.append(professional_header(ProfessionalKind.GENERAL_PRACTITIONER))
        sections.extend(gp.format_details() for gp in self.general_practitioners())
        sections.append("\nCardiologist\n")
        sections.append(professional_header(ProfessionalKind.CARDIOLOGIST))
        sections.extend(cd.format_details() for cd in self.cardiologists())
        return "".join(sections)

    def find_professional(self, doctor_id: int) -> HealthProfessional:
        """Return the first professional with ``doctor_id`` in insertion order."""

        for professional in self._professionals:
            if professional.id == doctor_id:
                return professional
        raise NotFoundError(INVALID_DOCTOR_ID, "Appointment Failed: Invalid doctor ID")

    def create_appointment(
        self,
        doctor_id: int,
        patient_name: Optional[str],
        patient_mobile: Optional[str],
        time_slot: Optional[str],
    ) -> OperationResult:
        """Book ``time_slot`` with the professional ``doctor_id``.

        Inputs are validated in order: doctor id, patient name, phone number,
        appointment time. Patient fields and the slot are stored untrimmed.
        """

        rejection: Optional[BookingError] = None
        with self._lock:
            try:
                doctor = self.find_professional(doctor_id)
                _require(
                    patient_name,
                    PATIENT_NAME_EMPTY,
                    "Appointment Failed: Patient name cannot be empty",
                )
                _require(
                    patient_mobile,
                    PHONE_NUMBER_EMPTY,
                    "Appointment Failed: Phone number cannot be empty",
                )
                _require(
                    time_slot,
                    APPOINTMENT_TIME_EMPTY,
                    "Appointment Failed: Appointment time cannot be empty",
                )
            except BookingError as exc:
                rejection = exc
            else:
                appointment = Appointment(Patient(patient_name, patient_mobile), time_slot, doctor)
                self._appointments.append(appointment)

        if rejection is not None:
            return self._rejected("create_appointment", rejection)

        logger.info(
            "Booked %s with %s at %s", patient_name, doctor.name, time_slot
        )
        result = OperationResult(
            success=True,
            message=(
                "Appointment Successfully Created!\n"
                f"Patient: {patient_name}  |  Doctor: {doctor.name}  |  Time: {time_slot}"
            ),
            details=appointment.to_dict(),
        )
        self._activity.record(
            "create_appointment", "success", message=result.message, details=result.details
        )
        self._dispatch(APPOINTMENT_CREATED, appointment)
        return result

    def list_appointments(self) -> str:
        """Render every appointment in booking order, numbered from 1."""

        appointments = self.appointments
        if not appointments:
            return "No Available Appointment\n"

        lines = [f"Display Appointment List ( Total {len(appointments)} )", DIVIDER]
        for number, appointment in enumerate(appointments, start=1):
            lines.append(f"Appointment #{number}\n")
            lines.append(appointment.format_details().rstrip("\n"))
            lines.append(DIVIDER)
        return "\n".join(lines) + "\n"

    def cancel_booking(self, mobile_number: Optional[str]) -> OperationResult:
        """Remove the earliest appointment whose patient mobile equals ``mobile_number``."""

        rejection: Optional[BookingError] = None
        with self._lock:
            try:
                _require(mobile_number, PHONE_NUMBER_EMPTY, "ERROR: Phone number cannot be empty")
                index = self._index_of_mobile(mobile_number)
            except BookingError as exc:
                rejection = exc
            else:
                appointment = self._appointments.pop(index)

        if rejection is not None:
            return self._rejected("cancel_booking", rejection)

        logger.info("Cancelled appointment for %s", mobile_number)
        result = OperationResult(
            success=True,
            message=(
                "Successfully cancelled the appointment of patient with phone number "
                f"{mobile_number}"
            ),
            details=appointment.to_dict(),
        )
        self._activity.record(
            "cancel_booking", "success", message=result.message, details=result.details
        )
        self._dispatch(APPOINTMENT_CANCELLED, appointment)
        return result

    def _index_of_mobile(self, mobile_number: str) -> int:
        for index, appointment in enumerate(self._appointments):
            if appointment.patient_mobile == mobile_number:
                return index
        raise NotFoundError(
            PHONE_NUMBER_NOT_FOUND,
            f"ERROR: Phone number {mobile_number} was not found in existing appointments",
        )

    def _rejected(self, operation: str, exc: BookingError) -> OperationResult:
        logger.warning("%s rejected: %s", operation, exc.reason)
        self._activity.record(operation, "failed", message=exc.message, reason=exc.reason)
        return OperationResult(success=False, message=exc.message, reason=exc.reason)

    def _dispatch(self, event: str, appointment: Appointment) -> None:
        try:
            self._notifier.notify(event, appointment)
        except NotificationError:
            logger.exception("Failed to deliver %s notification", event)


__all__ = [
    "ClinicRegistry",
    "DEFAULT_PROFESSIONALS",
    "OperationResult",
    "load_professionals",
]
