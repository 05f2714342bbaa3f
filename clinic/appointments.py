"""Patients and the appointments that link them to a health professional."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .professionals import HealthProfessional, ProfessionalKind

NOT_AVAILABLE = "N/A"
UNKNOWN_PROFESSIONAL = "Unknown Health Professional"


@dataclass(frozen=True)
class Patient:
    """A patient as entered at booking time; fields are stored verbatim."""

    name: str
    mobile: str


@dataclass(frozen=True)
class Appointment:
    """A booked time slot for one patient with one professional.

    The patient is owned by the appointment; the doctor is a shared reference
    to a professional held by the registry.
    """

    patient: Optional[Patient] = None
    time_slot: str = "00:00"
    doctor: Optional[HealthProfessional] = None

    @property
    def patient_mobile(self) -> Optional[str]:
        """Mobile number of the patient, or ``None`` when no patient is attached."""

        if self.patient is None:
            return None
        return self.patient.mobile

    @property
    def doctor_type(self) -> str:
        if self.doctor is None:
            return NOT_AVAILABLE
        kind = getattr(self.doctor, "kind", None)
        if isinstance(kind, ProfessionalKind):
            return kind.label
        return UNKNOWN_PROFESSIONAL

    def format_details(self) -> str:
        patient_name = self.patient.name if self.patient is not None else NOT_AVAILABLE
        patient_mobile = self.patient.mobile if self.patient is not None else NOT_AVAILABLE
        doctor_name = self.doctor.name if self.doctor is not None else NOT_AVAILABLE
        lines = [
            f"Patient Name: {patient_name}",
            f"Patient Phone Number: {patient_mobile}",
            f"Appointment Time: {self.time_slot}",
            f"Doctor Name: {doctor_name}",
            f"Doctor Type: {self.doctor_type}",
        ]
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patient_name": self.patient.name if self.patient is not None else None,
            "patient_mobile": self.patient_mobile,
            "time_slot": self.time_slot,
            "doctor_id": self.doctor.id if self.doctor is not None else None,
            "doctor_name": self.doctor.name if self.doctor is not None else None,
            "doctor_type": self.doctor_type,
        }


__all__ = ["Appointment", "Patient"]
