"""Health professional records and their fixed-width report rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Protocol

BASE_COLUMNS = "{:<5}{:<15}{:<5}{:<25}"
VARIANT_HEADER_COLUMNS = "{:<25}{:<15}\n"
VARIANT_DETAIL_COLUMNS = "{:<25}{:<5}\n"


class ProfessionalKind(str, Enum):
    """Discriminant shared by every professional variant."""

    GENERAL_PRACTITIONER = "general_practitioner"
    CARDIOLOGIST = "cardiologist"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    ProfessionalKind.GENERAL_PRACTITIONER: "General Practitioner",
    ProfessionalKind.CARDIOLOGIST: "Cardiologist",
}

_VARIANT_HEADERS = {
    ProfessionalKind.GENERAL_PRACTITIONER: ("Max Consultation Time", "Bulk Billing Available"),
    ProfessionalKind.CARDIOLOGIST: ("Subspecialty", "Cath Lab Access"),
}


class HealthProfessional(Protocol):
    """Capability every professional variant provides."""

    id: int
    name: str
    age: int
    profession: str

    @property
    def kind(self) -> Any:
        """Variant discriminant, normally a :class:`ProfessionalKind`."""

    def format_details(self) -> str:
        """Return one report row for the professional."""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready representation."""


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_base_details(professional: HealthProfessional) -> str:
    """Render the id, name, age and profession columns shared by all variants."""

    return BASE_COLUMNS.format(
        professional.id,
        professional.name,
        professional.age,
        professional.profession,
    )


def professional_header(kind: ProfessionalKind) -> str:
    """Column header line for the group of professionals of ``kind``."""

    base = BASE_COLUMNS.format("ID", "Name", "Age", "Profession")
    return base + VARIANT_HEADER_COLUMNS.format(*_VARIANT_HEADERS[kind])


def _base_dict(professional: HealthProfessional) -> Dict[str, Any]:
    return {
        "id": professional.id,
        "name": professional.name,
        "age": professional.age,
        "profession": professional.profession,
        "kind": professional.kind.value,
    }


@dataclass(frozen=True)
class GeneralPractitioner:
    """A general practitioner; consultation length is in minutes."""

    id: int = 0
    name: str = "Unknown"
    age: int = 0
    profession: str = "Unknown"
    max_consultation_time: int = 0
    bulk_billing: bool = True

    @property
    def kind(self) -> ProfessionalKind:
        return ProfessionalKind.GENERAL_PRACTITIONER

    def format_details(self) -> str:
        return format_base_details(self) + VARIANT_DETAIL_COLUMNS.format(
            self.max_consultation_time, _yes_no(self.bulk_billing)
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = _base_dict(self)
        payload["max_consultation_time"] = self.max_consultation_time
        payload["bulk_billing"] = self.bulk_billing
        return payload


@dataclass(frozen=True)
class Cardiologist:
    """A cardiology specialist."""

    id: int = 0
    name: str = "Unknown"
    age: int = 0
    profession: str = "Unknown"
    subspecialty: str = "Unknown"
    has_cath_lab_access: bool = True

    @property
    def kind(self) -> ProfessionalKind:
        return ProfessionalKind.CARDIOLOGIST

    def format_details(self) -> str:
        return format_base_details(self) + VARIANT_DETAIL_COLUMNS.format(
            self.subspecialty, _yes_no(self.has_cath_lab_access)
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = _base_dict(self)
        payload["subspecialty"] = self.subspecialty
        payload["has_cath_lab_access"] = self.has_cath_lab_access
        return payload


def _normalize_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "t", "yes", "y"}
    return False


def professional_from_dict(entry: Mapping[str, Any]) -> HealthProfessional:
    """Build a professional from a seed record carrying a ``kind`` key."""

    if not isinstance(entry, Mapping):
        raise ValueError("Each professional entry must be a mapping.")

    try:
        kind = ProfessionalKind(str(entry["kind"]).strip().lower())
    except KeyError as exc:
        raise ValueError("Professional entry is missing 'kind'") from exc
    except ValueError as exc:
        raise ValueError(f"Unknown professional kind: {entry['kind']!r}") from exc

    try:
        base = {
            "id": int(entry["id"]),
            "name": str(entry["name"]),
            "age": int(entry["age"]),
            "profession": str(entry.get("profession", kind.label)),
        }
    except KeyError as exc:
        raise ValueError(f"Professional entry is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid professional entry: {exc}") from exc

    if kind is ProfessionalKind.GENERAL_PRACTITIONER:
        try:
            max_consultation_time = int(entry.get("max_consultation_time", 0))
        except (TypeError, ValueError) as exc:
            raise ValueError("max_consultation_time must be an integer") from exc
        return GeneralPractitioner(
            max_consultation_time=max_consultation_time,
            bulk_billing=_normalize_boolean(entry.get("bulk_billing", True)),
            **base,
        )
    return Cardiologist(
        subspecialty=str(entry.get("subspecialty", "Unknown")),
        has_cath_lab_access=_normalize_boolean(entry.get("has_cath_lab_access", True)),
        **base,
    )


__all__ = [
    "Cardiologist",
    "GeneralPractitioner",
    "HealthProfessional",
    "ProfessionalKind",
    "format_base_details",
    "professional_from_dict",
    "professional_header",
]
