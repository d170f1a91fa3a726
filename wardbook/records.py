"""Record types for patients, doctors, emergencies and rooms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar, TypeVar

_R = TypeVar("_R")


def _text(value: Any) -> str:
    """Render a stored value as display text; missing values become empty."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _lookup(row: Mapping[str, Any], column: str) -> Any:
    try:
        return row[column]
    except (KeyError, IndexError):
        return None


def _build(cls: type[_R], row: Mapping[str, Any]) -> _R:
    """Build a record of ``cls`` from a row keyed by column name.

    Columns that are absent or NULL become empty strings; extra columns
    are ignored.
    """
    values = {f.name: _text(_lookup(row, f.name)) for f in fields(cls)}
    return cls(**values)


def _values(record: Any) -> tuple[str, ...]:
    return tuple(getattr(record, name) for name, _ in record.DISPLAY)


def _titles(cls: Any) -> tuple[str, ...]:
    return tuple(title for _, title in cls.DISPLAY)


@dataclass(frozen=True)
class Patient:
    """A registered patient."""

    TABLE: ClassVar[str] = "patients"
    DISPLAY: ClassVar[tuple[tuple[str, str], ...]] = (
        ("health_card_number", "Health Card"),
        ("first_name", "First Name"),
        ("last_name", "Last Name"),
        ("date_of_birth", "Birthday"),
        ("gender", "Gender"),
        ("blood_type", "Blood Type"),
        ("address", "Address"),
        ("phone_number", "Phone Number"),
        ("email_address", "Email Address"),
        ("insurance_company", "Insurance Company"),
        ("primary_care_physician", "Primary Care Physician"),
    )

    health_card_number: str
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    gender: str = ""
    blood_type: str = ""
    address: str = ""
    phone_number: str = ""
    email_address: str = ""
    insurance_company: str = ""
    primary_care_physician: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Patient:
        """Build a patient from a row keyed by column name."""
        return _build(cls, row)

    def as_row(self) -> tuple[str, ...]:
        """Values in the order of :meth:`headers`."""
        return _values(self)

    @classmethod
    def headers(cls) -> tuple[str, ...]:
        """Column headings used when patients are shown as a table."""
        return _titles(cls)


@dataclass(frozen=True)
class Doctor:
    """A member of the medical staff."""

    TABLE: ClassVar[str] = "doctors"
    DISPLAY: ClassVar[tuple[tuple[str, str], ...]] = (
        ("doctor_id", "Doctor Id"),
        ("specialization", "Specialization"),
        ("years_experience", "Years Of Experience"),
        ("first_name", "First Name"),
        ("last_name", "Last name"),
        ("date_of_birth", "Birthday"),
        ("gender", "Gender"),
        ("phone_number", "Phone Number"),
        ("email", "Email"),
        ("address", "Address"),
    )

    doctor_id: str
    specialization: str = ""
    years_experience: str = ""
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    gender: str = ""
    phone_number: str = ""
    email: str = ""
    address: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Doctor:
        """Build a doctor from a row keyed by column name."""
        return _build(cls, row)

    def as_row(self) -> tuple[str, ...]:
        """Values in the order of :meth:`headers`."""
        return _values(self)

    @classmethod
    def headers(cls) -> tuple[str, ...]:
        """Column headings used when doctors are shown as a table."""
        return _titles(cls)


@dataclass(frozen=True)
class Emergency:
    """An emergency admission."""

    TABLE: ClassVar[str] = "emergencies"
    DISPLAY: ClassVar[tuple[tuple[str, str], ...]] = (
        ("health_card_number", "Health Card"),
        ("first_name", "First Name"),
        ("last_name", "Last Name"),
        ("date_of_birth", "Birthday"),
        ("gender", "Gender"),
        ("blood_type", "Blood Type"),
        ("emergency_contact_name", "Emergency Contact Name"),
        ("emergency_contact_number", "Emergency Contact #"),
        ("emergency_contact_relation", "Emergency Contact Relation"),
        ("emergency_reason", "Emergency Reason"),
        ("symptoms", "Symptoms"),
        ("current_medical_conditions", "Current Medical Conditions"),
        ("allergies", "Allergies"),
        ("medication", "Medication"),
        ("emergency_time", "Time of Emergency"),
    )

    health_card_number: str
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    gender: str = ""
    blood_type: str = ""
    emergency_contact_number: str = ""
    emergency_contact_relation: str = ""
    emergency_contact_name: str = ""
    emergency_reason: str = ""
    symptoms: str = ""
    current_medical_conditions: str = ""
    allergies: str = ""
    medication: str = ""
    emergency_time: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Emergency:
        """Build an emergency admission from a row keyed by column name."""
        return _build(cls, row)

    def as_row(self) -> tuple[str, ...]:
        """Values in the order of :meth:`headers`."""
        return _values(self)

    @classmethod
    def headers(cls) -> tuple[str, ...]:
        """Column headings used when emergencies are shown as a table."""
        return _titles(cls)


@dataclass(frozen=True)
class Room:
    """A hospital room and its occupancy status."""

    TABLE: ClassVar[str] = "rooms"
    DISPLAY: ClassVar[tuple[tuple[str, str], ...]] = (
        ("room_number", "Room Number"),
        ("room_type", "Room Type"),
        ("status", "Status"),
    )

    room_number: str
    room_type: str = ""
    status: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Room:
        """Build a room from a row keyed by column name."""
        return _build(cls, row)

    def as_row(self) -> tuple[str, ...]:
        """Values in the order of :meth:`headers`."""
        return _values(self)

    @classmethod
    def headers(cls) -> tuple[str, ...]:
        """Column headings used when rooms are shown as a table."""
        return _titles(cls)