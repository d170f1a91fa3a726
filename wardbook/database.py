"""SQLite storage for patients, doctors and emergency admissions."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, TypeVar

from .records import Doctor, Emergency, Patient, Room

_R = TypeVar("_R", Patient, Doctor, Emergency, Room)

MEMORY = ":memory:"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS patients (
        health_card_number TEXT PRIMARY KEY,
        first_name TEXT,
        last_name TEXT,
        date_of_birth TEXT,
        gender TEXT,
        blood_type TEXT,
        address TEXT,
        phone_number TEXT,
        email_address TEXT,
        insurance_company TEXT,
        primary_care_physician TEXT,
        room_number TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS doctors (
        doctor_id TEXT PRIMARY KEY,
        specialization TEXT,
        years_experience TEXT,
        first_name TEXT,
        last_name TEXT,
        date_of_birth TEXT,
        gender TEXT,
        phone_number TEXT,
        email TEXT,
        address TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS emergencies (
        health_card_number TEXT PRIMARY KEY,
        first_name TEXT,
        last_name TEXT,
        date_of_birth TEXT,
        gender TEXT,
        blood_type TEXT,
        emergency_contact_number TEXT,
        emergency_contact_relation TEXT,
        emergency_contact_name TEXT,
        emergency_reason TEXT,
        symptoms TEXT,
        current_medical_conditions TEXT,
        allergies TEXT,
        medication TEXT,
        emergency_time TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS rooms (
        room_number TEXT PRIMARY KEY,
        room_type TEXT,
        status TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS room_assignments (
        room_number TEXT,
        health_card_number TEXT,
        assigned_date TEXT
    )
    """,
)


class DatabaseError(Exception):
    """A statement against the hospital database failed."""


class HospitalDatabase:
    """A connection to the hospital's SQLite database.

    Tables are created when the database file did not exist before it was
    opened; an existing file is used as it is.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        fresh = str(path) == MEMORY or not Path(path).exists()
        try:
            self.connection = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"connection with database failed: {exc}") from exc
        self.connection.row_factory = sqlite3.Row
        if fresh:
            self.create_tables()

    def __enter__(self) -> HospitalDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection; closing twice is harmless."""
        self.connection.close()

    @contextmanager
    def _guard(self, action: str) -> Iterator[sqlite3.Connection]:
        """Run statements in one transaction, turning failures into DatabaseError."""
        try:
            with self.connection:
                yield self.connection
        except sqlite3.Error as exc:
            raise DatabaseError(f"{action} failed: {exc}") from exc

    def _insert(self, record: Patient | Doctor | Emergency | Room, action: str) -> None:
        values = asdict(record)
        columns = ", ".join(values)
        placeholders = ", ".join(f":{name}" for name in values)
        sql = f"INSERT INTO {record.TABLE} ({columns}) VALUES ({placeholders})"
        with self._guard(action) as conn:
            conn.execute(sql, values)

    def _select(
        self,
        kind: type[_R],
        action: str,
        where: str = "",
        params: Mapping[str, Any] | None = None,
    ) -> list[_R]:
        sql = f"SELECT * FROM {kind.TABLE}"
        if where:
            sql += f" WHERE {where}"
        with self._guard(action) as conn:
            rows = conn.execute(sql, dict(params or {})).fetchall()
        return [kind.from_row(row) for row in rows]

    def create_tables(self) -> None:
        """Create every table that does not exist yet."""
        with self._guard("creating tables") as conn:
            for statement in _SCHEMA:
                conn.execute(statement)

    def add_patient(self, patient: Patient) -> None:
        """Store a new patient; the health card number must be unique."""
        self._insert(patient, "adding patient")

    def search_patients(self, term: str) -> list[Patient]:
        """Patients whose card number equals *term* or whose name contains it."""
        return self._select(
            Patient,
            "patient search",
            "health_card_number = :term "
            "OR first_name LIKE :pattern OR last_name LIKE :pattern",
            {"term": term, "pattern": f"%{term}%"},
        )

    def list_patients(self) -> list[Patient]:
        """Every stored patient."""
        return self._select(Patient, "listing patients")

    def delete_patient(self, health_card_number: str) -> int:
        """Remove a patient; returns how many rows were removed."""
        with self._guard("deleting patient") as conn:
            cursor = conn.execute(
                "DELETE FROM patients WHERE health_card_number = :card",
                {"card": health_card_number},
            )
        return cursor.rowcount

    def add_doctor(self, doctor: Doctor) -> None:
        """Store a new doctor; the doctor id must be unique."""
        self._insert(doctor, "adding doctor")

    def search_doctors(self, term: str) -> list[Doctor]:
        """Doctors whose id equals *term* or whose name contains it."""
        return self._select(
            Doctor,
            "doctor search",
            "doctor_id = :term "
            "OR first_name LIKE :pattern OR last_name LIKE :pattern",
            {"term": term, "pattern": f"%{term}%"},
        )

    def list_doctors(self) -> list[Doctor]:
        """Every stored doctor."""
        return self._select(Doctor, "listing doctors")

    def add_emergency(self, emergency: Emergency) -> None:
        """Store an emergency admission; one per health card number."""
        self._insert(emergency, "adding emergency patient")

    def list_emergencies(self) -> list[Emergency]:
        """Every stored emergency admission."""
        return self._select(Emergency, "listing emergencies")