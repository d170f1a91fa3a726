"""Room occupancy: adding rooms, assigning them to patients and releasing them."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from datetime import date

from .database import DatabaseError, HospitalDatabase
from .records import Room

AVAILABLE = "Available"
OCCUPIED = "Occupied"


class RoomNotFoundError(LookupError):
    """The requested room does not exist."""


class RoomOccupiedError(Exception):
    """The requested room is not available for assignment."""


class RoomLedger:
    """Keeps the rooms table, patient room numbers and assignments in step."""

    def __init__(self, database: HospitalDatabase) -> None:
        self.database = database

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Connection]:
        connection = self.database.connection
        try:
            with connection:
                yield connection
        except sqlite3.Error as exc:
            raise DatabaseError(f"{action} failed: {exc}") from exc

    def add_room(self, room: Room) -> None:
        """Store a new room; the room number must be unique."""
        values = asdict(room)
        with self._transaction("adding room") as conn:
            conn.execute(
                "INSERT INTO rooms (room_number, room_type, status) "
                "VALUES (:room_number, :room_type, :status)",
                values,
            )

    def list_rooms(self) -> list[Room]:
        """Every stored room."""
        with self._transaction("listing rooms") as conn:
            rows = conn.execute("SELECT * FROM rooms").fetchall()
        return [Room.from_row(row) for row in rows]

    def assign_room(self, health_card_number: str, room_number: str) -> str:
        """Put a patient in an available room and return the assignment date.

        Raises RoomNotFoundError when the room is unknown and
        RoomOccupiedError when its status is anything but Available.
        """
        assigned = date.today().isoformat()
        with self._transaction("assigning room") as conn:
            row = conn.execute(
                "SELECT status FROM rooms WHERE room_number = :room",
                {"room": room_number},
            ).fetchone()
            if row is None:
                raise RoomNotFoundError(f"room {room_number!r} not found")
            if row[0] != AVAILABLE:
                raise RoomOccupiedError(f"room {room_number!r} is already occupied")
            params = {"room": room_number, "card": health_card_number}
            conn.execute(
                "UPDATE patients SET room_number = :room "
                "WHERE health_card_number = :card",
                params,
            )
            conn.execute(
                "INSERT INTO room_assignments "
                "(room_number, health_card_number, assigned_date) "
                "VALUES (:room, :card, :assigned)",
                {**params, "assigned": assigned},
            )
            conn.execute(
                f"UPDATE rooms SET status = '{OCCUPIED}' WHERE room_number = :room",
                params,
            )
        return assigned

    def release_room(self, health_card_number: str, room_number: str) -> None:
        """Clear the patient's room, mark the room Available and drop the assignment."""
        params = {"room": room_number, "card": health_card_number}
        with self._transaction("releasing room") as conn:
            conn.execute(
                "UPDATE patients SET room_number = NULL "
                "WHERE health_card_number = :card",
                params,
            )
            conn.execute(
                f"UPDATE rooms SET status = '{AVAILABLE}' WHERE room_number = :room",
                params,
            )
            conn.execute(
                "DELETE FROM room_assignments "
                "WHERE room_number = :room AND health_card_number = :card",
                params,
            )