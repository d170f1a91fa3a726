"""Command-line front end for the hospital database."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import fields

from .database import DatabaseError, HospitalDatabase
from .records import Doctor, Emergency, Patient, Room
from .rooms import RoomLedger, RoomNotFoundError, RoomOccupiedError

DEFAULT_DATABASE = "hospital.db"

Handler = Callable[[HospitalDatabase, argparse.Namespace], int]


def format_table(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Lay out headers and rows as aligned, plain-text columns."""
    table = [[str(cell) for cell in headers]]
    table.extend([str(cell) for cell in row] for row in rows)
    widths = [max(len(line[col]) for line in table) for col in range(len(headers))]
    separator = ["-" * width for width in widths]
    lines = [table[0], separator, *table[1:]]
    return "\n".join(
        "  ".join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip()
        for line in lines
    )


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _print_records(records: Sequence[Patient | Doctor | Emergency | Room], kind: type) -> None:
    print(format_table(kind.headers(), [record.as_row() for record in records]))


def _add_record_arguments(parser: argparse.ArgumentParser, kind: type) -> None:
    key, *rest = fields(kind)
    parser.add_argument(key.name)
    for field in rest:
        parser.add_argument(
            f"--{field.name.replace('_', '-')}", dest=field.name, default=""
        )


def _record_from_args(kind: type, args: argparse.Namespace):
    return kind(**{field.name: getattr(args, field.name) for field in fields(kind)})


def _adder(kind: type, store: str, success: str, failure: str) -> Handler:
    def handler(db: HospitalDatabase, args: argparse.Namespace) -> int:
        try:
            getattr(db, store)(_record_from_args(kind, args))
        except DatabaseError:
            return _fail(failure)
        print(success)
        return 0

    return handler


def _lister(kind: type, fetch: str) -> Handler:
    def handler(db: HospitalDatabase, args: argparse.Namespace) -> int:
        _print_records(getattr(db, fetch)(), kind)
        return 0

    return handler


def _searcher(kind: type, fetch: str) -> Handler:
    def handler(db: HospitalDatabase, args: argparse.Namespace) -> int:
        _print_records(getattr(db, fetch)(args.term), kind)
        return 0

    return handler


def _delete_patient(db: HospitalDatabase, args: argparse.Namespace) -> int:
    try:
        db.delete_patient(args.health_card_number)
    except DatabaseError:
        return _fail("Failed to delete patient")
    print("Patient deleted successfully")
    return 0


def _add_room(db: HospitalDatabase, args: argparse.Namespace) -> int:
    room = Room(args.room_number, args.room_type, args.status)
    if not all(room.as_row()):
        return _fail("Please fill all fields.")
    try:
        RoomLedger(db).add_room(room)
    except DatabaseError:
        return _fail("Failed to add room. Make sure room number is unique.")
    print("Room added successfully!")
    return 0


def _list_rooms(db: HospitalDatabase, args: argparse.Namespace) -> int:
    _print_records(RoomLedger(db).list_rooms(), Room)
    return 0


def _assign_room(db: HospitalDatabase, args: argparse.Namespace) -> int:
    if not args.health_card_number or not args.room_number:
        return _fail("Please enter both Health Card Number and Room Number.")
    try:
        RoomLedger(db).assign_room(args.health_card_number, args.room_number)
    except RoomNotFoundError:
        return _fail("Room not found")
    except RoomOccupiedError:
        return _fail("Room is already occupied.")
    except DatabaseError:
        return _fail("Failed to assign room")
    print("Room successfully assigned!")
    return 0


def _release_room(db: HospitalDatabase, args: argparse.Namespace) -> int:
    if not args.health_card_number or not args.room_number:
        return _fail("Please provide both the Health Card Number and Room Number")
    try:
        RoomLedger(db).release_room(args.health_card_number, args.room_number)
    except DatabaseError:
        return _fail("Failed to release room")
    print("Room successfully released")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for every section and action."""
    parser = argparse.ArgumentParser(
        prog="wardbook", description="Manage patients, doctors, emergencies and rooms."
    )
    parser.add_argument(
        "--db", default=DEFAULT_DATABASE, help="database file (default: %(default)s)"
    )
    sections = parser.add_subparsers(dest="section", required=True)

    patient = sections.add_parser("patient", help="registered patients")
    actions = patient.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add", help="register a patient")
    _add_record_arguments(add, Patient)
    add.set_defaults(
        handler=_adder(
            Patient, "add_patient", "Patient successfully added!", "Failed to add patient"
        )
    )
    search = actions.add_parser("search", help="search by card number or name")
    search.add_argument("term")
    search.set_defaults(handler=_searcher(Patient, "search_patients"))
    actions.add_parser("list", help="show every patient").set_defaults(
        handler=_lister(Patient, "list_patients")
    )
    delete = actions.add_parser("delete", help="remove a patient")
    delete.add_argument("health_card_number")
    delete.set_defaults(handler=_delete_patient)

    doctor = sections.add_parser("doctor", help="medical staff")
    actions = doctor.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add", help="register a doctor")
    _add_record_arguments(add, Doctor)
    add.set_defaults(
        handler=_adder(
            Doctor, "add_doctor", "Doctor successfully added!", "Failed to add doctor"
        )
    )
    search = actions.add_parser("search", help="search by id or name")
    search.add_argument("term")
    search.set_defaults(handler=_searcher(Doctor, "search_doctors"))
    actions.add_parser("list", help="show every doctor").set_defaults(
        handler=_lister(Doctor, "list_doctors")
    )

    emergency = sections.add_parser("emergency", help="emergency admissions")
    actions = emergency.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add", help="record an emergency admission")
    _add_record_arguments(add, Emergency)
    add.set_defaults(
        handler=_adder(
            Emergency,
            "add_emergency",
            "Patient successfully added",
            "Failed to add Patient",
        )
    )
    actions.add_parser("list", help="show every emergency").set_defaults(
        handler=_lister(Emergency, "list_emergencies")
    )

    room = sections.add_parser("room", help="rooms and assignments")
    actions = room.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add", help="add a room")
    add.add_argument("room_number")
    add.add_argument("room_type")
    add.add_argument("status")
    add.set_defaults(handler=_add_room)
    actions.add_parser("list", help="show every room").set_defaults(handler=_list_rooms)
    for name, handler, text in (
        ("assign", _assign_room, "put a patient in an available room"),
        ("release", _release_room, "release a patient's room"),
    ):
        action = actions.add_parser(name, help=text)
        action.add_argument("health_card_number")
        action.add_argument("room_number")
        action.set_defaults(handler=handler)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        with HospitalDatabase(args.db) as db:
            return args.handler(db, args)
    except DatabaseError as exc:
        return _fail(f"error: {exc}")


if __name__ == "__main__":
    sys.exit(main())