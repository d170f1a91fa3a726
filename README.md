# wardbook

wardbook keeps a hospital register in one SQLite file. The register holds patients, doctors, emergency admissions and rooms, and it records which patient has been put in which room.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package gives you the `wardbook` command. It works on `hospital.db` in the current directory. Use `--db PATH` to pick another file:

```
wardbook --help
wardbook --db ward.db patient list
```

Subcommands:

| Section     | Actions                                                   |
|-------------|-----------------------------------------------------------|
| `patient`   | `add`, `search TERM`, `list`, `delete HEALTH_CARD_NUMBER` |
| `doctor`    | `add`, `search TERM`, `list`                              |
| `emergency` | `add`, `list`                                             |
| `room`      | `add ROOM_NUMBER ROOM_TYPE STATUS`, `list`, `assign HEALTH_CARD_NUMBER ROOM_NUMBER`, `release HEALTH_CARD_NUMBER ROOM_NUMBER` |

Each `add` action for patients, doctors and emergencies takes the record's key as a positional argument. For patients and emergencies the key is the health card number. For doctors it is the doctor id. Every other field is an option named after it, for example:

```
wardbook patient add HC-0001 --first-name Ada --last-name Example --blood-type O+
wardbook doctor add D-01 --specialization Cardiology --first-name Grace
wardbook emergency add HC-0002 --emergency-reason Fall --emergency-time 14:05
wardbook room add 101 Single Available
wardbook room assign HC-0001 101
wardbook room release HC-0001 101
```

Fields you leave out are stored as empty text.

Listings and search results are printed as plain-text tables. The column headings are the ones returned by each record's `headers()`.

When an action fails, the command prints a message to standard error and exits with status 1. Examples of failures are a duplicate key, an unknown or occupied room, or a `room add` with an empty field.

`patient delete` reports success even when no patient has that health card number.

## Library use

```python
from wardbook.database import HospitalDatabase
from wardbook.records import Patient, Room
from wardbook.rooms import RoomLedger, RoomOccupiedError

with HospitalDatabase("hospital.db") as db:
    db.add_patient(Patient(
        health_card_number="HC-0001",
        first_name="Ada",
        last_name="Example",
        date_of_birth="1980-01-01",
        blood_type="O+",
        email_address="ada@example.com",
    ))

    for patient in db.search_patients("Ada"):
        print(patient.as_row())

    ledger = RoomLedger(db)
    ledger.add_room(Room("101", "Single", "Available"))
    print(ledger.assign_room("HC-0001", "101"))  # today's date, YYYY-MM-DD
    try:
        ledger.assign_room("HC-0001", "101")
    except RoomOccupiedError:
        print("room 101 is taken")
    ledger.release_room("HC-0001", "101")
```

### Records

`wardbook.records` defines four frozen dataclasses: `Patient`, `Doctor`, `Emergency` and `Room`. Every field is a string.

Each class has these methods:

- `from_row(row)` builds a record from a mapping keyed by column name. A column that is missing or NULL becomes an empty string.
- `as_row()` gives the field values in display order.
- `headers()` gives the matching column headings.

### Database

`wardbook.database.HospitalDatabase(path)` opens the SQLite file and can be used as a context manager. It creates the tables only if the file did not exist beforehand, or if the path is `":memory:"`. `create_tables()` can be called at any time and creates only the tables that are missing.

It provides these methods:

- `add_patient`, `search_patients`, `list_patients` and `delete_patient`. `delete_patient` returns the number of rows it removed.
- `add_doctor`, `search_doctors` and `list_doctors`.
- `add_emergency` and `list_emergencies`.

A search matches a record in either of these cases:

- its key (health card number or doctor id) equals the term exactly;
- its first or last name contains the term. This uses SQLite `LIKE`, so ASCII letters match without regard to case.

### Rooms

`wardbook.rooms.RoomLedger(database)` has these methods:

- `add_room` stores a new room.
- `list_rooms` returns every room.
- `assign_room` puts a patient in a room. It sets the patient's room, adds an assignment row dated today and marks the room `Occupied`, and it returns that date.
- `release_room` clears the patient's room, marks the room `Available` and removes the assignment. It makes no checks first.

### Errors

A failed statement raises `DatabaseError`, for example on a duplicate key. When you call `assign_room`, it raises `RoomNotFoundError` if the room does not exist and `RoomOccupiedError` if the room's status is anything other than `Available`.

## What it does not do

wardbook has no graphical interface. It works only through the command line and the library.

Records cannot be edited once they are stored. Only patients can be deleted; doctors, emergencies and rooms cannot.

The room assignment history is stored, but nothing lists it.