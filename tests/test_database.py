import sqlite3

import pytest

from wardbook.database import DatabaseError, HospitalDatabase
from wardbook.records import Doctor, Emergency, Patient


@pytest.fixture
def db():
    database = HospitalDatabase(":memory:")
    yield database
    database.close()


def _patient(card, first="Ada", last="Lovelace"):
    return Patient(
        health_card_number=card,
        first_name=first,
        last_name=last,
        date_of_birth="1815-12-10",
        gender="F",
        blood_type="O+",
        address="1 Example Street",
        email_address="ada@example.com",
        insurance_company="Acme Health",
        primary_care_physician="Dr Who",
    )


def _doctor(doctor_id, first="Gregory", last="House"):
    return Doctor(
        doctor_id=doctor_id,
        specialization="Diagnostics",
        years_experience="20",
        first_name=first,
        last_name=last,
        email="house@example.com",
    )


def test_added_patient_is_listed_unchanged(db):
    patient = _patient("HC-1")
    db.add_patient(patient)
    assert db.list_patients() == [patient]


def test_duplicate_patient_raises(db):
    db.add_patient(_patient("HC-1"))
    with pytest.raises(DatabaseError):
        db.add_patient(_patient("HC-1", first="Other"))
    assert len(db.list_patients()) == 1


def test_search_patient_by_exact_card(db):
    db.add_patient(_patient("HC-1"))
    db.add_patient(_patient("HC-2", first="Grace", last="Hopper"))
    found = db.search_patients("HC-2")
    assert [p.health_card_number for p in found] == ["HC-2"]


def test_search_patient_card_is_not_partial(db):
    db.add_patient(_patient("HC-1"))
    assert db.search_patients("HC-") == []


def test_search_patient_by_partial_name(db):
    db.add_patient(_patient("HC-1", first="Ada", last="Lovelace"))
    db.add_patient(_patient("HC-2", first="Grace", last="Hopper"))
    db.add_patient(_patient("HC-3", first="Alan", last="Turing"))
    by_last = db.search_patients("love")
    by_first = db.search_patients("Gra")
    assert [p.health_card_number for p in by_last] == ["HC-1"]
    assert [p.health_card_number for p in by_first] == ["HC-2"]


def test_search_patient_matches_across_rows(db):
    db.add_patient(_patient("HC-1", first="Ada", last="Lovelace"))
    db.add_patient(_patient("HC-3", first="Alan", last="Turing"))
    found = sorted(p.health_card_number for p in db.search_patients("a"))
    assert found == ["HC-1", "HC-3"]


def test_delete_patient(db):
    db.add_patient(_patient("HC-1"))
    db.add_patient(_patient("HC-2"))
    assert db.delete_patient("HC-1") == 1
    assert [p.health_card_number for p in db.list_patients()] == ["HC-2"]


def test_delete_missing_patient_is_not_an_error(db):
    assert db.delete_patient("HC-9") == 0
    assert db.list_patients() == []


def test_doctor_round_trip_and_search(db):
    first = _doctor("D-1")
    second = _doctor("D-2", first="Meredith", last="Grey")
    db.add_doctor(first)
    db.add_doctor(second)
    assert db.list_doctors() == [first, second]
    assert db.search_doctors("D-1") == [first]
    assert db.search_doctors("grey") == [second]


def test_duplicate_doctor_raises(db):
    db.add_doctor(_doctor("D-1"))
    with pytest.raises(DatabaseError):
        db.add_doctor(_doctor("D-1"))


def test_emergency_round_trip(db):
    emergency = Emergency(
        health_card_number="HC-1",
        first_name="Ada",
        last_name="Lovelace",
        emergency_contact_name="Charles",
        emergency_contact_relation="Friend",
        emergency_reason="Fall",
        symptoms="Pain",
        allergies="None",
        medication="None",
        emergency_time="12:30",
    )
    db.add_emergency(emergency)
    assert db.list_emergencies() == [emergency]
    with pytest.raises(DatabaseError):
        db.add_emergency(emergency)


def test_data_persists_across_connections(tmp_path):
    path = tmp_path / "hospital.db"
    patient = _patient("HC-1")
    with HospitalDatabase(path) as database:
        database.add_patient(patient)
    with HospitalDatabase(path) as database:
        assert database.list_patients() == [patient]


def test_existing_file_is_not_given_tables(tmp_path):
    path = tmp_path / "hospital.db"
    sqlite3.connect(path).close()
    path.touch()
    with HospitalDatabase(path) as database:
        with pytest.raises(DatabaseError):
            database.list_patients()
        database.create_tables()
        assert database.list_patients() == []


def test_create_tables_is_idempotent(db):
    db.add_patient(_patient("HC-1"))
    db.create_tables()
    assert [p.health_card_number for p in db.list_patients()] == ["HC-1"]


def test_closed_database_raises(tmp_path):
    database = HospitalDatabase(tmp_path / "hospital.db")
    database.close()
    with pytest.raises(DatabaseError):
        database.list_doctors()


def test_open_failure_raises(tmp_path):
    with pytest.raises(DatabaseError):
        HospitalDatabase(tmp_path / "missing" / "hospital.db")