"""SQLite-backed register of patients, doctors, emergencies and hospital rooms."""

__version__ = "0.1.0"
__all__ = ["records", "database", "rooms", "cli"]