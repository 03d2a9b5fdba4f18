"""SQLite persistence for GTFS record types, built on SQLAlchemy Core."""
