"""Persistence: SQLAlchemy engine, read models, and repositories."""
