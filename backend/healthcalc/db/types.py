"""
Column types that behave the same on PostgreSQL and SQLite.
"""

import uuid

from sqlalchemy import JSON, String, TypeDecorator
from sqlalchemy.dialects.postgresql import JSONB, UUID as PostgresUUID


class GUID(TypeDecorator):
    """
    UUID column.

    Native UUID on PostgreSQL; a 36-character string elsewhere (tests run on SQLite).
    """

    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PostgresUUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == "postgresql":
            return value
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


class JSONList(TypeDecorator):
    """
    Ordered list of strings (health risks, recommendations, advice).

    JSONB on PostgreSQL, JSON elsewhere. ``None`` is stored as an empty list.
    """

    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        if value is None:
            return []
        return list(value)

    def process_result_value(self, value, dialect):
        return list(value or [])


class JSONDict(TypeDecorator):
    """Nested calculation payloads (macronutrients, calorie goals)."""

    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        return dict(value or {})

    def process_result_value(self, value, dialect):
        return dict(value or {})
