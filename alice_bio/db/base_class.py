from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import DateTime, MetaData
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import CreateColumn
from sqlalchemy.types import TypeDecorator

# Stable constraint names so violations can be traced back to a rule
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))

# Column.info flag: PostgreSQL generates the id when a row is inserted through plain SQL
PG_RANDOM_UUID = "pg_random_uuid"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """timestamptz that round-trips as aware UTC, including on SQLite."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return to_utc(value)

    def process_result_value(self, value, dialect):
        return to_utc(value)


@compiles(CreateColumn, "postgresql")
def _random_uuid_default(element, compiler, **kw):
    column = element.element
    text = compiler.visit_create_column(element, **kw)
    if text and column.info.get(PG_RANDOM_UUID) and column.server_default is None:
        head, sep, tail = text.partition(" NOT NULL")
        text = f"{head} DEFAULT gen_random_uuid(){sep}{tail}"
    return text


def one_of(column: str, values: Iterable[str]) -> str:
    """SQL text for a CHECK restricting ``column`` to a closed set of labels."""
    quoted = ", ".join("'%s'" % v.replace("'", "''") for v in values)
    return f"{column} IN ({quoted})"
