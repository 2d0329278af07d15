"""Domain errors for rejected job-record writes.

The database is the enforcer of every rule on a job row; this module only
maps the driver's ``IntegrityError`` onto the kind of rule that fired.
PostgreSQL drivers expose a SQLSTATE, SQLite only a message.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

CHECK_VIOLATION = "23514"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"


class RecordError(Exception):
    pass


class IntegrityViolation(RecordError):
    def __init__(self, message: str, table: Optional[str] = None, constraint: Optional[str] = None):
        super().__init__(message)
        self.table = table
        self.constraint = constraint


class ConstraintViolation(IntegrityViolation):
    """A CHECK constraint rejected the row (enumerations, non-negative counts)."""


class ReferentialIntegrityViolation(IntegrityViolation):
    """The owner reference does not match an existing user."""


class NotNullViolation(IntegrityViolation):
    """A required column was NULL."""


class ImmutableRecordError(RecordError):
    """Job records are write-once."""


def _sqlstate(orig) -> Optional[str]:
    # psycopg2 uses pgcode, psycopg 3 uses sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _diag(orig, name: str) -> Optional[str]:
    diag = getattr(orig, "diag", None)
    return getattr(diag, name, None) if diag is not None else None


def _after_colon(message: str) -> Optional[str]:
    _, _, rest = message.partition(":")
    rest = rest.strip()
    if not rest:
        return None
    return rest.splitlines()[0]


def translate_integrity_error(exc: IntegrityError, table: Optional[str] = None) -> Optional[IntegrityViolation]:
    """Return the domain error for ``exc``, or None when it cannot be classified."""
    orig = exc.orig
    message = str(orig)
    code = _sqlstate(orig)

    if code == CHECK_VIOLATION:
        return ConstraintViolation(message, table, _diag(orig, "constraint_name"))
    if code == FOREIGN_KEY_VIOLATION:
        return ReferentialIntegrityViolation(message, table, _diag(orig, "constraint_name"))
    if code == NOT_NULL_VIOLATION:
        return NotNullViolation(message, table, _diag(orig, "column_name"))

    if message.startswith("CHECK constraint failed"):
        return ConstraintViolation(message, table, _after_colon(message))
    if message.startswith("FOREIGN KEY constraint failed"):
        return ReferentialIntegrityViolation(message, table)
    if message.startswith("NOT NULL constraint failed"):
        return NotNullViolation(message, table, _after_colon(message))
    return None
