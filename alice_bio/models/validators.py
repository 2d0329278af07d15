"""Type checks for numeric columns, applied before a row reaches the database.

SQLite stores whatever it is given, so a string in an INTEGER column would
otherwise be persisted.
"""
import math
import numbers


def _reject(table: str, key: str, value, kind: str) -> ValueError:
    return ValueError(f"{table}.{key} must be {kind}, got {value!r}")


def integer_value(table: str, key: str, value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise _reject(table, key, value, "an integer")
    return int(value)


def float_value(table: str, key: str, value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise _reject(table, key, value, "a number")
    value = float(value)
    if math.isnan(value):
        raise _reject(table, key, value, "a number")
    return value
