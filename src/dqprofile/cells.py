"""
Cell model for dqprofile.

Every cell value pulled out of a DataFrame is tagged with a CellKind:
- NULL      None, NaN, pd.NA, pd.NaT
- BOOLEAN   bool / numpy.bool_
- NUMBER    ints, floats, Decimal and numpy scalars (booleans excluded)
- TEXT      str
- DATETIME  date, datetime, time, pd.Timestamp, numpy.datetime64
- ERROR     error markers: exception objects or text starting with "#ERROR"
- OTHER     anything else

to_text() renders a value to its canonical, locale-independent text form.
"""
import datetime as dt
import enum
import math
import numbers
from typing import Any, Optional

import numpy as np
import pandas as pd

from .errors import MalformedCellText

ERROR_MARKER = "#ERROR"


class CellKind(enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    DATETIME = "datetime"
    ERROR = "error"
    OTHER = "other"


def is_null(value: Any) -> bool:
    if not pd.api.types.is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def cell_kind(value: Any) -> CellKind:
    if is_null(value):
        return CellKind.NULL
    if isinstance(value, (bool, np.bool_)):
        return CellKind.BOOLEAN
    if isinstance(value, str):
        if value.strip().upper().startswith(ERROR_MARKER):
            return CellKind.ERROR
        return CellKind.TEXT
    if isinstance(value, numbers.Number):
        return CellKind.NUMBER
    if isinstance(value, (dt.date, dt.time, np.datetime64)):
        return CellKind.DATETIME
    if isinstance(value, BaseException):
        return CellKind.ERROR
    return CellKind.OTHER


def _number_text(value: numbers.Number) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        f = float(value)
        # integral floats come from int columns upcast by missing values
        if math.isfinite(f) and f.is_integer():
            return str(int(f))
        return repr(f)
    return str(value)


def _datetime_text(value: Any) -> str:
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if isinstance(value, dt.datetime):
        # date-only values from datetime64 columns arrive as naive midnight timestamps
        if value.tzinfo is None and value.time() == dt.time(0, 0) and getattr(value, "nanosecond", 0) == 0:
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    return value.isoformat()


def to_text(value: Any) -> Optional[str]:
    """Canonical text form of a cell value; None for nulls.

    Raises MalformedCellText for values that have no text form.
    """
    kind = cell_kind(value)
    if kind is CellKind.NULL:
        return None
    if kind is CellKind.BOOLEAN:
        return "true" if value else "false"
    if kind is CellKind.NUMBER:
        return _number_text(value)
    if kind is CellKind.TEXT:
        return str(value)
    if kind is CellKind.DATETIME:
        return _datetime_text(value)
    if kind is CellKind.ERROR:
        if isinstance(value, str):
            return str(value)
        return f"{ERROR_MARKER}: {value}"
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedCellText(value, str(e)) from e
    if isinstance(value, dt.timedelta):
        return pd.Timedelta(value).isoformat()
    raise MalformedCellText(value, "unsupported cell type")
