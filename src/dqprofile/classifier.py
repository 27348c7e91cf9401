"""
Value classification rules.

A value counts as empty when it is null, an empty string, a numeric zero, or
text that is blank or reads "N/A" once trimmed. Booleans are never numeric
zero. Error markers are not empty; they are only kept out of samples.
"""
from typing import Any

from .cells import CellKind, cell_kind

_NA_TOKEN = "N/A"


def is_empty_value(value: Any) -> bool:
    kind = cell_kind(value)
    if kind is CellKind.NULL:
        return True
    if kind is CellKind.TEXT:
        trimmed = value.strip()
        return trimmed == "" or trimmed.upper() == _NA_TOKEN
    if kind is CellKind.NUMBER:
        try:
            return bool(value == 0)
        except (TypeError, ValueError):
            return False
    return False


def is_error_marker(value: Any) -> bool:
    return cell_kind(value) is CellKind.ERROR


def is_sample_eligible(value: Any) -> bool:
    return not is_empty_value(value) and not is_error_marker(value)
