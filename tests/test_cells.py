import datetime as dt
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from dqprofile.cells import CellKind, cell_kind, to_text
from dqprofile.errors import MalformedCellText


def test_cell_kinds():
    assert cell_kind(None) is CellKind.NULL
    assert cell_kind(float("nan")) is CellKind.NULL
    assert cell_kind(pd.NaT) is CellKind.NULL
    assert cell_kind(True) is CellKind.BOOLEAN
    assert cell_kind(3) is CellKind.NUMBER
    assert cell_kind(np.float64(1.5)) is CellKind.NUMBER
    assert cell_kind("x") is CellKind.TEXT
    assert cell_kind(dt.date(2024, 1, 7)) is CellKind.DATETIME
    assert cell_kind(pd.Timestamp("2024-01-07")) is CellKind.DATETIME
    assert cell_kind("#ERROR bad") is CellKind.ERROR
    assert cell_kind([1]) is CellKind.OTHER


def test_canonical_text():
    assert to_text(None) is None
    assert to_text(True) == "true"
    assert to_text(False) == "false"
    assert to_text(42) == "42"
    assert to_text(np.int64(42)) == "42"
    assert to_text(3.0) == "3"
    assert to_text(0.1) == "0.1"
    assert to_text(Decimal("1.50")) == "1.50"
    assert to_text("  kept as is ") == "  kept as is "
    assert to_text(dt.date(2024, 1, 7)) == "2024-01-07"
    assert to_text(dt.datetime(2024, 1, 7, 9, 30)) == "2024-01-07 09:30:00"
    assert to_text(pd.Timestamp("2024-01-07 09:30:00")) == "2024-01-07 09:30:00"
    assert to_text(np.datetime64("2024-01-07T09:30:00")) == "2024-01-07 09:30:00"
    assert to_text(b"bytes") == "bytes"
    assert to_text(ValueError("boom")) == "#ERROR: boom"


def test_malformed_text_raises():
    with pytest.raises(MalformedCellText):
        to_text(b"\xff\xfe\xfa")
    with pytest.raises(MalformedCellText):
        to_text({"nested": "value"})


def test_midnight_timestamps_render_as_dates():
    assert to_text(pd.Timestamp("2024-01-07")) == "2024-01-07"
    assert to_text(dt.datetime(2024, 1, 7)) == "2024-01-07"
    assert to_text(np.datetime64("2024-01-07")) == "2024-01-07"
    assert to_text(pd.Timestamp("2024-01-07", tz="UTC")) == "2024-01-07 00:00:00+00:00"
