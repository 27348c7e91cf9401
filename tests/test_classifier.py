import datetime as dt
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from dqprofile.classifier import is_empty_value, is_error_marker, is_sample_eligible


@pytest.mark.parametrize("value", [None, np.nan, pd.NA, pd.NaT, "", "   ", "\t\n", "n/a", "N/A", "  n/a  ",
                                   0, 0.0, np.int64(0), np.float64(0.0), Decimal("0")])
def test_empty_values(value):
    assert is_empty_value(value) is True


@pytest.mark.parametrize("value", ["Alice", "NA", "n/a/x", "0", " x ", 1, -2.5, np.int64(7),
                                   True, False, dt.date(2024, 1, 1), "#ERROR: bad read"])
def test_non_empty_values(value):
    assert is_empty_value(value) is False


def test_false_is_not_numeric_zero():
    assert is_empty_value(False) is False
    assert is_empty_value(np.bool_(False)) is False


def test_classifier_never_raises_on_odd_types():
    for value in [[1, 2], {"a": 1}, object(), b"", ValueError("x"), complex(0, 0)]:
        assert isinstance(is_empty_value(value), bool)


def test_error_markers():
    assert is_error_marker("#error: bad read")
    assert is_error_marker("  #ERROR")
    assert is_error_marker(ValueError("boom"))
    assert not is_error_marker("error")
    assert not is_error_marker("#ERR")
    assert not is_error_marker(None)


def test_sample_eligibility_excludes_empty_and_errors():
    assert is_sample_eligible("Alice")
    assert not is_sample_eligible("")
    assert not is_sample_eligible("#Error in cell")
    assert not is_sample_eligible(0)
