"""Unit tests for numeric helpers"""

import pytest
from finhealth.domain.exceptions import NonFiniteInputError
from finhealth.utils.numbers import ensure_finite, round_half_up


@pytest.mark.parametrize(
    "value,expected",
    [
        (9.5, 10),
        (24.5, 25),
        (47.55, 48),
        (0.49999999999999994, 0),
        (2.4999999999999996, 2),
        (-2.5, -2),
        (-2.6, -3),
        (0.0, 0),
        (100.0, 100),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
    assert isinstance(round_half_up(value), int)


def test_ensure_finite_accepts_finite_and_bools():
    ensure_finite(a=0, b=-1.5, c=1e308, flag=True)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_ensure_finite_names_offending_field(bad):
    with pytest.raises(NonFiniteInputError) as exc_info:
        ensure_finite(income=100.0, debt=bad)
    assert exc_info.value.field_name == "debt"
