"""Numeric helpers shared by the calculation engines"""

import math
from decimal import ROUND_FLOOR, Decimal
from typing import Any

from finhealth.domain.exceptions import NonFiniteInputError

HALF = Decimal("0.5")


def ensure_finite(**values: Any) -> None:
    """Raise NonFiniteInputError for the first NaN or infinite keyword value"""
    for name, value in values.items():
        if isinstance(value, bool):
            continue
        if not math.isfinite(value):
            raise NonFiniteInputError(name, value)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with ties going toward +infinity.

    floor(value + 0.5) is evaluated on the exact decimal expansion of the
    float, so the addition itself cannot round up (0.49999999999999994 -> 0).
    Python's round() is banker's rounding and is not used here.
    """
    return int((Decimal(value) + HALF).to_integral_value(rounding=ROUND_FLOOR))
