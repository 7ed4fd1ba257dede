"""Unit tests for calendar month helpers"""

from datetime import date
from finhealth.utils.date_utils import in_month, month_range, previous_month, shift_month


def test_shift_month_crosses_year_boundaries():
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert shift_month(2024, 6, -18) == (2022, 12)
    assert previous_month(2024, 3) == (2024, 2)


def test_month_range_oldest_first():
    assert month_range(2024, 2, 3) == [(2023, 12), (2024, 1), (2024, 2)]
    assert month_range(2024, 2, 1) == [(2024, 2)]


def test_in_month():
    assert in_month(date(2024, 3, 31), 2024, 3)
    assert not in_month(date(2023, 3, 31), 2024, 3)
