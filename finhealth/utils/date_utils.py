"""Calendar month arithmetic"""

from datetime import date
from typing import List, Tuple


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move (year, month) by offset months, crossing year boundaries"""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def previous_month(year: int, month: int) -> Tuple[int, int]:
    return shift_month(year, month, -1)


def month_range(end_year: int, end_month: int, months: int) -> List[Tuple[int, int]]:
    """The `months` calendar months ending at (end_year, end_month), oldest first"""
    return [shift_month(end_year, end_month, -i) for i in range(months - 1, -1, -1)]


def in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month
