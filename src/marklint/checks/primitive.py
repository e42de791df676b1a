"""Primitive value checkers.

Pure, total functions over raw attribute strings. Unparseable input yields
False; nothing here raises.
"""

import re
from decimal import Decimal
from typing import Iterable, NamedTuple

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
UNIT_PATTERN = re.compile(r"(.*?)([^0-9.]*)", re.DOTALL)


class UnitSplit(NamedTuple):
    """A dimensioned value split into its numeric part and unit."""
    num: str
    unit: str


def int_check(value: str) -> bool:
    return INT_PATTERN.fullmatch(value) is not None


def uint_check(value: str) -> bool:
    return int_check(value) and Decimal(value) >= 0


def non_zero_uint_check(value: str) -> bool:
    return int_check(value) and Decimal(value) > 0


def float_check(value: str) -> bool:
    return FLOAT_PATTERN.fullmatch(value) is not None


def in_range(value: str | int | float, minimum: float, maximum: float) -> bool:
    """Check that a numeric value lies in [minimum, maximum].

    Strings must be valid floating-point literals; "nan" and "inf" are not.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if not float_check(value):
            return False
        number = float(value)
    elif isinstance(value, (int, float)):
        number = value
    else:
        return False
    return minimum <= number <= maximum


def split_unit(value: str) -> UnitSplit:
    """Split off the longest trailing run of non-numeric characters.

    "12.5deg" -> ("12.5", "deg"), "50%" -> ("50", "%"), "1" -> ("1", "").
    """
    match = UNIT_PATTERN.fullmatch(value)
    return UnitSplit(match.group(1), match.group(2))


def number_check_with_unit(value: str, units: Iterable[str]) -> bool:
    num, unit = split_unit(value)
    return unit in set(units) and float_check(num)
