"""Attribute value checks."""

from .attr_check import Invalid, InvalidType, attr_check, includes_enum
from .primitive import (
    float_check,
    in_range,
    int_check,
    non_zero_uint_check,
    number_check_with_unit,
    split_unit,
    uint_check,
)

__all__ = [
    "Invalid",
    "InvalidType",
    "attr_check",
    "includes_enum",
    "float_check",
    "in_range",
    "int_check",
    "non_zero_uint_check",
    "number_check_with_unit",
    "split_unit",
    "uint_check",
]
