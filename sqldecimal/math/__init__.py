"""Exact decimal arithmetic for the storage codec.

This package provides the fixed-point primitive the codec is built on:
- Fixed: integer coefficient plus scale, never a binary float
"""

from sqldecimal.math.fixed_point import (
    Fixed,
    add_power_of_ten,
    format_signed,
    integer_digit_count,
    parse_signed_decimal,
    parse_unsigned_decimal,
    round_to_scale,
    subtract_power_of_ten,
)

__all__ = [
    "Fixed",
    "parse_unsigned_decimal",
    "parse_signed_decimal",
    "add_power_of_ten",
    "subtract_power_of_ten",
    "round_to_scale",
    "integer_digit_count",
    "format_signed",
]
