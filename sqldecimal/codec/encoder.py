"""Encoding of DECIMAL values into order-preserving stored text.

Stored text never carries a sign. Instead the value is biased by 10^(P-S):
every legal value of DECIMAL(P, S) lies strictly between -10^(P-S) and
10^(P-S), so after adding the bias it is positive and below 2 * 10^(P-S).
Zero-padding the integer part to P - S + 1 digits then makes plain string
comparison agree with numeric comparison.

Example for DECIMAL(5, 1):
    -4.5 -> -4.5 + 10^4 = 9995.5 -> "09995.5"
    7    -> 7 + 10^4 = 10007.0   -> "10007.0"
"""

from __future__ import annotations

from sqldecimal.codec.bounds import check_range
from sqldecimal.codec.coercion import coerce_scalar
from sqldecimal.errors import UnsupportedInput
from sqldecimal.math.fixed_point import (
    Fixed,
    add_power_of_ten,
    parse_signed_decimal,
    round_to_scale,
)
from sqldecimal.models.types import DecimalType


def encode_fixed(value: Fixed, decimal_type: DecimalType) -> str:
    """Encode an exact value as canonical stored text.

    Args:
        value: Value at any scale; it is rounded to the column scale first
        decimal_type: Target column type

    Returns:
        Integer part of exactly canonical_width digits, then "." and exactly
        scale digits when scale > 0

    Raises:
        OutOfRange: If the rounded value has more than P - S integer digits
    """
    rounded = round_to_scale(value, decimal_type.scale)
    check_range(rounded, decimal_type)

    biased = add_power_of_ten(rounded, decimal_type.max_integer_digits)
    int_part, frac_part = divmod(biased.value, 10**decimal_type.scale)

    text = f"{int_part:0{decimal_type.canonical_width}d}"
    if decimal_type.scale > 0:
        text += f".{frac_part:0{decimal_type.scale}d}"
    return text


def encode(raw: object, decimal_type: DecimalType) -> str | None:
    """Encode a domain scalar for storage.

    Args:
        raw: int, float, Decimal or numeral text; None is SQL NULL
        decimal_type: Target column type

    Returns:
        Stored text, or None when raw is None

    Raises:
        UnsupportedInput: If raw is not an accepted kind (bool, datetime, ...)
        MalformedNumber: If raw is text that is not a numeral
        OutOfRange: If the rounded value does not fit the column
    """
    if raw is None:
        return None
    return encode_fixed(coerce_scalar(raw), decimal_type)


def parse_text(text: str | None, decimal_type: DecimalType) -> str | None:
    """Encode user-facing numeral text for storage.

    Same as encode() but the input is always parsed strictly as a signed
    numeral, so "-5.7159" in DECIMAL(5, 4) becomes "04.2841".

    Raises:
        UnsupportedInput: If text is neither a str nor None
        MalformedNumber: If text is empty or not a signed numeral
        OutOfRange: If the rounded value does not fit the column
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise UnsupportedInput(f"Expected numeral text, got {type(text).__name__}")
    return encode_fixed(parse_signed_decimal(text), decimal_type)
