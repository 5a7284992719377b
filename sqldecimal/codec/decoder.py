"""Decoding of stored text back into DECIMAL values.

The bias is read from the text itself: a stored text whose integer part is L
characters long is taken to be offset by 10^(L-1). Leading zeros count, so
"08.5" and "008.5" decode to different values (-1.5 and -91.5). Canonical
encoders always write P - S + 1 integer digits, which makes decode the exact
inverse of encode; any other width still decodes as long as the result fits.
"""

from __future__ import annotations

from decimal import Decimal

from sqldecimal.codec.bounds import check_range
from sqldecimal.constants import MAX_PRECISION, MAX_STORED_DIGITS
from sqldecimal.errors import DecimalCodecError, MalformedNumber, OutOfRange, UnsupportedInput
from sqldecimal.math.fixed_point import (
    Fixed,
    format_signed,
    parse_unsigned_decimal,
    round_to_scale,
    subtract_power_of_ten,
)
from sqldecimal.models.types import DecimalType


def _drop_redundant_digits(int_part: str) -> str:
    """Shorten a stored integer part without changing what it decodes to.

    With the bias tied to width, "10r" decodes like "1r" and "09r" like "0r",
    so zeros after a leading 1 and nines after a leading 0 can go. What is
    left has a second digit that moves the value by at least 10^(width-2).
    """
    head, rest = int_part[0], int_part[1:]
    if head == "1":
        return head + rest.lstrip("0")
    if head == "0":
        return head + rest.lstrip("9")
    return int_part


def decode_fixed(stored: str, decimal_type: DecimalType) -> Fixed:
    """Decode stored text into an exact value rounded to the column scale.

    Args:
        stored: Text of the form digits('.'digits)?; the fractional part may
            be empty ("10.")
        decimal_type: Column type the text was read from

    Returns:
        Fixed with scale equal to decimal_type.scale

    Raises:
        UnsupportedInput: If stored is not a str
        MalformedNumber: If the integer part is empty or either part contains
            anything but ASCII digits
        OutOfRange: If the decoded value has more than P - S integer digits
    """
    if not isinstance(stored, str):
        raise UnsupportedInput(f"Stored decimal must be text, got {type(stored).__name__}")

    int_part, _, frac_part = stored.partition(".")
    if not int_part:
        raise MalformedNumber(f"Stored decimal {stored!r} has no integer part")

    int_part = _drop_redundant_digits(int_part)
    raw, width = parse_unsigned_decimal(f"{int_part}.{frac_part}" if frac_part else int_part)
    if width > MAX_STORED_DIGITS:
        raise OutOfRange(
            f"Stored decimal decodes to more than {MAX_PRECISION} integer digits "
            f"({width}-digit integer part after normalizing)"
        )
    actual = subtract_power_of_ten(raw, width - 1)

    rounded = round_to_scale(actual, decimal_type.scale)
    check_range(rounded, decimal_type)
    return rounded


def decode(stored: str | None, decimal_type: DecimalType) -> Decimal | None:
    """Decode stored text into a Decimal with exactly ``scale`` places.

    Returns:
        The value, or None for SQL NULL

    Raises:
        UnsupportedInput, MalformedNumber, OutOfRange: See decode_fixed()
    """
    if stored is None:
        return None
    return decode_fixed(stored, decimal_type).to_decimal()


def format_text(stored: str | None, decimal_type: DecimalType) -> str | None:
    """Decode stored text into display text.

    Examples for DECIMAL(9, 2):
        "14723245"        -> "4723245.00"
        "100004723245.01" -> "4723245.01"

    Returns:
        Signed numeral with exactly ``scale`` fractional digits, or None for
        SQL NULL

    Raises:
        UnsupportedInput, MalformedNumber, OutOfRange: See decode_fixed()
    """
    if stored is None:
        return None
    return format_signed(decode_fixed(stored, decimal_type), decimal_type.scale)


def is_valid(stored: str | None, decimal_type: DecimalType) -> bool:
    """Check whether stored text decodes under decimal_type. NULL is valid."""
    if stored is None:
        return True
    try:
        decode_fixed(stored, decimal_type)
    except DecimalCodecError:
        return False
    return True
