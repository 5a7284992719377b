"""Coercion of domain scalars into exact decimals.

The row serializer hands the encoder whatever the column value happens to be.
Each accepted kind is a small tagged input with one conversion rule; anything
outside this closed set is rejected before any arithmetic happens.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_DOWN, Context, Decimal

import structlog

from sqldecimal.constants import MAX_PRECISION, MAX_SCALE
from sqldecimal.errors import OutOfRange, UnsupportedInput
from sqldecimal.math.fixed_point import Fixed, parse_signed_decimal

logger = structlog.get_logger()

_KEPT_FRACTION_DIGITS = MAX_SCALE + 1
_KEPT_FRACTION_UNIT = Decimal(1).scaleb(-_KEPT_FRACTION_DIGITS)
# Room for every integer digit a Decimal may still carry plus the kept fraction
_TRUNCATE_CONTEXT = Context(prec=MAX_PRECISION + _KEPT_FRACTION_DIGITS)


@dataclass(frozen=True)
class IntegerInput:
    """Python int (bool excluded). Always exact."""

    value: int

    def to_fixed(self) -> Fixed:
        return Fixed.from_int(self.value)


@dataclass(frozen=True)
class FloatInput:
    """Binary float, converted through its shortest round-trip repr.

    -4.5 becomes exactly -4.5 and 0.1 becomes 0.1, never
    0.1000000000000000055511151231257827...
    """

    value: float

    def to_fixed(self) -> Fixed:
        if not math.isfinite(self.value):
            raise UnsupportedInput(f"Cannot store non-finite float {self.value!r}")
        text = repr(self.value)
        logger.debug("decimal_float_coerced", raw=self.value, text=text)
        return Fixed.from_decimal(Decimal(text))


@dataclass(frozen=True)
class DecimalInput:
    """decimal.Decimal, taken digit for digit up to MAX_SCALE + 1 places."""

    value: Decimal

    def to_fixed(self) -> Fixed:
        if not self.value.is_finite():
            raise UnsupportedInput(f"Cannot store non-finite decimal {self.value}")
        if self.value.is_zero():
            return Fixed(0, 0)
        # More than MAX_PRECISION integer digits never fits any column; reject
        # before expanding a huge exponent into an integer coefficient.
        if self.value.adjusted() >= MAX_PRECISION:
            raise OutOfRange(
                f"Decimal {self.value} has {self.value.adjusted() + 1} integer digits, "
                f"no DECIMAL column holds more than {MAX_PRECISION}"
            )
        value = self.value
        if value.as_tuple().exponent < -_KEPT_FRACTION_DIGITS:
            # Only the first digit past MAX_SCALE decides half-away rounding
            value = value.quantize(
                _KEPT_FRACTION_UNIT, rounding=ROUND_DOWN, context=_TRUNCATE_CONTEXT
            )
        return Fixed.from_decimal(value)


@dataclass(frozen=True)
class TextInput:
    """Numeral text such as "77" or "-1076416.875"."""

    value: str

    def to_fixed(self) -> Fixed:
        return parse_signed_decimal(self.value)


ScalarInput = IntegerInput | FloatInput | DecimalInput | TextInput


def classify_scalar(raw: object) -> ScalarInput:
    """Tag a raw domain scalar with its input kind.

    Raises:
        UnsupportedInput: If raw is not an int, float, Decimal or str. bool is
            rejected even though it subclasses int.
    """
    if isinstance(raw, bool):
        raise UnsupportedInput(f"Cannot convert bool {raw!r} to decimal")
    if isinstance(raw, int):
        return IntegerInput(raw)
    if isinstance(raw, float):
        return FloatInput(raw)
    if isinstance(raw, Decimal):
        return DecimalInput(raw)
    if isinstance(raw, str):
        return TextInput(raw)
    raise UnsupportedInput(f"Cannot convert {type(raw).__name__} {raw!r} to decimal")


def coerce_scalar(raw: object) -> Fixed:
    """Convert a domain scalar into an exact Fixed value.

    Raises:
        UnsupportedInput: If the kind is not accepted or the value is non-finite
        MalformedNumber: If text is not a signed numeral
        OutOfRange: If a Decimal is too large for any DECIMAL column
    """
    return classify_scalar(raw).to_fixed()
