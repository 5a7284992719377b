"""Exact fixed-point decimal arithmetic.

Values are stored as an integer coefficient and a non-negative scale, so
``Fixed(-15, 1)`` is -1.5. Nothing in this module goes through binary floating
point: a DECIMAL(65, 30) column needs 65 significant digits, far past what a
double can hold.

Only the operations the storage codec needs are provided: strict parsing,
adding and subtracting powers of ten, rounding to a scale, counting integer
digits and formatting.
"""

from __future__ import annotations

import re
from decimal import Decimal

from sqldecimal.constants import MAX_PRECISION, MAX_SCALE, MAX_STORED_DIGITS
from sqldecimal.errors import MalformedNumber, OutOfRange, UnsupportedInput

__all__ = [
    # Classes
    "Fixed",
    # Functions
    "parse_unsigned_decimal",
    "parse_signed_decimal",
    "add_power_of_ten",
    "subtract_power_of_ten",
    "round_to_scale",
    "integer_digit_count",
    "format_signed",
]

# =============================================================================
# Grammar
# =============================================================================

_UNSIGNED_RE = re.compile(r"([0-9]+)(?:\.([0-9]+))?")
_SIGNED_RE = re.compile(r"([+-]?)([0-9]+)(?:\.([0-9]+))?")


# =============================================================================
# Fixed class
# =============================================================================


class Fixed:
    """Decimal number stored as ``value / 10**scale``.

    Example: -1.5 is stored as Fixed(-15, 1) and 4723245.00 as
    Fixed(472324500, 2). Two Fixed values compare equal when they denote the
    same number, whatever their scales.
    """

    __slots__ = ("value", "scale")

    def __init__(self, value: int, scale: int = 0) -> None:
        """Create Fixed from a raw coefficient and scale."""
        if scale < 0:
            raise ValueError(f"Fixed scale must be non-negative, got {scale}")
        self.value = value
        self.scale = scale

    @classmethod
    def from_int(cls, i: int) -> Fixed:
        """Create from an integer (scale 0)."""
        return cls(i, 0)

    @classmethod
    def from_decimal(cls, d: Decimal) -> Fixed:
        """Create from a finite Decimal without rounding.

        Raises:
            UnsupportedInput: If d is NaN or infinite
        """
        if not d.is_finite():
            raise UnsupportedInput(f"Cannot store non-finite decimal {d}")
        sign, digits, exponent = d.as_tuple()
        coefficient = int("".join(str(digit) for digit in digits))
        if sign:
            coefficient = -coefficient
        if exponent >= 0:
            return cls(coefficient * 10**exponent, 0)
        return cls(coefficient, -exponent)

    def to_decimal(self) -> Decimal:
        """Convert to Decimal, keeping every fractional digit.

        Built from the digit tuple so no context precision is applied.
        """
        sign = 1 if self.value < 0 else 0
        digits = tuple(int(c) for c in str(abs(self.value)))
        return Decimal((sign, digits, -self.scale))

    @property
    def integer_part(self) -> int:
        """Integer portion of ``|self|``."""
        return abs(self.value) // 10**self.scale

    def rescale(self, scale: int) -> Fixed:
        """Widen to a larger scale by appending zeros. Never rounds."""
        if scale < self.scale:
            raise ValueError(f"Cannot rescale from {self.scale} down to {scale} without rounding")
        return Fixed(self.value * 10 ** (scale - self.scale), scale)

    def _aligned(self, other: Fixed) -> tuple[int, int, int]:
        scale = max(self.scale, other.scale)
        return self.rescale(scale).value, other.rescale(scale).value, scale

    def add(self, other: Fixed) -> Fixed:
        """Add two Fixed values at the larger of the two scales."""
        a, b, scale = self._aligned(other)
        return Fixed(a + b, scale)

    def sub(self, other: Fixed) -> Fixed:
        """Subtract other from self. Result may be negative."""
        a, b, scale = self._aligned(other)
        return Fixed(a - b, scale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        a, b, _ = self._aligned(other)
        return a == b

    def __hash__(self) -> int:
        # Equal values at different scales must hash alike
        return hash(self.to_decimal())

    def __repr__(self) -> str:
        return f"Fixed({self.value}, {self.scale})"

    def __str__(self) -> str:
        return format_signed(self, self.scale)


# =============================================================================
# Parsing
# =============================================================================


def _from_digits(negative: bool, int_digits: str, frac_digits: str | None) -> Fixed:
    significant = int_digits.lstrip("0")
    if len(significant) > MAX_STORED_DIGITS:
        raise OutOfRange(
            f"Numeral has {len(significant)} integer digits, "
            f"no DECIMAL column holds more than {MAX_PRECISION}"
        )
    # Rounding half away from zero to any scale up to MAX_SCALE only looks at
    # the first dropped digit, so the rest of a long fraction is discarded
    frac_digits = (frac_digits or "")[: MAX_SCALE + 1]
    value = int((significant or "0") + frac_digits)
    return Fixed(-value if negative else value, len(frac_digits))


def parse_unsigned_decimal(text: str) -> tuple[Fixed, int]:
    """Parse ``digits('.'digits)?`` into a non-negative Fixed.

    Fractional digits past MAX_SCALE + 1 are dropped; they cannot change the
    result of rounding to any legal column scale.

    Args:
        text: Numeral with no sign, e.g. "094.2841"

    Returns:
        Tuple of (value, number of characters before the point). The count is
        literal: leading zeros are included.

    Raises:
        MalformedNumber: If text is empty or does not match the grammar
        OutOfRange: If the integer part, without leading zeros, is wider than
            any stored text can be
    """
    match = _UNSIGNED_RE.fullmatch(text)
    if match is None:
        raise MalformedNumber(f"Expected digits('.'digits)?, got {text!r}")
    int_digits, frac_digits = match.groups()
    return _from_digits(False, int_digits, frac_digits), len(int_digits)


def parse_signed_decimal(text: str) -> Fixed:
    """Parse an optionally signed numeral such as "-5.7159" or "+77".

    Exponents, whitespace, a bare point (".5", "5.") and non-ASCII digits are
    all rejected.

    Raises:
        MalformedNumber: If text is empty or not a signed numeral
        OutOfRange: If the integer part, without leading zeros, has more than
            MAX_PRECISION + 1 digits
    """
    match = _SIGNED_RE.fullmatch(text)
    if match is None:
        raise MalformedNumber(f"Expected a decimal numeral, got {text!r}")
    sign, int_digits, frac_digits = match.groups()
    return _from_digits(sign == "-", int_digits, frac_digits)


# =============================================================================
# Arithmetic
# =============================================================================


def add_power_of_ten(value: Fixed, exponent: int) -> Fixed:
    """Compute ``value + 10**exponent`` exactly.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"Power of ten exponent must be non-negative, got {exponent}")
    return value.add(Fixed.from_int(10**exponent))


def subtract_power_of_ten(value: Fixed, exponent: int) -> Fixed:
    """Compute ``value - 10**exponent`` exactly. Result may be negative.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"Power of ten exponent must be non-negative, got {exponent}")
    return value.sub(Fixed.from_int(10**exponent))


def round_to_scale(value: Fixed, scale: int) -> Fixed:
    """Round to exactly ``scale`` fractional digits, ties away from zero.

    Examples:
        -1.5 at scale 0 -> -2
        2.5 at scale 0 -> 3
        -1.5 at scale 4 -> -1.5000

    Args:
        value: Value to round
        scale: Number of fractional digits to keep (non-negative)

    Returns:
        Fixed with ``scale`` equal to the requested scale
    """
    if scale >= value.scale:
        return value.rescale(scale)

    divisor = 10 ** (value.scale - scale)
    quotient, remainder = divmod(abs(value.value), divisor)
    # Rounding on the magnitude keeps ties symmetric around zero
    if 2 * remainder >= divisor:
        quotient += 1
    return Fixed(-quotient if value.value < 0 else quotient, scale)


def integer_digit_count(value: Fixed) -> int:
    """Number of digits in the integer portion of ``|value|``.

    A zero integer portion (0, 0.25, -0.9) counts as one digit. Counted
    without converting to text, so integers past the interpreter's int/str
    conversion limit are fine.
    """
    integer = value.integer_part
    # bit_length * log10(2), rounded down, never overshoots the digit count
    digits = max(1, integer.bit_length() * 30102 // 100000)
    while integer >= 10**digits:
        digits += 1
    return digits


# =============================================================================
# Formatting
# =============================================================================


def format_signed(value: Fixed, scale: int) -> str:
    """Render ``value`` with exactly ``scale`` fractional digits.

    The value must already be rounded to at most ``scale`` digits. A leading
    "-" is emitted only for non-zero negatives; no point is emitted when scale
    is 0.

    Raises:
        ValueError: If value carries more fractional digits than scale
    """
    widened = value.rescale(scale)
    magnitude = abs(widened.value)
    int_part, frac_part = divmod(magnitude, 10**scale)
    sign = "-" if widened.value < 0 else ""
    if scale == 0:
        return f"{sign}{int_part}"
    return f"{sign}{int_part}.{frac_part:0{scale}d}"
