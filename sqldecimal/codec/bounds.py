"""Overflow check shared by the encoder and decoder.

The check always runs on the logical, already-rounded value, never on the
biased stored text.
"""

from sqldecimal.errors import OutOfRange
from sqldecimal.math.fixed_point import Fixed, integer_digit_count
from sqldecimal.models.types import DecimalType


def fits(value: Fixed, decimal_type: DecimalType) -> bool:
    """Check whether value's integer digits fit in precision - scale.

    A zero integer portion always fits. For DECIMAL(P, P) this is what lets
    magnitudes below 1 through even though they count as one integer digit.
    """
    if value.integer_part == 0:
        return True
    return integer_digit_count(value) <= decimal_type.max_integer_digits


def check_range(value: Fixed, decimal_type: DecimalType) -> None:
    """Raise OutOfRange unless value fits decimal_type.

    Raises:
        OutOfRange: If the integer portion has more than P - S digits
    """
    if not fits(value, decimal_type):
        raise OutOfRange(
            f"Value with {integer_digit_count(value)} integer digits does not fit "
            f"{decimal_type}, which allows {decimal_type.max_integer_digits}"
        )
