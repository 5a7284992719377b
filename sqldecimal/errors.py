"""Error classes for the DECIMAL storage codec.

Every failure the codec can report is a DecimalCodecError. None of them are
retried or logged here; the storage layer turns them into column conversion
failures.
"""


class DecimalCodecError(ValueError):
    """Base error for decimal type and codec operations."""

    pass


class InvalidType(DecimalCodecError):
    """Precision/scale pair violates 0 <= scale <= precision <= 65, scale <= 30."""

    pass


class MalformedNumber(DecimalCodecError):
    """Text is empty, non-numeric, or does not match digits('.'digits)?."""

    pass


class UnsupportedInput(DecimalCodecError):
    """Scalar kind cannot be coerced to an exact decimal."""

    pass


class OutOfRange(DecimalCodecError):
    """Value has more integer digits than precision - scale after rounding."""

    pass
