"""DECIMAL(precision, scale) type descriptor.

A descriptor is built once per column type from the schema and then shared
read-only by every encode/decode call against that column.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from sqldecimal.config import DEFAULT_LIMITS, CodecLimits
from sqldecimal.constants import MAX_PRECISION, MAX_SCALE, PARAM_PRECISION, PARAM_SCALE
from sqldecimal.errors import InvalidType

logger = structlog.get_logger()


def _describe_validation_error(err: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line message."""
    parts = []
    for error in err.errors():
        location = ".".join(str(loc) for loc in error["loc"]) or "type"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class DecimalType(BaseModel):
    """Immutable SQL DECIMAL(precision, scale) descriptor.

    Use DecimalType.new() rather than the constructor: it reports illegal
    parameters as InvalidType instead of a pydantic ValidationError.

    Attributes:
        precision: Total significant digits (0-65)
        scale: Digits after the decimal point (0-30, at most precision)
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(ge=0, le=MAX_PRECISION, strict=True)
    scale: int = Field(ge=0, le=MAX_SCALE, strict=True)

    @model_validator(mode="after")
    def _check_scale_within_precision(self) -> DecimalType:
        if self.scale > self.precision:
            raise ValueError(f"scale ({self.scale}) cannot exceed precision ({self.precision})")
        return self

    @classmethod
    def new(cls, precision: int, scale: int, limits: CodecLimits = DEFAULT_LIMITS) -> DecimalType:
        """Create a validated descriptor.

        Args:
            precision: Total significant digits
            scale: Digits after the decimal point
            limits: Bounds to enforce (default: 65 digits, scale 30)

        Returns:
            The descriptor

        Raises:
            InvalidType: If 0 <= scale <= precision <= limits.max_precision and
                scale <= limits.max_scale does not hold, or either argument is
                not an integer
        """
        try:
            descriptor = cls(precision=precision, scale=scale)
        except ValidationError as err:
            raise InvalidType(
                f"Invalid DECIMAL({precision!r}, {scale!r}): {_describe_validation_error(err)}"
            ) from err

        if descriptor.precision > limits.max_precision:
            raise InvalidType(
                f"Invalid DECIMAL({precision}, {scale}): precision exceeds {limits.max_precision}"
            )
        if descriptor.scale > limits.max_scale:
            raise InvalidType(
                f"Invalid DECIMAL({precision}, {scale}): scale exceeds {limits.max_scale}"
            )
        return descriptor

    @classmethod
    def from_params(
        cls, params: Mapping[str, str], limits: CodecLimits = DEFAULT_LIMITS
    ) -> DecimalType:
        """Create a descriptor from schema type parameters.

        Schema metadata carries type parameters as a string map, e.g.
        ``{"prec": "10", "scale": "2"}``.

        Raises:
            InvalidType: If a parameter is missing, not an integer, or the
                resulting pair is illegal
        """
        missing = [key for key in (PARAM_PRECISION, PARAM_SCALE) if key not in params]
        if missing:
            logger.debug("decimal_params_missing", missing=missing, params=dict(params))
            raise InvalidType(f"Decimal type parameters missing {', '.join(missing)}")

        raw_precision = params[PARAM_PRECISION]
        raw_scale = params[PARAM_SCALE]
        try:
            precision = int(raw_precision)
            scale = int(raw_scale)
        except (ValueError, TypeError) as err:
            logger.debug(
                "decimal_params_not_integer",
                raw_precision=raw_precision,
                raw_scale=raw_scale,
            )
            raise InvalidType(
                f"Decimal type parameters must be integers, got "
                f"{PARAM_PRECISION}={raw_precision!r}, {PARAM_SCALE}={raw_scale!r}"
            ) from err

        return cls.new(precision, scale, limits)

    def to_params(self) -> dict[str, str]:
        """Type parameters as stored in schema metadata."""
        return {PARAM_PRECISION: str(self.precision), PARAM_SCALE: str(self.scale)}

    @property
    def max_integer_digits(self) -> int:
        """Digits allowed before the decimal point (P - S)."""
        return self.precision - self.scale

    @property
    def canonical_width(self) -> int:
        """Integer-part width of every encoded value (P - S + 1).

        One digit more than max_integer_digits to make room for the bias.
        """
        return self.precision - self.scale + 1

    def to_sql(self) -> str:
        """SQL column type, e.g. DECIMAL(10,2)."""
        return f"DECIMAL({self.precision},{self.scale})"

    def __str__(self) -> str:
        return f"Decimal({self.precision}, {self.scale})"
