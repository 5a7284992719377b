"""Type limit configuration for the codec."""

from dataclasses import dataclass

from sqldecimal.constants import MAX_PRECISION, MAX_SCALE


@dataclass(frozen=True)
class CodecLimits:
    """Bounds a DECIMAL(precision, scale) descriptor must respect.

    Limits can narrow the MySQL bounds (65, 30) but never widen them, so a
    deployment can refuse very wide columns without touching constants.

    Attributes:
        max_precision: Largest allowed precision (default: 65)
        max_scale: Largest allowed scale (default: 30)
    """

    max_precision: int = MAX_PRECISION
    max_scale: int = MAX_SCALE

    def __post_init__(self) -> None:
        if not 0 <= self.max_precision <= MAX_PRECISION:
            raise ValueError(
                f"max_precision must be in [0, {MAX_PRECISION}], got {self.max_precision}"
            )
        if not 0 <= self.max_scale <= MAX_SCALE:
            raise ValueError(f"max_scale must be in [0, {MAX_SCALE}], got {self.max_scale}")


# Default configuration instance
DEFAULT_LIMITS = CodecLimits()
