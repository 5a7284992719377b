"""Order-preservation self-check for the DECIMAL codec.

Encodes a batch of values for one column type and confirms that sorting the
stored text gives the same order as sorting the numbers, that every stored
text has the canonical width, and that every value decodes back to itself
(after rounding to the column scale).
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import Decimal

import structlog

from sqldecimal.codec import coerce_scalar, decode, encode
from sqldecimal.math.fixed_point import Fixed, round_to_scale
from sqldecimal.models.types import DecimalType

logger = structlog.get_logger()


@dataclass(frozen=True)
class OrderViolation:
    """A value (or pair of values) the codec mishandled.

    Attributes:
        kind: "round_trip", "width" or "order"
        value: The offending value, rounded to the column scale
        stored: Its stored text
        other: Neighbouring value for "order" violations
        detail: Human-readable description
    """

    kind: str
    value: Decimal
    stored: str
    other: Decimal | None = None
    detail: str = ""


def sample_values(decimal_type: DecimalType, count: int, seed: int = 0) -> list[Decimal]:
    """Boundary values plus ``count`` random values representable in decimal_type.

    Boundaries are zero, the smallest step (10^-S) and the largest magnitude
    (10^(P-S) - 10^-S), each with both signs.
    """
    scale = decimal_type.scale
    largest = 10**decimal_type.precision - 1
    # DECIMAL(0, 0) only holds zero
    step = 1 if largest > 0 else 0
    coefficients = {0, step, -step, largest, -largest}

    rng = random.Random(seed)
    for _ in range(count):
        # Pick a digit count first so short and long values are equally likely
        digits = rng.randint(0, decimal_type.precision)
        coefficients.add(rng.randrange(-(10**digits) + 1, 10**digits))

    return [Fixed(coefficient, scale).to_decimal() for coefficient in sorted(coefficients)]


def check_sort_order(decimal_type: DecimalType, values: list[object]) -> list[OrderViolation]:
    """Encode values and report every ordering, width or round-trip failure.

    Args:
        decimal_type: Column type to check
        values: Scalars accepted by encode(); all must fit the column

    Returns:
        Violations found (empty when the codec behaves)

    Raises:
        DecimalCodecError: If a value cannot be encoded at all
    """
    violations: list[OrderViolation] = []
    encoded: list[tuple[Decimal, str]] = []

    for raw in values:
        stored = encode(raw, decimal_type)
        expected = round_to_scale(coerce_scalar(raw), decimal_type.scale).to_decimal()

        int_width = len(stored.partition(".")[0])
        if int_width != decimal_type.canonical_width:
            violations.append(
                OrderViolation(
                    kind="width",
                    value=expected,
                    stored=stored,
                    detail=f"integer part has {int_width} digits, "
                    f"expected {decimal_type.canonical_width}",
                )
            )

        decoded = decode(stored, decimal_type)
        if decoded != expected:
            violations.append(
                OrderViolation(
                    kind="round_trip",
                    value=expected,
                    stored=stored,
                    detail=f"decoded to {decoded}",
                )
            )

        encoded.append((expected, stored))

    encoded.sort(key=lambda pair: pair[0])
    for (value_a, stored_a), (value_b, stored_b) in zip(encoded, encoded[1:], strict=False):
        numeric = (value_a > value_b) - (value_a < value_b)
        textual = (stored_a > stored_b) - (stored_a < stored_b)
        if numeric != textual:
            violations.append(
                OrderViolation(
                    kind="order",
                    value=value_a,
                    stored=stored_a,
                    other=value_b,
                    detail=f"{stored_a!r} vs {stored_b!r}",
                )
            )

    logger.debug(
        "sort_order_checked",
        decimal_type=str(decimal_type),
        values=len(encoded),
        violations=len(violations),
    )
    return violations
