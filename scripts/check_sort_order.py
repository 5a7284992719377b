#!/usr/bin/env python3
"""Sort-order self-check for the DECIMAL storage codec.

Encodes boundary and random values for one or more DECIMAL(P, S) types and
verifies that stored text sorts like the numbers it encodes, has the
canonical width, and decodes back to the same value. Intended for CI after
touching anything under sqldecimal/codec or sqldecimal/math.

Usage:
    python scripts/check_sort_order.py [--type P,S ...] [--count N] [--seed N] [--verbose]

Exit codes:
    0 - No violations found
    1 - Violations found (with details printed)
"""

import argparse
import sys

import structlog

from sqldecimal import DecimalType, InvalidType
from sqldecimal.logging_config import configure_logging
from sqldecimal.verify import check_sort_order, sample_values

logger = structlog.get_logger()

# Types covered when none are given: the widths exercised by the conformance tables
DEFAULT_TYPES = ["1,0", "2,1", "4,1", "5,4", "9,2", "9,4", "26,0", "48,22", "65,30"]


def parse_type(text: str) -> DecimalType:
    """Parse "P,S" into a DecimalType."""
    try:
        precision, scale = (int(part) for part in text.split(","))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Expected P,S, got {text!r}") from err
    try:
        return DecimalType.new(precision, scale)
    except InvalidType as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def main() -> int:
    parser = argparse.ArgumentParser(description="Order-preservation check for DECIMAL storage")
    parser.add_argument(
        "--type",
        dest="types",
        action="append",
        type=parse_type,
        help="DECIMAL type as P,S (repeatable; default: a representative set)",
    )
    parser.add_argument("--count", type=int, default=500, help="Random values per type")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_logging("DEBUG" if args.verbose else None)

    types = args.types or [parse_type(text) for text in DEFAULT_TYPES]
    total = 0
    for decimal_type in types:
        values = sample_values(decimal_type, args.count, seed=args.seed)
        violations = check_sort_order(decimal_type, values)
        total += len(violations)

        logger.info(
            "decimal_type_checked",
            decimal_type=str(decimal_type),
            values=len(values),
            violations=len(violations),
        )
        for violation in violations:
            print(f"  [{violation.kind}] {decimal_type}: {violation.value} -> {violation.stored!r}")
            if violation.detail:
                print(f"    {violation.detail}")

    if total:
        print(f"❌ {total} violation(s) found")
        return 1
    print(f"✓ {len(types)} type(s) checked, no violations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
