"""Tests for the order-preservation self-check."""

from decimal import Decimal
from unittest.mock import patch

import pytest

from sqldecimal.errors import OutOfRange
from sqldecimal.models.types import DecimalType
from sqldecimal.verify import OrderViolation, check_sort_order, sample_values


class TestSampleValues:
    """Tests for sample_values()."""

    def test_includes_boundaries(self, money_type: DecimalType):
        """Zero, one step and the extremes are always sampled."""
        values = sample_values(money_type, 0)
        assert values == [
            Decimal("-9999999.99"),
            Decimal("-0.01"),
            Decimal("0.00"),
            Decimal("0.01"),
            Decimal("9999999.99"),
        ]

    def test_deterministic_for_seed(self, money_type: DecimalType):
        """The same seed gives the same sample."""
        assert sample_values(money_type, 50, seed=1) == sample_values(money_type, 50, seed=1)

    def test_values_have_column_scale(self, money_type: DecimalType):
        """Samples carry exactly scale fractional places."""
        for value in sample_values(money_type, 20):
            assert value.as_tuple().exponent == -2

    def test_zero_precision_only_zero(self):
        """DECIMAL(0, 0) samples only zero."""
        assert sample_values(DecimalType.new(0, 0), 10) == [Decimal("0")]


class TestCheckSortOrder:
    """Tests for check_sort_order()."""

    def test_no_violations(self, money_type: DecimalType):
        """The real codec preserves order."""
        assert check_sort_order(money_type, sample_values(money_type, 100)) == []

    def test_mixed_input_kinds(self, money_type: DecimalType):
        """Ints, floats, Decimals and text can be checked together."""
        values = [3, -2.5, Decimal("0.015"), "-0.004", "12.5"]
        assert check_sort_order(money_type, values) == []

    def test_out_of_range_value_raises(self, money_type: DecimalType):
        """Values that do not fit propagate OutOfRange."""
        with pytest.raises(OutOfRange):
            check_sort_order(money_type, ["100000000"])

    def test_reports_unsortable_encoding(self, money_type: DecimalType):
        """A codec that writes a sign would break ordering; the check notices."""

        def signed_encode(raw: object, decimal_type: DecimalType) -> str:
            return f"{Decimal(str(raw)):.2f}"

        with (
            patch("sqldecimal.verify.encode", side_effect=signed_encode),
            patch("sqldecimal.verify.decode", side_effect=lambda s, t: Decimal(s)),
        ):
            violations = check_sort_order(money_type, ["-1", "-2"])

        kinds = [violation.kind for violation in violations]
        assert "order" in kinds
        assert "width" in kinds

    def test_reports_round_trip_failure(self, money_type: DecimalType):
        """A decode that returns the wrong value is reported."""
        with patch("sqldecimal.verify.decode", return_value=Decimal("1.00")):
            violations = check_sort_order(money_type, ["2"])
        assert violations == [
            OrderViolation(
                kind="round_trip",
                value=Decimal("2.00"),
                stored="10000002.00",
                detail="decoded to 1.00",
            )
        ]
