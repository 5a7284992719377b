"""Tests for the DecimalType descriptor."""

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from sqldecimal.config import CodecLimits
from sqldecimal.errors import InvalidType
from sqldecimal.models.types import DecimalType


class TestDecimalTypeValidation:
    """Tests for DecimalType.new() bounds."""

    @pytest.mark.parametrize(
        "precision,scale",
        [(0, 0), (1, 0), (5, 5), (9, 2), (30, 30), (65, 0), (65, 30)],
    )
    def test_valid(self, precision: int, scale: int):
        """Legal pairs up to DECIMAL(65, 30) are accepted."""
        t = DecimalType.new(precision, scale)
        assert t.precision == precision
        assert t.scale == scale

    @pytest.mark.parametrize(
        "precision,scale",
        [(66, 0), (-1, 0), (5, -1), (5, 6), (65, 31), (31, 31), (0, 1)],
    )
    def test_invalid(self, precision: int, scale: int):
        """Out-of-bounds pairs and scale above precision are rejected."""
        with pytest.raises(InvalidType):
            DecimalType.new(precision, scale)

    def test_bool_rejected(self):
        """bool is not an integer parameter."""
        with pytest.raises(InvalidType):
            DecimalType.new(True, 0)  # type: ignore[arg-type]

    def test_string_rejected(self):
        """Parameters are not coerced from text."""
        with pytest.raises(InvalidType):
            DecimalType.new("10", 2)  # type: ignore[arg-type]

    def test_message_names_type(self):
        """The error names the requested type."""
        with pytest.raises(InvalidType) as exc_info:
            DecimalType.new(5, 6)
        assert "DECIMAL(5, 6)" in str(exc_info.value)
        assert "cannot exceed precision" in str(exc_info.value)

    def test_constructor_raises_validation_error(self):
        """Direct construction reports pydantic errors; new() translates them."""
        with pytest.raises(ValidationError):
            DecimalType(precision=70, scale=0)

    def test_invalid_type_is_value_error(self):
        """InvalidType is a ValueError."""
        with pytest.raises(ValueError):
            DecimalType.new(70, 0)

    def test_narrower_limits(self):
        """CodecLimits can tighten the bounds."""
        limits = CodecLimits(max_precision=38, max_scale=10)
        assert DecimalType.new(38, 10, limits).precision == 38
        with pytest.raises(InvalidType):
            DecimalType.new(39, 0, limits)
        with pytest.raises(InvalidType):
            DecimalType.new(20, 11, limits)


class TestDecimalTypeDerived:
    """Tests for derived constants and rendering."""

    def test_max_integer_digits(self):
        """max_integer_digits is P - S."""
        assert DecimalType.new(9, 2).max_integer_digits == 7

    def test_canonical_width(self):
        """canonical_width is P - S + 1."""
        assert DecimalType.new(9, 2).canonical_width == 8
        assert DecimalType.new(3, 3).canonical_width == 1

    def test_str(self):
        """str renders Decimal(P, S)."""
        assert str(DecimalType.new(65, 30)) == "Decimal(65, 30)"

    def test_to_sql(self):
        """to_sql renders DECIMAL(P,S)."""
        assert DecimalType.new(10, 2).to_sql() == "DECIMAL(10,2)"

    def test_frozen(self):
        """DecimalType is immutable."""
        t = DecimalType.new(9, 2)
        with pytest.raises(ValidationError):
            t.scale = 3  # type: ignore[misc]

    def test_equality_and_hash(self):
        """Equal pairs compare and hash alike."""
        assert DecimalType.new(9, 2) == DecimalType.new(9, 2)
        assert DecimalType.new(9, 2) != DecimalType.new(9, 3)
        assert len({DecimalType.new(9, 2), DecimalType.new(9, 2)}) == 1


class TestDecimalTypeParams:
    """Tests for the schema parameter map round trip."""

    def test_to_params(self):
        """Parameters are written as decimal text."""
        assert DecimalType.new(10, 2).to_params() == {"prec": "10", "scale": "2"}

    def test_from_params(self):
        """Parameters are read back from text."""
        assert DecimalType.from_params({"prec": "10", "scale": "2"}) == DecimalType.new(10, 2)

    def test_params_round_trip(self):
        """to_params and from_params are inverses."""
        t = DecimalType.new(48, 22)
        assert DecimalType.from_params(t.to_params()) == t

    def test_missing_key(self):
        """A missing key names the key."""
        with pytest.raises(InvalidType) as exc_info:
            DecimalType.from_params({"prec": "10"})
        assert "scale" in str(exc_info.value)

    def test_non_integer(self):
        """Non-numeric parameter text is InvalidType."""
        with pytest.raises(InvalidType):
            DecimalType.from_params({"prec": "ten", "scale": "2"})

    def test_illegal_pair(self):
        """Parsed parameters are still bounds-checked."""
        with pytest.raises(InvalidType):
            DecimalType.from_params({"prec": "2", "scale": "3"})

    def test_bad_params_logged_at_debug(self):
        """Unparseable parameters are logged at debug before raising."""
        with capture_logs() as logs:
            with pytest.raises(InvalidType):
                DecimalType.from_params({"prec": "x", "scale": "2"})
        assert logs[0]["event"] == "decimal_params_not_integer"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["raw_precision"] == "x"

    def test_missing_params_logged_at_debug(self):
        """A missing key is logged at debug, never as a warning."""
        with capture_logs() as logs:
            with pytest.raises(InvalidType):
                DecimalType.from_params({"prec": "10"})
        assert [log["log_level"] for log in logs] == ["debug"]
        assert logs[0]["event"] == "decimal_params_missing"
