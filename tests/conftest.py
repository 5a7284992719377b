"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from sqldecimal.models.types import DecimalType

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def money_type() -> DecimalType:
    """DECIMAL(9, 2): seven integer digits, cents."""
    return DecimalType.new(9, 2)


@pytest.fixture
def integer_type() -> DecimalType:
    """DECIMAL(5, 0): no fractional digits."""
    return DecimalType.new(5, 0)


@pytest.fixture
def widest_type() -> DecimalType:
    """DECIMAL(65, 30): the largest legal type."""
    return DecimalType.new(65, 30)


@pytest.fixture
def fraction_only_type() -> DecimalType:
    """DECIMAL(3, 3): no integer digits at all."""
    return DecimalType.new(3, 3)
