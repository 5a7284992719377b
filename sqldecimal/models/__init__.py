"""Pydantic models for DECIMAL column types."""

from sqldecimal.models.types import DecimalType

__all__ = ["DecimalType"]
