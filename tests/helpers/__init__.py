"""Test helpers module for shared test utilities.

- conformance: loaders for the JSON conformance tables
"""

from tests.helpers.conformance import (
    CONFORMANCE_DIR,
    ConformanceCase,
    case_ids,
    load_conformance_cases,
)

__all__ = [
    "CONFORMANCE_DIR",
    "ConformanceCase",
    "case_ids",
    "load_conformance_cases",
]
