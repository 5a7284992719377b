"""Order-preserving text codec for DECIMAL(precision, scale) values.

Four pure operations form the boundary used by the row serializer:
- encode: domain scalar -> stored text
- decode: stored text -> Decimal
- parse_text: numeral text -> stored text
- format_text: stored text -> numeral text
"""

# Coercion
from .coercion import (
    DecimalInput,
    FloatInput,
    IntegerInput,
    ScalarInput,
    TextInput,
    classify_scalar,
    coerce_scalar,
)

# Decoding
from .decoder import decode, decode_fixed, format_text, is_valid

# Encoding
from .encoder import encode, encode_fixed, parse_text

__all__ = [
    # Codec boundary
    "encode",
    "decode",
    "parse_text",
    "format_text",
    "is_valid",
    # Fixed-level helpers
    "encode_fixed",
    "decode_fixed",
    # Input variants
    "ScalarInput",
    "IntegerInput",
    "FloatInput",
    "DecimalInput",
    "TextInput",
    "classify_scalar",
    "coerce_scalar",
]
