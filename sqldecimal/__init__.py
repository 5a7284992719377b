"""Order-preserving fixed-point DECIMAL storage codec."""

from sqldecimal.codec import decode, encode, format_text, is_valid, parse_text
from sqldecimal.errors import (
    DecimalCodecError,
    InvalidType,
    MalformedNumber,
    OutOfRange,
    UnsupportedInput,
)
from sqldecimal.models import DecimalType

__version__ = "0.1.0"
__all__ = [
    "DecimalType",
    "encode",
    "decode",
    "parse_text",
    "format_text",
    "is_valid",
    "DecimalCodecError",
    "InvalidType",
    "MalformedNumber",
    "UnsupportedInput",
    "OutOfRange",
    "__version__",
]
