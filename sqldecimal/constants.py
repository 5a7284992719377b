"""Constants for the DECIMAL storage codec.

Centralizes the MySQL-compatible type limits and the names used when type
parameters travel through schema metadata.
"""

# MySQL DECIMAL limits: at most 65 significant digits, at most 30 after the point
MAX_PRECISION = 65
MAX_SCALE = 30

# Widest integer part of canonical stored text: DECIMAL(65, 0) plus the bias digit
MAX_STORED_DIGITS = MAX_PRECISION + 1

# Keys used when type parameters travel through schema metadata
PARAM_PRECISION = "prec"
PARAM_SCALE = "scale"

# Environment variable controlling the structlog level
LOG_LEVEL_ENV = "SQLDECIMAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
