"""
TitanInt

Exact arbitrary-precision signed integer arithmetic over a decimal digit
representation. Every value is canonical and immutable; no floating point is
ever involved.
"""

from .exceptions import TitanIntError, InvalidFormat, DivisionByZero
from .bigint import TitanInt, parse, ZERO, ONE, INT64_MIN, INT64_MAX
from .streams import format_value, read_values, write_values

__version__ = "1.0.0"

__all__ = [
    "TitanInt",
    "parse",
    "format_value",
    "read_values",
    "write_values",
    "ZERO",
    "ONE",
    "INT64_MIN",
    "INT64_MAX",
    "TitanIntError",
    "InvalidFormat",
    "DivisionByZero",
]
