"""
Text Stream Helpers

Reading and writing TitanInt values as whitespace-separated decimal tokens,
for drivers that move numbers through files or the console.
"""

from typing import Iterable, Iterator, TextIO

from .bigint import TitanInt


def format_value(value: TitanInt) -> str:
    """
    Canonical text for a value; the inverse of TitanInt.parse

    Raises:
        TypeError: If value is not a TitanInt
    """
    if not isinstance(value, TitanInt):
        raise TypeError(f"format_value() requires a TitanInt, got {type(value).__name__}")
    return value.to_string()


def read_values(stream: TextIO) -> Iterator[TitanInt]:
    """
    Parse every whitespace-separated token in a text stream.

    Values are yielded lazily, so a malformed token only raises once the
    reader reaches it.

    Raises:
        InvalidFormat: On the first token that is not [+|-]digits
    """
    for line in stream:
        for token in line.split():
            yield TitanInt.parse(token)


def write_values(stream: TextIO, values: Iterable[TitanInt], sep: str = "\n") -> int:
    """
    Write values in canonical form, each followed by ``sep``.

    Returns:
        Number of values written
    """
    count = 0
    for value in values:
        stream.write(format_value(value))
        stream.write(sep)
        count += 1
    return count
