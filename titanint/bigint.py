"""
Arbitrary-Precision Integer Value Type

TitanInt pairs a canonical decimal magnitude with a sign flag. Values are
immutable: every operator returns a new TitanInt, so compound assignment
simply rebinds the name. Division and modulus truncate toward zero, and the
remainder takes the sign of the dividend.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple, Union

from .config import get_config
from .digits import (
    Digits, ZERO_DIGITS, ONE_DIGITS,
    add_magnitudes, compare_magnitudes, digits_from_int, digits_from_text,
    digits_to_int, digits_to_text, divmod_magnitudes, is_zero_magnitude,
    multiply_magnitudes, strip_high_zeros, subtract_magnitudes,
)
from .exceptions import DivisionByZero, InvalidFormat
from .logging_config import get_logger, log_action

logger = get_logger("titanint.bigint")

INT64_MIN_VALUE = -(2 ** 63)
INT64_MAX_VALUE = 2 ** 63 - 1

_TOKEN_PATTERN = re.compile(r'([+-]?)([0-9]+)')

Operand = Union['TitanInt', int]


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class TitanInt:
    """
    Immutable signed integer of unbounded size.

    ``digits`` holds the magnitude least significant digit first and
    ``negative`` is true only for values strictly below zero. Both are
    canonicalized on construction, so two equal numbers always have equal
    fields.
    """
    digits: Digits = ZERO_DIGITS
    negative: bool = False

    def __post_init__(self):
        digits = tuple(self.digits)
        for d in digits:
            if isinstance(d, bool) or not isinstance(d, int):
                raise TypeError(f"TitanInt digits must be ints, got {type(d).__name__}")
            if not 0 <= d <= 9:
                raise ValueError(f"TitanInt digit {d} is not in 0..9")

        canonical = strip_high_zeros(digits)
        object.__setattr__(self, 'digits', canonical)
        object.__setattr__(self, 'negative', bool(self.negative) and not is_zero_magnitude(canonical))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> 'TitanInt':
        """
        Build a TitanInt from a native int.

        Args:
            value: Any Python int (bool is rejected)

        Returns:
            Canonical TitanInt with the same numeric value

        Raises:
            TypeError: If value is not an int
            OverflowError: If strict_int64 is configured and value lies
                outside the signed 64-bit range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"TitanInt.from_int() requires an int, got {type(value).__name__}")

        if get_config().strict_int64 and not INT64_MIN_VALUE <= value <= INT64_MAX_VALUE:
            raise OverflowError(f"{value} is outside the signed 64-bit range")

        return cls(digits_from_int(-value if value < 0 else value), value < 0)

    of = from_int

    @classmethod
    def parse(cls, text: str) -> 'TitanInt':
        """
        Parse a decimal token of the form ``[+|-]digit+``.

        Leading zeros are dropped and ``-0`` becomes zero. Whitespace is not
        trimmed.

        Raises:
            TypeError: If text is not a str
            InvalidFormat: If text is empty, a bare sign, contains a
                non-digit after the sign, or exceeds max_digits
        """
        if not isinstance(text, str):
            raise TypeError(f"TitanInt.parse() requires a str, got {type(text).__name__}")

        match = _TOKEN_PATTERN.fullmatch(text)
        if match is None:
            if not text:
                raise _invalid(text, "empty input")
            if text in ("+", "-"):
                raise _invalid(text, "sign without digits")
            raise _invalid(text, "non-digit character")

        sign, body = match.groups()

        max_digits = get_config().max_digits
        if max_digits is not None and len(body) > max_digits:
            raise _invalid(text, f"more than {max_digits} digits")

        return cls(digits_from_text(body), sign == '-')

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def sign(self) -> bool:
        """True only if the value is strictly negative"""
        return self.negative

    @property
    def magnitude(self) -> str:
        """Absolute value as a most-significant-first digit string"""
        return digits_to_text(self.digits)

    def is_zero(self) -> bool:
        """Check if value is exactly zero"""
        return is_zero_magnitude(self.digits)

    def is_positive(self) -> bool:
        """Check if value is strictly positive"""
        return not self.negative and not self.is_zero()

    def is_negative(self) -> bool:
        """Check if value is strictly negative"""
        return self.negative

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Canonical decimal rendering, '-' prefixed only for negative values"""
        if self.negative:
            return '-' + self.magnitude
        return self.magnitude

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TitanInt('{self.to_string()}')"

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)

    def __int__(self) -> int:
        value = digits_to_int(self.digits)
        return -value if self.negative else value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # consistent with equality against plain ints
        return hash(int(self))

    # ------------------------------------------------------------------
    # Unary operators
    # ------------------------------------------------------------------

    def __neg__(self) -> 'TitanInt':
        return TitanInt(self.digits, not self.negative)

    def __pos__(self) -> 'TitanInt':
        return self

    def __abs__(self) -> 'TitanInt':
        return TitanInt(self.digits, False)

    def increment(self) -> 'TitanInt':
        """Value plus one"""
        return self + ONE

    def decrement(self) -> 'TitanInt':
        """Value minus one"""
        return self - ONE

    # ------------------------------------------------------------------
    # Additive engine
    # ------------------------------------------------------------------

    def _add(self, other: 'TitanInt') -> 'TitanInt':
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        if self.negative != other.negative:
            return self._subtract(-other)
        return TitanInt(add_magnitudes(self.digits, other.digits), self.negative)

    def _subtract(self, other: 'TitanInt') -> 'TitanInt':
        if other.is_zero():
            return self
        if self.is_zero():
            return -other
        if self.negative != other.negative:
            return self._add(-other)

        order = compare_magnitudes(self.digits, other.digits)
        if order == 0:
            return ZERO
        if order > 0:
            return TitanInt(subtract_magnitudes(self.digits, other.digits), self.negative)
        # operands swapped to keep the minuend larger, so the sign flips
        return TitanInt(subtract_magnitudes(other.digits, self.digits), not self.negative)

    def __add__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("add", self, other, self._add(other))

    def __radd__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("add", other, self, other._add(self))

    def __sub__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("subtract", self, other, self._subtract(other))

    def __rsub__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("subtract", other, self, other._subtract(self))

    # ------------------------------------------------------------------
    # Multiplicative engine
    # ------------------------------------------------------------------

    def _multiply(self, other: 'TitanInt') -> 'TitanInt':
        # zero products lose their sign in __post_init__
        return TitanInt(multiply_magnitudes(self.digits, other.digits), self.negative != other.negative)

    def __mul__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("multiply", self, other, self._multiply(other))

    def __rmul__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("multiply", other, self, other._multiply(self))

    # ------------------------------------------------------------------
    # Division / modulus engine
    # ------------------------------------------------------------------

    def _divmod(self, other: 'TitanInt', operation: str) -> Tuple['TitanInt', 'TitanInt']:
        if other.is_zero():
            log_action(
                logger, "debug", f"{operation.capitalize()} by zero rejected",
                action=operation, extra={"dividend": self.to_string()}
            )
            raise DivisionByZero(operation)

        quotient, remainder = divmod_magnitudes(self.digits, other.digits)
        return (
            TitanInt(quotient, self.negative != other.negative),
            TitanInt(remainder, self.negative),
        )

    def __truediv__(self, other: Operand) -> 'TitanInt':
        """Quotient truncated toward zero"""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("divide", self, other, self._divmod(other, "division")[0])

    def __rtruediv__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("divide", other, self, other._divmod(self, "division")[0])

    def __mod__(self, other: Operand) -> 'TitanInt':
        """Remainder of truncating division; takes the dividend's sign"""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("modulus", self, other, self._divmod(other, "modulus")[1])

    def __rmod__(self, other: Operand) -> 'TitanInt':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("modulus", other, self, other._divmod(self, "modulus")[1])

    def __divmod__(self, other: Operand) -> Tuple['TitanInt', 'TitanInt']:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("divmod", self, other, self._divmod(other, "divmod"))

    def __rdivmod__(self, other: Operand) -> Tuple['TitanInt', 'TitanInt']:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _traced("divmod", other, self, other._divmod(self, "divmod"))

    # ------------------------------------------------------------------
    # Relational layer
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.negative == other.negative and self.digits == other.digits

    def __lt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self.negative != other.negative:
            return self.negative

        order = compare_magnitudes(self.digits, other.digits)
        if self.negative:
            # larger magnitude means smaller value below zero
            return order > 0
        return order < 0


def _coerce(value) -> Optional[TitanInt]:
    # operands are never range-checked; strict_int64 only guards from_int()
    if isinstance(value, TitanInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return TitanInt(digits_from_int(-value if value < 0 else value), value < 0)
    return None


def _invalid(text: str, reason: str) -> InvalidFormat:
    log_action(
        logger, "debug", f"Rejected integer token: {reason}",
        action="parse", extra={"token": text}
    )
    return InvalidFormat(text, reason)


def _traced(operation: str, left: TitanInt, right: TitanInt, result):
    if get_config().trace_operations:
        if isinstance(result, tuple):
            rendered = "(" + ", ".join(r.to_string() for r in result) + ")"
        else:
            rendered = result.to_string()
        log_action(
            logger, "debug", f"{operation} -> {rendered}",
            action=operation,
            extra={
                "left": left.to_string(),
                "right": right.to_string(),
                "result": rendered,
            }
        )
    return result


def parse(text: str) -> TitanInt:
    """Parse a decimal token; see TitanInt.parse"""
    return TitanInt.parse(text)


ZERO = TitanInt(ZERO_DIGITS, False)
ONE = TitanInt(ONE_DIGITS, False)
INT64_MIN = TitanInt.from_int(INT64_MIN_VALUE)
INT64_MAX = TitanInt.from_int(INT64_MAX_VALUE)
