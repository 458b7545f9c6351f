"""
Decimal Digit Sequences

Sign-free magnitude arithmetic used by TitanInt. A magnitude is a tuple of
ints in 0..9 stored least significant digit first, so every digit-wise loop
runs in natural index order and no reversal is needed afterwards.

Canonical form: never empty, and no high-order zero unless the magnitude is
the single digit zero ``(0,)``. Every function here returns canonical
magnitudes when given canonical magnitudes.
"""

from typing import List, Sequence, Tuple

from .exceptions import DivisionByZero

Digits = Tuple[int, ...]

ZERO_DIGITS: Digits = (0,)
ONE_DIGITS: Digits = (1,)


def strip_high_zeros(digits: Sequence[int]) -> Digits:
    """Drop high-order zeros, keeping a single zero for an empty or all-zero input"""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO_DIGITS
    return tuple(digits[:end])


def is_zero_magnitude(digits: Digits) -> bool:
    return digits == ZERO_DIGITS


def digits_from_text(text: str) -> Digits:
    """
    Convert a most-significant-first run of ASCII digits to a canonical magnitude.

    The caller is responsible for having validated that ``text`` holds only
    '0'-'9'.
    """
    return strip_high_zeros([ord(ch) - ord('0') for ch in reversed(text)])


def digits_to_text(digits: Digits) -> str:
    """Render a magnitude most significant digit first"""
    return ''.join(chr(ord('0') + d) for d in reversed(digits))


def digits_from_int(value: int) -> Digits:
    """Magnitude of a non-negative Python int"""
    if value < 0:
        raise ValueError(f"Magnitude requires a non-negative int, got {value}")
    result: List[int] = []
    while value:
        value, digit = divmod(value, 10)
        result.append(digit)
    return strip_high_zeros(result)


def digits_to_int(digits: Digits) -> int:
    value = 0
    for digit in reversed(digits):
        value = value * 10 + digit
    return value


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """
    Total order over two canonical magnitudes.

    Returns:
        1 if a > b, 0 if equal, -1 if a < b
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """Digit-wise sum with carry propagation"""
    result: List[int] = []
    carry = 0

    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, digit = divmod(total, 10)
        result.append(digit)

    if carry:
        result.append(carry)

    return strip_high_zeros(result)


def subtract_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Digit-wise difference ``a - b`` with borrow propagation.

    Raises:
        ValueError: If b is larger than a (the result would be negative)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("Subtrahend magnitude exceeds minuend magnitude")

    result: List[int] = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return strip_high_zeros(result)


def multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Grade-school multiplication.

    Partial products accumulate into a buffer of len(a) + len(b) positions
    indexed by the sum of the source digit positions; the carry out of each
    position is pushed into the next higher one before moving on.
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return ZERO_DIGITS

    buffer = [0] * (len(a) + len(b))

    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            carry, buffer[i + j] = divmod(buffer[i + j] + x * y + carry, 10)
        k = i + len(b)
        while carry:
            carry, buffer[k] = divmod(buffer[k] + carry, 10)
            k += 1

    return strip_high_zeros(buffer)


def shift_in_digit(digits: Digits, digit: int) -> Digits:
    """``digits * 10 + digit``"""
    if is_zero_magnitude(digits):
        return (digit,)
    return (digit,) + digits


def divmod_magnitudes(dividend: Digits, divisor: Digits) -> Tuple[Digits, Digits]:
    """
    Long division by repeated subtraction.

    The dividend is consumed most significant digit first. Each digit is
    shifted into a running remainder, then the divisor is subtracted from it
    until the remainder drops below the divisor; the number of subtractions
    (never more than 9) is the next quotient digit.

    Args:
        dividend: Magnitude being divided
        divisor: Non-zero magnitude to divide by

    Returns:
        (quotient, remainder) magnitudes

    Raises:
        DivisionByZero: If divisor is zero
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZero("division")

    if compare_magnitudes(dividend, divisor) < 0:
        return ZERO_DIGITS, dividend

    quotient: List[int] = []
    remainder = ZERO_DIGITS

    for digit in reversed(dividend):
        remainder = shift_in_digit(remainder, digit)
        count = 0
        while compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor)
            count += 1
        quotient.append(count)

    # quotient digits were produced most significant first
    quotient.reverse()
    return strip_high_zeros(quotient), remainder
