"""
TitanInt Errors

Only two failures exist in the arithmetic core: malformed text handed to the
parser, and division or modulus by zero. Both are recoverable by the caller.
"""


class TitanIntError(Exception):
    """Base class for all TitanInt errors"""
    pass


class InvalidFormat(TitanIntError, ValueError):
    """
    Text could not be parsed as a decimal integer.

    The offending input is kept on ``token`` so drivers can report it back
    to the user verbatim.
    """

    def __init__(self, token, reason: str = "expected [+|-]digits"):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid integer format {token!r}: {reason}")


class DivisionByZero(TitanIntError, ZeroDivisionError):
    """Right operand of a division or modulus was zero"""

    def __init__(self, operation: str = "division"):
        self.operation = operation
        super().__init__(f"{operation.capitalize()} by zero")
