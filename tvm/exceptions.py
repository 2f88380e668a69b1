"""
Custom exceptions for TVM.

Purpose
-------
Provides a unified exception hierarchy for the calculator. Every exception
carries the short message that is reported to the user after the line
number, so callers can print ``f"line {n}: {err}"`` without translating.

Exception Hierarchy
-------------------
TVMError (base)
├── InvalidCommandError - Malformed command syntax
├── UnknownVariableError - Target is not one of n, i, PV, PMT, FV
├── DomainError - Formula precondition violated (i must be positive)
├── RangeError - ``set n`` given a non-positive or non-integral value
├── ConvergenceError - Root finder failure
└── InputReadError - The input stream could not be read

Usage
-----
>>> from tvm.exceptions import TVMError, ConvergenceError
>>>
>>> try:
...     calculator.execute(command)
... except TVMError as e:
...     print(f"line {line_number}: {e}")
"""

__all__ = [
    "TVMError",
    "InvalidCommandError",
    "UnknownVariableError",
    "DomainError",
    "RangeError",
    "ConvergenceError",
    "InputReadError",
]


class TVMError(Exception):
    """
    Base exception for all TVM errors.

    Subclasses define ``default_message``; instantiating one without
    arguments uses it, so ``str(DomainError())`` is the user-facing text.

    Examples
    --------
    >>> str(ConvergenceError())
    'solver did not converge'
    """

    default_message = "error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCommandError(TVMError):
    """
    Malformed command syntax.

    Raised for an unknown leading token, a wrong operand count, trailing
    tokens, or a value that is not a complete numeric literal.
    """

    default_message = "invalid command"


class UnknownVariableError(TVMError):
    """Target of ``set`` or ``compute`` is not a calculator variable."""

    default_message = "invalid variable name"


class DomainError(TVMError):
    """
    Formula precondition violated.

    Currently only raised when the interest rate is not strictly positive
    and is about to be divided by or used as a compounding base.
    """

    default_message = "i must be positive"


class RangeError(TVMError):
    """``set n`` received a value that is not a positive whole number."""

    default_message = "n must be a positive integer"


class ConvergenceError(TVMError):
    """
    Root finder failure.

    Raised when Newton-Raphson meets a non-finite value or a zero
    derivative, exhausts its iteration cap, or lands outside the positive
    domain. Also raised by the PMT formula when its denominator is zero.

    Examples
    --------
    >>> raise ConvergenceError()
    Traceback (most recent call last):
    ...
    tvm.exceptions.ConvergenceError: solver did not converge
    """

    default_message = "solver did not converge"


class InputReadError(TVMError):
    """The command stream raised an I/O error while being read."""

    default_message = "Error reading input"
