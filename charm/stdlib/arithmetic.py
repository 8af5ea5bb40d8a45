"""Arithmetic and comparison words.

Values are signed 64-bit integers. Any result that leaves that range is an
error rather than wrapping around. A word that fails leaves its operands on
the stack.
"""

from charm.errors import DivByZeroError, IntegerOverflowError
from charm.stack import Stack
import operator
from typing import Callable, TextIO

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def fits(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def _binary(stack: Stack, operation: Callable[[int, int], int]) -> None:
    lhs, rhs = stack.pop_operands(2)
    try:
        result = operation(lhs, rhs)
        if not fits(result):
            raise IntegerOverflowError(result)
    except (DivByZeroError, IntegerOverflowError):
        stack.extend((lhs, rhs))
        raise
    stack.push(result)


def _truncating_divide(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivByZeroError()
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def add(stack: Stack, output: TextIO) -> None:
    """a b -- a+b"""
    _binary(stack, operator.add)


def subtract(stack: Stack, output: TextIO) -> None:
    """a b -- a-b"""
    _binary(stack, operator.sub)


def multiply(stack: Stack, output: TextIO) -> None:
    """a b -- a*b"""
    _binary(stack, operator.mul)


def divide(stack: Stack, output: TextIO) -> None:
    """a b -- a/b, truncated toward zero"""
    _binary(stack, _truncating_divide)


def equal(stack: Stack, output: TextIO) -> None:
    """a b -- flag"""
    _binary(stack, lambda lhs, rhs: int(lhs == rhs))


def not_equal(stack: Stack, output: TextIO) -> None:
    """a b -- flag"""
    _binary(stack, lambda lhs, rhs: int(lhs != rhs))


def less_than(stack: Stack, output: TextIO) -> None:
    """a b -- flag"""
    _binary(stack, lambda lhs, rhs: int(lhs < rhs))


def greater_than(stack: Stack, output: TextIO) -> None:
    """a b -- flag"""
    _binary(stack, lambda lhs, rhs: int(lhs > rhs))
