"""Shuffle words, named as in Forth."""

from charm.stack import Stack
from typing import TextIO


def dup(stack: Stack, output: TextIO) -> None:
    """x -- x x"""
    stack.push(stack.peek())


def drop(stack: Stack, output: TextIO) -> None:
    """x --"""
    stack.pop_operands(1)


def swap(stack: Stack, output: TextIO) -> None:
    """x y -- y x"""
    x, y = stack.pop_operands(2)
    stack.push(y)
    stack.push(x)
