from charm.stack import Stack
from typing import TextIO


def print_top(stack: Stack, output: TextIO) -> None:
    """x -- x

    Unlike Forth's `.`, the value stays on the stack.
    """
    print(stack.peek(), file=output)
