from charm.errors import CharmLexError, CharmRuntimeError
from typing import Sequence


def create_lexical_error_message(error: CharmLexError) -> str:
    column = error.location[1]
    message = (
        f'Cannot tokenize at column {column + 1}: {error}\n'
        f'{error.source.rstrip()}\n'
        f'{" " * column}^'
    )
    return message


def create_runtime_error_message(
    error: CharmRuntimeError, stack: Sequence[int]
) -> str:
    return f'{error}\nStack: {list(stack)}'
