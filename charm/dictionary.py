"""Word definitions and the dictionary that names them.

A definition is either native (a Python function over the stack) or a
macro: the source text of its body, tokenized again each time it runs.
"""

import dataclasses
from charm.stack import Stack
import charm.stdlib.arithmetic
import charm.stdlib.io
import charm.stdlib.shuffle_words
from typing import Dict, Literal, TextIO
from typing_extensions import Protocol


class NativeFunction(Protocol):
    def __call__(self, stack: Stack, output: TextIO) -> None:
        ...


@dataclasses.dataclass(frozen=True)
class NativeDefinition:
    name: str
    function: NativeFunction
    type: Literal['native'] = dataclasses.field(default='native', init=False)

    def __repr__(self) -> str:
        return f'Native({self.name})'


@dataclasses.dataclass(frozen=True)
class TokensDefinition:
    name: str
    body: str
    type: Literal['tokens'] = dataclasses.field(default='tokens', init=False)

    def __repr__(self) -> str:
        return f'Tokens({self.body})'


type Definition = NativeDefinition | TokensDefinition


_builtins: Dict[str, NativeFunction] = {
    '+': charm.stdlib.arithmetic.add,
    '-': charm.stdlib.arithmetic.subtract,
    '*': charm.stdlib.arithmetic.multiply,
    '/': charm.stdlib.arithmetic.divide,
    '=': charm.stdlib.arithmetic.equal,
    '<>': charm.stdlib.arithmetic.not_equal,
    '<': charm.stdlib.arithmetic.less_than,
    '>': charm.stdlib.arithmetic.greater_than,
    'dup': charm.stdlib.shuffle_words.dup,
    'drop': charm.stdlib.shuffle_words.drop,
    'swap': charm.stdlib.shuffle_words.swap,
    '.': charm.stdlib.io.print_top,
}


class Dictionary(Dict[str, Definition]):
    """Maps word names to definitions. Names are case-sensitive."""

    @classmethod
    def with_builtins(cls) -> 'Dictionary':
        dictionary = cls()
        for name, function in _builtins.items():
            dictionary[name] = NativeDefinition(name, function)
        return dictionary

    def define(self, name: str, body: str) -> TokensDefinition:
        """Install a macro, replacing any word of the same name."""
        definition = TokensDefinition(name, body)
        self[name] = definition
        return definition

    def user_definitions(self) -> Dict[str, TokensDefinition]:
        return {
            name: definition
            for name, definition in self.items()
            if isinstance(definition, TokensDefinition)
        }
