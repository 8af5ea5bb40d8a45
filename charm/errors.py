"""Errors raised while tokenizing and running Charm code."""

from charm.location import Location
from typing import Optional


class CharmError(Exception):
    """Base class for errors in Charm programs, as opposed to bugs in Charm."""


class CharmLexError(CharmError):
    def __init__(
        self, word: Optional[str], location: Location, source: str
    ) -> None:
        super().__init__(word, location, source)
        self.word = word
        self.location = location
        self.source = source


class WordNotDefinedError(CharmLexError):
    def __str__(self) -> str:
        return f'word not defined: {self.word!r}'


class UnterminatedDefinitionError(CharmLexError):
    def __str__(self) -> str:
        if self.word is None:
            return 'definition is missing its name and closing ";"'
        return f'definition of {self.word!r} is missing its closing ";"'


class MissingDefinitionNameError(CharmLexError):
    def __str__(self) -> str:
        return 'definition has no name'


class CharmRuntimeError(CharmError):
    pass


class StackUnderflowError(CharmRuntimeError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(required, available)
        self.required = required
        self.available = available

    def __str__(self) -> str:
        return (
            f'stack underflow: needed {self.required} value(s), '
            f'found {self.available}'
        )


class DivByZeroError(CharmRuntimeError):
    def __str__(self) -> str:
        return 'attempted to divide by zero'


class IntegerOverflowError(CharmRuntimeError):
    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f'{self.value} does not fit in a signed 64-bit integer'


class UnbalancedConditionalError(CharmRuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnsupportedKeywordError(CharmRuntimeError):
    def __init__(self, keyword: str) -> None:
        super().__init__(keyword)
        self.keyword = keyword

    def __str__(self) -> str:
        return f'{self.keyword!r} is not implemented'
