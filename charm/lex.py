"""The Charm lexer.

Lexing needs the live dictionary: every word is resolved to a number, a
definition, or a keyword as soon as it is read, and `: name body ;` blocks
are installed into the dictionary as soon as their `;` is read.
"""

from __future__ import annotations
from charm.dictionary import Definition, Dictionary
from charm.errors import (
    MissingDefinitionNameError,
    UnterminatedDefinitionError,
    WordNotDefinedError,
)
from charm.location import Location
import charm.logging
import charm.stdlib.arithmetic
import dataclasses
import enum
import json
import parsy
import re
from typing import Iterator, List, Literal, Optional

_logger = charm.logging.get_logger(__name__)

START_DEFINITION = ':'
END_DEFINITION = ';'


class Keyword(enum.Enum):
    IF = 'if'
    ELSE = 'else'
    THEN = 'then'
    DO = 'do'


@dataclasses.dataclass(frozen=True)
class NumberToken:
    value: int
    start: Location = dataclasses.field(default=(1, 0), compare=False)
    type: Literal['number'] = dataclasses.field(default='number', init=False)


@dataclasses.dataclass(frozen=True)
class OpToken:
    """A word resolved to the definition it had when it was lexed."""

    name: str
    definition: Definition
    start: Location = dataclasses.field(default=(1, 0), compare=False)
    type: Literal['op'] = dataclasses.field(default='op', init=False)


@dataclasses.dataclass(frozen=True)
class KeywordToken:
    keyword: Keyword
    start: Location = dataclasses.field(default=(1, 0), compare=False)
    type: Literal['keyword'] = dataclasses.field(
        default='keyword', init=False
    )


type Token = NumberToken | OpToken | KeywordToken


class TokenEncoder(json.JSONEncoder):
    """Extension of the default JSON Encoder that supports tokens."""

    def default(self, obj):
        if isinstance(obj, NumberToken):
            return {'type': obj.type, 'value': obj.value, 'start': obj.start}
        if isinstance(obj, OpToken):
            return {
                'type': obj.type,
                'name': obj.name,
                'definition': obj.definition.type,
                'start': obj.start,
            }
        if isinstance(obj, KeywordToken):
            return {
                'type': obj.type,
                'keyword': obj.keyword.value,
                'start': obj.start,
            }
        return super().default(obj)


def _in_range(number: int) -> parsy.Parser:
    if charm.stdlib.arithmetic.fits(number):
        return parsy.success(number)
    return parsy.fail('signed 64-bit integer')


integer_literal = (
    parsy.regex(r'[+-]?[0-9]+').map(int).bind(_in_range).desc('integer')
)
keyword = (
    parsy.string_from(*(k.value for k in Keyword))
    .map(Keyword)
    .desc('keyword')
)


def _parse_word(parser: parsy.Parser, word: str) -> Optional[object]:
    try:
        return parser.parse(word)
    except parsy.ParseError:
        return None


def tokenize(
    code: str, dictionary: Dictionary, line: int = 1
) -> List[Token]:
    lexer = Lexer(dictionary)
    lexer.input(code, line)
    tokens = []
    while True:
        token = lexer.token()
        if token is None:
            break
        tokens.append(token)
    return tokens


class Lexer:
    """Lexes the input given to input() against a dictionary.

    Use token() to get the next token. Definitions are written into the
    dictionary as they are lexed.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        self.data: str
        self.line: int
        self._token_iterator: Iterator[Token]

    def input(self, data: str, line: int = 1) -> None:
        """Initialize the Lexer object with the data to tokenize."""
        self.data = data
        self.line = line
        self._token_iterator = self._tokens()

    def token(self) -> Optional[Token]:
        """Return the next token, or None at the end of the input."""
        return next(self._token_iterator, None)

    def _tokens(self) -> Iterator[Token]:
        definition_start: Optional[Location] = None
        definition_words: List[str] = []
        for match in re.finditer(r'\S+', self.data):
            word, location = match.group(), (self.line, match.start())
            if definition_start is not None:
                if word != END_DEFINITION:
                    definition_words.append(word)
                    continue
                self._define(definition_words, definition_start)
                definition_start, definition_words = None, []
                continue

            number = _parse_word(integer_literal, word)
            found_keyword = _parse_word(keyword, word)
            if number is not None:
                yield NumberToken(number, location)
            elif word in self.dictionary:
                yield OpToken(word, self.dictionary[word], location)
            elif found_keyword is not None:
                yield KeywordToken(found_keyword, location)
            elif word == START_DEFINITION:
                definition_start = location
            else:
                raise WordNotDefinedError(word, location, self.data)

        if definition_start is not None:
            name = definition_words[0] if definition_words else None
            raise UnterminatedDefinitionError(
                name, definition_start, self.data
            )

    def _define(self, words: List[str], start: Location) -> None:
        if not words:
            raise MissingDefinitionNameError(None, start, self.data)
        name, *body = words
        definition = self.dictionary.define(name, ' '.join(body))
        _logger.debug('defined {!r} as {!r}', name, definition)
