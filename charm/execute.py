"""This module runs lexed Charm code against a stack and a dictionary."""

from charm.dictionary import Definition, Dictionary, NativeDefinition
from charm.errors import UnbalancedConditionalError, UnsupportedKeywordError
import charm.lex
from charm.lex import Keyword, KeywordToken, NumberToken, Token
import charm.logging
from charm.stack import Stack
import sys
from typing import List, Optional, Sequence, TextIO, Union

_logger = charm.logging.get_logger(__name__)


class _Normal:
    """Tokens run as soon as they are reached."""


class _Branch:
    """An open conditional whose condition has already been popped.

    Only the side of the conditional that will run is recorded. It runs when
    the matching `then` is reached.
    """

    def __init__(self, taken: bool) -> None:
        self.taken = taken
        self.recording = taken
        self.body: List[Token] = []

    def record(self, token: Token) -> None:
        if self.recording:
            self.body.append(token)

    def otherwise(self) -> None:
        self.recording = not self.taken


class _Nested:
    """A conditional inside a branch that is being recorded or skipped.

    Its condition hasn't been computed yet, so the whole construct, keywords
    included, goes to the enclosing frame and is decided when that frame's
    body runs.
    """

    def __init__(self, enclosing: Union[_Branch, '_Nested']) -> None:
        self.enclosing = enclosing

    def record(self, token: Token) -> None:
        self.enclosing.record(token)


type _Mode = _Normal | _Branch | _Nested


class Machine:
    """Owns the stack and the dictionary, and runs code against them."""

    def __init__(
        self, output: Optional[TextIO] = None, should_log_stack=False
    ) -> None:
        self.stack = Stack('stack', should_log_stack)
        self.dictionary = Dictionary.with_builtins()
        self._output = output

    @property
    def output(self) -> TextIO:
        # sys.stdout is resolved on each call, not at construction.
        return sys.stdout if self._output is None else self._output

    def lex(self, code: str, line: int = 1) -> List[Token]:
        return charm.lex.tokenize(code, self.dictionary, line)

    def evaluate(self, code: str, line: int = 1) -> None:
        """Lex all of code, then run it.

        If lexing fails, none of the code runs.
        """
        self.exec(self.lex(code, line))

    def run(self, definition: Definition) -> None:
        if isinstance(definition, NativeDefinition):
            definition.function(self.stack, self.output)
        else:
            self.exec(self.lex(definition.body))

    def exec(self, tokens: Sequence[Token]) -> None:
        modes: List[_Mode] = [_Normal()]
        for token in tokens:
            mode = modes[-1]
            if isinstance(token, KeywordToken):
                self._exec_keyword(token, modes)
            elif isinstance(mode, _Normal):
                if isinstance(token, NumberToken):
                    self.stack.push(token.value)
                else:
                    self.run(token.definition)
            else:
                mode.record(token)
        if len(modes) > 1:
            raise UnbalancedConditionalError('"if" without matching "then"')

    def _exec_keyword(self, token: KeywordToken, modes: List[_Mode]) -> None:
        mode = modes[-1]
        keyword = token.keyword
        if keyword is Keyword.DO:
            raise UnsupportedKeywordError(keyword.value)
        if keyword is Keyword.IF:
            if isinstance(mode, _Normal):
                (condition,) = self.stack.pop_operands(1)
                _logger.debug('if: condition {}', condition)
                modes.append(_Branch(condition != 0))
            else:
                mode.record(token)
                modes.append(_Nested(mode))
        elif isinstance(mode, _Normal):
            raise UnbalancedConditionalError(
                f'"{keyword.value}" without matching "if"'
            )
        elif keyword is Keyword.ELSE:
            if isinstance(mode, _Branch):
                mode.otherwise()
            else:
                mode.record(token)
        else:
            modes.pop()
            if isinstance(mode, _Branch):
                self.exec(mode.body)
            else:
                mode.record(token)
