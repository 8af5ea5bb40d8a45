from charm.errors import StackUnderflowError
import charm.logging
from typing import List

_logger = charm.logging.get_logger(__name__)


class Stack(List[int]):
    """The data stack. The top of the stack is the end of the list."""

    def __init__(self, name: str = 'stack', should_log=False) -> None:
        super().__init__()
        self._name = name
        self._should_log = should_log

    def push(self, value: int) -> None:
        self.append(value)
        self._should_log and _logger.debug(
            '{} :: after push: {}', self._name, list(self)
        )

    def pop_operands(self, count: int) -> List[int]:
        """Remove the top count values and return them, deepest first.

        If there are fewer than count values, the stack is left alone.
        """
        if len(self) < count:
            raise StackUnderflowError(count, len(self))
        operands = self[len(self) - count :]
        del self[len(self) - count :]
        self._should_log and _logger.debug(
            '{} :: after pop: {}', self._name, list(self)
        )
        return operands

    def peek(self) -> int:
        if not self:
            raise StackUnderflowError(1, 0)
        return self[-1]

