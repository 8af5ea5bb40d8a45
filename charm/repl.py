"""The loops that feed lines of input to a Machine.

repl() is the interactive prompt; run_file() evaluates a file (or piped
standard input) line by line. Both report errors on the diagnostic stream
and carry on with the next line unless told otherwise.
"""

import charm
from charm.error_reporting import (
    create_lexical_error_message,
    create_runtime_error_message,
)
from charm.errors import CharmLexError, CharmRuntimeError
import charm.execute
import charm.lex
import charm.logging
import sys
from typing import Iterable, List, Optional, TextIO

_logger = charm.logging.get_logger(__name__)

prompt = '>> '


def _diagnostics(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def show_state(
    machine: charm.execute.Machine, stream: Optional[TextIO] = None
) -> None:
    stream = _diagnostics(stream)
    print('Stack:', list(machine.stack), file=stream)
    print('Defs:', machine.dictionary.user_definitions(), file=stream)


def evaluate_line(
    machine: charm.execute.Machine,
    line: str,
    line_number: int = 1,
    debug=False,
    diagnostics: Optional[TextIO] = None,
) -> bool:
    """Evaluate one line, reporting any error. Return whether it succeeded."""
    diagnostics = _diagnostics(diagnostics)
    try:
        machine.evaluate(line, line_number)
    except CharmLexError as e:
        print(f'Lexical error on line {line_number}:', file=diagnostics)
        print(create_lexical_error_message(e), file=diagnostics)
        return False
    except CharmRuntimeError as e:
        print(f'Runtime error on line {line_number}:', file=diagnostics)
        print(
            create_runtime_error_message(e, machine.stack), file=diagnostics
        )
        return False
    finally:
        if debug:
            show_state(machine, diagnostics)
    return True


def run_file(
    machine: charm.execute.Machine,
    lines: Iterable[str],
    debug=False,
    stop_on_error=False,
    diagnostics: Optional[TextIO] = None,
) -> int:
    """Evaluate each line in order and return an exit status."""
    status = 0
    for line_number, line in enumerate(lines, start=1):
        if evaluate_line(machine, line, line_number, debug, diagnostics):
            continue
        status = 1
        if stop_on_error:
            _logger.debug('stopping at line {}', line_number)
            break
    return status


def tokenize_lines(lines: Iterable[str]) -> List[charm.lex.Token]:
    """Lex lines one by one against a fresh dictionary.

    Definitions are installed as they are read, so that later lines can use
    them.
    """
    machine = charm.execute.Machine()
    tokens: List[charm.lex.Token] = []
    for line_number, line in enumerate(lines, start=1):
        tokens += machine.lex(line, line_number)
    return tokens


def print_exit_message(message: str, stream: Optional[TextIO] = None) -> None:
    print(message, file=_diagnostics(stream))


def repl(
    machine: charm.execute.Machine,
    debug=False,
    diagnostics: Optional[TextIO] = None,
) -> None:
    intro_message = 'Charm REPL (version {} on Python {}).'.format(
        charm.version, sys.version
    )
    print(intro_message)

    line_number = 0
    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print_exit_message('Bye!', diagnostics)
                return
            line_number += 1
            evaluate_line(machine, line, line_number, debug, diagnostics)
    except KeyboardInterrupt:
        # catch ctrl-c to cleanly exit
        print_exit_message('Terminated', diagnostics)
