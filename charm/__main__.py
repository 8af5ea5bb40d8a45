"""The Charm Implementation."""

import argparse
import charm.error_reporting
import charm.errors
import charm.execute
import charm.lex
import charm.logging
import charm.repl
import json
import sys
from typing import IO, AnyStr, Callable, List, Optional


def file_type(mode: str) -> Callable[[str], IO[AnyStr]]:
    """Create a file object, treating '-' as standard input."""

    def func(name: str) -> IO[AnyStr]:
        if name == '-':
            return sys.stdin
        return open(name, mode=mode, encoding='utf-8')

    return func


arg_parser = argparse.ArgumentParser(
    prog='charm', description='Run a Charm program.'
)
arg_parser.add_argument(
    'file',
    nargs='?',
    type=file_type('r'),
    default=sys.stdin,
    help='file to run',
)
arg_parser.add_argument(
    '--debug',
    action='store_true',
    default=False,
    help='print the stack and definitions to stderr after each line',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs and errors',
)
arg_parser.add_argument(
    '--tokenize',
    action='store_true',
    default=False,
    help=(
        'tokenize input from the given file and print the tokens as a JSON '
        'array'
    ),
)
arg_parser.add_argument(
    '--stop-on-error',
    action='store_true',
    default=False,
    help='stop at the first line that fails instead of carrying on',
)


def batch_main(args: argparse.Namespace) -> int:
    machine = charm.execute.Machine(should_log_stack=args.verbose)
    try:
        return charm.repl.run_file(
            machine, args.file, args.debug, args.stop_on_error
        )
    except Exception:
        print('An internal error has occurred.', file=sys.stderr)
        print('This is a bug in Charm.', file=sys.stderr)
        raise
    finally:
        args.file.close()


def tokenize_main(args: argparse.Namespace) -> int:
    try:
        tokens = charm.repl.tokenize_lines(args.file)
    except charm.errors.CharmLexError as e:
        print('Lexical error:', file=sys.stderr)
        print(
            charm.error_reporting.create_lexical_error_message(e),
            file=sys.stderr,
        )
        return 1
    finally:
        args.file.close()
    json.dump(tokens, sys.stdout, cls=charm.lex.TokenEncoder)
    print()
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = arg_parser.parse_args(argv)
    charm.logging.configure(args.verbose)

    if args.tokenize:
        sys.exit(tokenize_main(args))
    # interactive mode
    if args.file.isatty():
        charm.repl.repl(
            charm.execute.Machine(should_log_stack=args.verbose), args.debug
        )
        sys.exit()
    sys.exit(batch_main(args))


if __name__ == '__main__':
    main()
