import inspect
import logging
import pathlib
import sys
from typing import Callable, Dict, List, Optional, TextIO


# QUESTION: Use a LoggingAdapter instead?
class CharmLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        # https://stackoverflow.com/a/44164714/3455228
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        caller = inspect.stack()[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)


def get_logger(name: str) -> CharmLogger:
    return CharmLogger(logging.getLogger(name))


class _CallerFormatter(logging.Formatter):
    """Reports the frame that called CharmLogger, not CharmLogger itself."""

    def format(self, record: logging.LogRecord) -> str:
        caller: Optional[inspect.FrameInfo] = getattr(record, 'caller', None)
        if caller is None:
            where = f'{record.filename}:{record.lineno}'
        else:
            where = f'{pathlib.Path(caller.filename).name}:{caller.lineno}'
        message = (
            f'{record.levelname} {record.name} ({where}): '
            f'{record.getMessage()}'
        )
        if record.exc_info:
            message += '\n' + self.formatException(record.exc_info)
        return message


def configure(verbose: bool, stream: Optional[TextIO] = None) -> None:
    """Send Charm's internal logs to stderr.

    Without verbose, only warnings and errors get through.
    """
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(_CallerFormatter())
    logger = logging.getLogger('charm')
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
