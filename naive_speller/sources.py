"""
Line Sources
============
Opening and consuming line-oriented inputs and outputs.

A source is either a filesystem path (opened as UTF-8 and closed after
reading) or an already open text stream / iterable of lines, which is
closed once consumed. Any read failure surfaces as SourceReadError.
"""

import os
from contextlib import contextmanager
from typing import Iterable, Iterator, List, TextIO, Union

from .config_logging import SourceReadError, get_logger

logger = get_logger('naive_speller.sources')

Source = Union[str, os.PathLike, TextIO, Iterable[str]]


def describe_source(source: Source) -> str:
    """Human-readable name for log messages."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, 'name', None) or type(source).__name__


@contextmanager
def open_source(source: Source) -> Iterator[Iterable[str]]:
    """Yield an iterable of lines, closing the underlying stream on exit."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'r', encoding='utf-8') as f:
            yield f
        return

    try:
        yield source
    finally:
        close = getattr(source, 'close', None)
        if callable(close):
            close()


def read_lines(source: Source) -> List[str]:
    """
    Read every line of a source.

    Raises:
        SourceReadError: the source could not be opened or read. No partial
            result is returned.
    """
    name = describe_source(source)
    try:
        with open_source(source) as lines:
            return [line.rstrip('\r\n') for line in lines]
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read source: {e}", source=name)
        raise SourceReadError(source=name) from e


@contextmanager
def open_sink(sink: Union[str, os.PathLike, TextIO], close: bool = True) -> Iterator[TextIO]:
    """Yield a writable text stream, closing it on exit unless ``close`` is False."""
    if isinstance(sink, (str, os.PathLike)):
        with open(sink, 'w', encoding='utf-8') as f:
            yield f
        return

    try:
        yield sink
    finally:
        if close:
            sink.close()
