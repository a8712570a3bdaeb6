"""
Report Writer
=============
Streams one line per misspelled token to a text sink.

Line format::

    Suggestions for the correction of helo: [hello, help]
"""

from typing import Sequence, TextIO

from .config_logging import DEFAULT_REPORT_LABEL


def format_line(label: str, word: str, suggestions: Sequence[str]) -> str:
    """Render one report line without the trailing newline."""
    return f"{label} {word}: [{', '.join(suggestions)}]"


class Reporter:
    """Writes report lines and flushes after each one."""

    def __init__(self, sink: TextIO, label: str = DEFAULT_REPORT_LABEL):
        self.sink = sink
        self.label = label
        self.lines_written = 0

    def report(self, word: str, suggestions: Sequence[str]):
        self.sink.write(format_line(self.label, word, suggestions) + '\n')
        self.sink.flush()
        self.lines_written += 1
