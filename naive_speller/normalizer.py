"""
Token Normalization
===================
Turns raw lines into a set of cleaned tokens: stripped, lower-cased,
with punctuation removed except the hyphen.
"""

import re
import string
from typing import Iterable, Iterator, Set

from .config_logging import TOKENIZATION_MODES, ValidationError

# Every ASCII punctuation character except '-'
_PUNCTUATION_RE = re.compile(
    '[' + re.escape(string.punctuation.replace('-', '')) + ']'
)


def normalize_token(text: str) -> str:
    """Lower-case, drop punctuation (hyphens are kept), then strip."""
    return _PUNCTUATION_RE.sub('', text.lower()).strip()


def _units(lines: Iterable[str], tokenization: str) -> Iterator[str]:
    if tokenization == 'lines':
        yield from lines
    elif tokenization == 'words':
        for line in lines:
            yield from line.split()
    else:
        raise ValidationError(
            f"Unknown tokenization mode: {tokenization}. Must be one of {TOKENIZATION_MODES}",
            field='tokenization'
        )


def normalize_lines(lines: Iterable[str], tokenization: str = 'lines') -> Set[str]:
    """
    Normalize raw lines into a set of tokens.

    Args:
        lines: Raw text lines
        tokenization: 'lines' treats each line as one token, 'words' splits
            each line on whitespace

    Returns:
        Set of non-empty normalized tokens
    """
    tokens = set()
    for unit in _units(lines, tokenization):
        token = normalize_token(unit)
        if token:
            tokens.add(token)
    return tokens


def filter_analyzable(tokens: Iterable[str], min_length: int = 2) -> Set[str]:
    """Drop tokens too short to produce a bigram."""
    return {token for token in tokens if len(token) >= min_length}
