"""
Misspelling Detection
=====================
"""

from typing import AbstractSet, Iterable, Set


class MisspellingDetector:
    """Flags tokens that are neither stop words nor dictionary words."""

    def __init__(self, dictionary: AbstractSet[str], stop_words: AbstractSet[str]):
        self._dictionary = dictionary
        self._stop_words = stop_words

    def is_known(self, token: str) -> bool:
        return token in self._stop_words or token in self._dictionary

    def detect(self, tokens: Iterable[str]) -> Set[str]:
        """
        Return the tokens needing suggestions.

        Tokens shorter than two characters must already be filtered out.
        """
        return {token for token in tokens if not self.is_known(token)}
