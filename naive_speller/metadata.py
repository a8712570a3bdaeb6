"""
Text Metadata
=============
Optional capability reporting summary counts for a text. Kept apart
from the suggestion engine so the checker's contract does not change
when new metadata is added.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import TextMetadata
from .sources import Source, read_lines


class MetadataProvider(ABC):
    """Produces TextMetadata for a text source."""

    @abstractmethod
    def analyze(self, text_source: Source) -> TextMetadata:
        pass


class TextMetadataAnalyzer(MetadataProvider):
    """Counts characters, words and mistakes using a NaiveSpellChecker."""

    def __init__(self, checker):
        self.checker = checker

    def analyze(self, text_source: Source) -> TextMetadata:
        return self.analyze_lines(read_lines(text_source))

    def analyze_lines(self, lines: List[str]) -> TextMetadata:
        characters = sum(1 for line in lines for char in line if not char.isspace())
        words = sum(len(line.split()) for line in lines)
        mistakes = len(self.checker.misspelled_tokens(lines))
        return TextMetadata(characters=characters, words=words, mistakes=mistakes)
