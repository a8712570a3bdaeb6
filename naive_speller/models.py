"""
Speller Models
==============
Data classes passed between the suggestion engine and its callers.
"""

import math
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass(frozen=True)
class ScoredCandidate:
    """A dictionary word paired with its similarity to the query."""
    word: str
    score: float

    def sort_key(self):
        """Score descending, then word ascending."""
        return (-self.score, self.word)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            # JSON has no infinity
            'score': self.score if math.isfinite(self.score) else None,
        }


@dataclass
class MisspellingReport:
    """
    A misspelled token and its ranked suggestions.

    Attributes:
        word: The normalized misspelled token
        suggestions: Dictionary words, best match first
    """
    word: str
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'word': self.word,
            'suggestions': list(self.suggestions),
        }


@dataclass
class TextMetadata:
    """
    Summary counts for an analyzed text.

    Attributes:
        characters: Non-whitespace characters in the text
        words: Whitespace-separated words in the text
        mistakes: Distinct misspelled tokens
    """
    characters: int = 0
    words: int = 0
    mistakes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'characters': self.characters,
            'words': self.words,
            'mistakes': self.mistakes,
        }
