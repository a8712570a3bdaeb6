"""
Suggestion Ranker
=================
Scores every dictionary word against a query and keeps the best N.
"""

from typing import AbstractSet, List, Optional

from .models import ScoredCandidate
from .similarity import FoldedSimilarity, SimilarityStrategy
from .vectorizer import vectorize


class Ranker:
    """
    Ranks dictionary words by similarity to a query token.

    Ties on score are broken by the word itself (ascending) so output is
    reproducible regardless of set iteration order.
    """

    def __init__(self, dictionary: AbstractSet[str], strategy: Optional[SimilarityStrategy] = None):
        self._dictionary = dictionary
        self.strategy = strategy or FoldedSimilarity()

    def score_all(self, query_token: str) -> List[ScoredCandidate]:
        """Every dictionary word with its score, best first."""
        query_vector = vectorize(query_token)
        query_magnitude = self.strategy.magnitude(query_vector)

        candidates = [
            ScoredCandidate(word, self.strategy.score(query_vector, query_magnitude, word))
            for word in self._dictionary
        ]
        candidates.sort(key=ScoredCandidate.sort_key)
        return candidates

    def rank(self, query_token: str, n: int) -> List[str]:
        """Top ``n`` dictionary words for the query; empty when n <= 0."""
        if n <= 0:
            return []
        return [candidate.word for candidate in self.score_all(query_token)[:n]]
