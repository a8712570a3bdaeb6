"""
Similarity Scoring
==================
Scores a dictionary word against a query token's bigram vector.

Two strategies share one interface so the Ranker never depends on the
arithmetic:

- FoldedSimilarity (default): magnitude and shared-term contribution are
  both left folds from 0 of ``acc = acc*acc + v*v``. This is not a cosine
  similarity; it rewards long runs of identically counted bigrams far more
  than a dot product would.
- CosineSimilarity: dot product over the product of Euclidean norms.

The folds run in floating point and saturate to +inf on overflow, which
happens once a vector holds about a dozen distinct bigrams.
"""

import math
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Type

from .config_logging import SCORING_MODES, ValidationError
from .vectorizer import BigramVector, vectorize


def fold_squares(values: Iterable[int]) -> float:
    """Left fold from 0 with ``acc = acc*acc + v*v``."""
    acc = 0.0
    for value in values:
        acc = acc * acc + float(value) * float(value)
    return acc


def vector_magnitude(vector: BigramVector) -> float:
    """Square root of the folded counts."""
    return math.sqrt(fold_squares(vector.values()))


def shared_term(query_vector: BigramVector, candidate_vector: BigramVector) -> float:
    """Fold the counts of (bigram, count) pairs present identically in both vectors."""
    return fold_squares(
        count for pair, count in query_vector.items()
        if candidate_vector.get(pair) == count
    )


def similarity(query_vector: BigramVector, query_magnitude: float, candidate_word: str) -> float:
    """
    Folded similarity of a candidate word to a query vector.

    Returns 0.0 when both vectors are empty. An infinite shared term gives
    +inf; an infinite denominator with a finite shared term gives 0.0.
    """
    candidate_vector = vectorize(candidate_word)
    candidate_magnitude = vector_magnitude(candidate_vector)

    denominator = candidate_magnitude + query_magnitude
    if denominator == 0:
        return 0.0

    shared = shared_term(query_vector, candidate_vector)
    if math.isinf(shared):
        return math.inf
    return shared / denominator


class SimilarityStrategy(ABC):
    """Interface for scoring a candidate word against a query vector."""

    NAME: str = "base"

    @abstractmethod
    def magnitude(self, vector: BigramVector) -> float:
        """Magnitude of a vector, computed once per query."""

    @abstractmethod
    def score(self, query_vector: BigramVector, query_magnitude: float, candidate_word: str) -> float:
        """Non-negative closeness of candidate_word to the query."""


class FoldedSimilarity(SimilarityStrategy):
    """Square-and-sum fold scoring."""

    NAME = "folded"

    def magnitude(self, vector: BigramVector) -> float:
        return vector_magnitude(vector)

    def score(self, query_vector: BigramVector, query_magnitude: float, candidate_word: str) -> float:
        return similarity(query_vector, query_magnitude, candidate_word)


class CosineSimilarity(SimilarityStrategy):
    """Standard cosine similarity over bigram counts."""

    NAME = "cosine"

    def magnitude(self, vector: BigramVector) -> float:
        return math.sqrt(sum(count * count for count in vector.values()))

    def score(self, query_vector: BigramVector, query_magnitude: float, candidate_word: str) -> float:
        candidate_vector = vectorize(candidate_word)
        candidate_magnitude = self.magnitude(candidate_vector)
        if query_magnitude == 0 or candidate_magnitude == 0:
            return 0.0

        dot = sum(count * candidate_vector.get(pair, 0) for pair, count in query_vector.items())
        return dot / (query_magnitude * candidate_magnitude)


_STRATEGIES: Dict[str, Type[SimilarityStrategy]] = {
    FoldedSimilarity.NAME: FoldedSimilarity,
    CosineSimilarity.NAME: CosineSimilarity,
}


def get_strategy(name: str) -> SimilarityStrategy:
    """Instantiate a scoring strategy by name."""
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValidationError(
            f"Unknown scoring strategy: {name}. Must be one of {SCORING_MODES}",
            field='scoring'
        ) from None
