"""
Tests for Similarity Scoring
============================
Covers the square-and-sum fold, the folded similarity and the cosine
alternative.
"""

import math

import pytest

from naive_speller.config_logging import ValidationError
from naive_speller.similarity import (
    CosineSimilarity,
    FoldedSimilarity,
    fold_squares,
    get_strategy,
    shared_term,
    similarity,
    vector_magnitude,
)
from naive_speller.vectorizer import vectorize

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class TestFoldSquares:
    """Tests for the acc = acc*acc + v*v fold."""

    def test_empty_is_zero(self):
        assert fold_squares([]) == 0.0

    def test_single_value(self):
        assert fold_squares([3]) == 9.0

    def test_accumulator_is_squared_each_step(self):
        # 0 -> 1 -> 1 + 1 = 2 -> 4 + 1 = 5
        assert fold_squares([1, 1, 1]) == 5.0
        # 0 -> 1 -> 1 + 4 = 5 -> 25 + 4 = 29
        assert fold_squares([1, 2, 2]) == 29.0

    def test_order_matters(self):
        assert fold_squares([2, 1]) == 17.0
        assert fold_squares([1, 2]) == 5.0

    def test_overflow_saturates_to_infinity(self):
        assert math.isinf(fold_squares([1] * 20))


class TestVectorMagnitude:

    def test_magnitude_of_helo(self):
        assert vector_magnitude(vectorize("helo")) == pytest.approx(math.sqrt(5))

    def test_magnitude_of_empty_vector(self):
        assert vector_magnitude({}) == 0.0


class TestSharedTerm:

    def test_only_identical_counts_are_shared(self):
        query = {"an": 2, "na": 1}
        candidate = {"an": 2, "na": 2}
        assert shared_term(query, candidate) == 4.0

    def test_no_overlap(self):
        assert shared_term(vectorize("helo"), vectorize("world")) == 0.0


class TestSimilarity:
    """Tests for the folded similarity score."""

    def test_helo_against_hello(self):
        query = vectorize("helo")
        score = similarity(query, vector_magnitude(query), "hello")
        assert score == pytest.approx(5 / (math.sqrt(26) + math.sqrt(5)))

    def test_helo_against_help(self):
        query = vectorize("helo")
        score = similarity(query, vector_magnitude(query), "help")
        assert score == pytest.approx(2 / (2 * math.sqrt(5)))

    def test_no_shared_bigrams_scores_zero(self):
        query = vectorize("helo")
        assert similarity(query, vector_magnitude(query), "world") == 0.0

    def test_both_vectors_empty_scores_zero(self):
        assert similarity({}, 0.0, "a") == 0.0

    def test_empty_query_scores_zero(self):
        assert similarity({}, 0.0, "hello") == 0.0

    @pytest.mark.parametrize("candidate", ["hello", "help", "world", "banana", "h", ""])
    def test_score_is_non_negative(self, candidate):
        query = vectorize("helo")
        assert similarity(query, vector_magnitude(query), candidate) >= 0.0

    def test_infinite_shared_term_scores_infinity(self):
        query = vectorize(ALPHABET)
        assert similarity(query, vector_magnitude(query), ALPHABET) == math.inf

    def test_infinite_denominator_scores_zero(self):
        query = vectorize(ALPHABET)
        assert similarity(query, vector_magnitude(query), "ab") == 0.0


class TestStrategies:
    """Tests for the pluggable scoring strategies."""

    def test_folded_matches_function(self):
        strategy = FoldedSimilarity()
        query = vectorize("helo")
        magnitude = strategy.magnitude(query)
        assert strategy.score(query, magnitude, "hello") == similarity(query, magnitude, "hello")

    def test_cosine_similarity(self):
        strategy = CosineSimilarity()
        query = vectorize("helo")
        magnitude = strategy.magnitude(query)
        assert strategy.score(query, magnitude, "hello") == pytest.approx(3 / (math.sqrt(3) * 2))
        assert strategy.score(query, magnitude, "help") == pytest.approx(2 / 3)

    def test_cosine_identical_words(self):
        strategy = CosineSimilarity()
        query = vectorize("banana")
        assert strategy.score(query, strategy.magnitude(query), "banana") == pytest.approx(1.0)

    def test_cosine_empty_vectors(self):
        strategy = CosineSimilarity()
        assert strategy.score({}, 0.0, "a") == 0.0

    def test_get_strategy(self):
        assert isinstance(get_strategy("folded"), FoldedSimilarity)
        assert isinstance(get_strategy("cosine"), CosineSimilarity)

    def test_get_unknown_strategy(self):
        with pytest.raises(ValidationError):
            get_strategy("levenshtein")
