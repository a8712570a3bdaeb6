"""
Bigram Vectorizer
=================
Converts a token into a mapping of adjacent-character pairs to counts.
"""

from typing import Dict, List

BigramVector = Dict[str, int]


def bigrams(token: str) -> List[str]:
    """Overlapping two-character substrings, in order of position."""
    # Positions 0 .. len-2 so the last character ends the final bigram.
    return [token[i:i + 2] for i in range(len(token) - 1)]


def vectorize(token: str) -> BigramVector:
    """
    Build the bigram frequency vector of a token.

    Keys keep first-occurrence order. For tokens of length >= 2 the counts
    sum to len(token) - 1; shorter tokens give an empty vector.
    """
    vector: BigramVector = {}
    for pair in bigrams(token):
        vector[pair] = vector.get(pair, 0) + 1
    return vector
