"""
Naive Speller
=============
Version: 1.0.0

Dictionary-driven spell checking for document proofing:
- Flags words absent from a dictionary and a stop-word list
- Suggests replacements ranked by character-bigram vector similarity
- Streams a line-per-word report, or serves suggestions over Flask

No external services; everything runs in-process.
"""

from . import config_logging
from .checker import NaiveSpellChecker
from .config_logging import (
    SpellerConfig,
    SpellerError,
    SourceReadError,
    ValidationError,
    get_config,
    reset_config,
)
from .detector import MisspellingDetector
from .models import MisspellingReport, ScoredCandidate, TextMetadata
from .normalizer import normalize_lines, normalize_token
from .ranker import Ranker
from .reporter import Reporter
from .similarity import CosineSimilarity, FoldedSimilarity, SimilarityStrategy, similarity
from .vectorizer import vectorize

__version__ = config_logging.__version__
__all__ = [
    'NaiveSpellChecker',
    'SpellerConfig',
    'SpellerError',
    'SourceReadError',
    'ValidationError',
    'get_config',
    'reset_config',
    'MisspellingDetector',
    'MisspellingReport',
    'ScoredCandidate',
    'TextMetadata',
    'normalize_lines',
    'normalize_token',
    'Ranker',
    'Reporter',
    'CosineSimilarity',
    'FoldedSimilarity',
    'SimilarityStrategy',
    'similarity',
    'vectorize',
]
