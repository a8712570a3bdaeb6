"""
Naive Spell Checker
===================
Dictionary-driven spell checking with bigram-vector suggestions.

The checker loads a dictionary and a stop-word list once, then for any
text finds the tokens present in neither and suggests the closest
dictionary words.

Usage:
    checker = NaiveSpellChecker('dictionary.txt', 'stopwords.txt')
    checker.analyze('essay.txt', sys.stdout, 3)
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from .config_logging import SpellerConfig, ValidationError, get_config, get_logger
from .detector import MisspellingDetector
from .metadata import TextMetadataAnalyzer
from .models import MisspellingReport, TextMetadata
from .normalizer import filter_analyzable, normalize_lines, normalize_token
from .ranker import Ranker
from .reporter import Reporter
from .similarity import get_strategy
from .sources import Source, describe_source, open_sink, read_lines


class NaiveSpellChecker:
    """
    Spell checker backed by an immutable dictionary and stop-word set.

    Args:
        dictionary_source: Path or text stream, one word per line
        stop_words_source: Path or text stream, one word per line
        config: Optional configuration (defaults to the global config)

    Raises:
        SourceReadError: either source could not be read
        ValidationError: the configuration is invalid
    """

    def __init__(
        self,
        dictionary_source: Source,
        stop_words_source: Source,
        config: Optional[SpellerConfig] = None
    ):
        self.config = config or get_config()
        is_valid, errors = self.config.validate()
        if not is_valid:
            raise ValidationError('; '.join(errors), field='config')

        self.logger = get_logger('naive_speller.checker', self.config)

        # Word lists are always line-per-word regardless of text tokenization
        self._dictionary: FrozenSet[str] = self._load_words(dictionary_source, 'dictionary')
        self._stop_words: FrozenSet[str] = self._load_words(stop_words_source, 'stop_words')

        self.ranker = Ranker(self._dictionary, get_strategy(self.config.scoring))
        self.detector = MisspellingDetector(self._dictionary, self._stop_words)

    def _load_words(self, source: Source, kind: str) -> FrozenSet[str]:
        words = frozenset(normalize_lines(read_lines(source)))
        self.logger.info(f"Loaded {kind}", source=describe_source(source), size=len(words))
        return words

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    @property
    def stop_words(self) -> FrozenSet[str]:
        return self._stop_words

    def _resolve_count(self, suggestions_count: Optional[int]) -> int:
        if suggestions_count is None:
            return self.config.suggestions_count
        return suggestions_count

    def tokens_of(self, lines: Iterable[str]) -> Set[str]:
        """Normalized, length-filtered tokens of raw text lines."""
        tokens = normalize_lines(lines, self.config.tokenization)
        return filter_analyzable(tokens, self.config.min_token_length)

    def misspelled_tokens(self, lines: Iterable[str]) -> List[str]:
        """Misspelled tokens of raw text lines, sorted."""
        return sorted(self.detector.detect(self.tokens_of(lines)))

    def find_closest_words(self, word: str, n: int) -> List[str]:
        """Up to ``n`` dictionary words closest to ``word``, best first."""
        token = normalize_token(word)
        if len(token) < self.config.min_token_length:
            return []
        return self.ranker.rank(token, n)

    def analyze(
        self,
        text_source: Source,
        output,
        suggestions_count: Optional[int] = None,
        close_output: bool = True
    ) -> Dict[str, List[str]]:
        """
        Report suggestions for every misspelled token of a text.

        One line is written and flushed per misspelled token. Both the text
        source and the output are closed when this returns or raises, unless
        close_output is False (e.g. for sys.stdout).

        Args:
            text_source: Path or text stream to check
            output: Path or writable text stream for the report
            suggestions_count: Suggestions per word (config default if None)
            close_output: Close the output stream when done

        Returns:
            Mapping of misspelled token to its suggestions

        Raises:
            SourceReadError: the text could not be read; nothing is written
        """
        n = self._resolve_count(suggestions_count)
        results: Dict[str, List[str]] = {}

        with self.logger.log_operation('analyze', source=describe_source(text_source)):
            with open_sink(output, close=close_output) as sink:
                misspelled = self.misspelled_tokens(read_lines(text_source))
                reporter = Reporter(sink, self.config.report_label)
                for word in misspelled:
                    suggestions = self.ranker.rank(word, n)
                    results[word] = suggestions
                    reporter.report(word, suggestions)

        return results

    def check_lines(self, lines: Iterable[str], suggestions_count: Optional[int] = None) -> List[MisspellingReport]:
        """Report objects for already-read text lines, sorted by word."""
        n = self._resolve_count(suggestions_count)
        return [
            MisspellingReport(word, self.ranker.rank(word, n))
            for word in self.misspelled_tokens(lines)
        ]

    def check_text(self, text: str, suggestions_count: Optional[int] = None) -> List[MisspellingReport]:
        """In-memory variant of analyze() returning report objects."""
        return self.check_lines(text.splitlines(), suggestions_count)

    def metadata(self, text_source: Source) -> TextMetadata:
        """Character, word and mistake counts for a text."""
        return TextMetadataAnalyzer(self).analyze(text_source)
