"""Shared fixtures for speller tests."""

import pytest

from naive_speller import NaiveSpellChecker, SpellerConfig, reset_config


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> SpellerConfig:
    """Quiet configuration with default engine settings."""
    return SpellerConfig(log_to_console=False)


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / 'dictionary.txt'
    path.write_text("hello\nworld\nhelp\n", encoding='utf-8')
    return path


@pytest.fixture
def stop_words_file(tmp_path):
    path = tmp_path / 'stopwords.txt'
    path.write_text("the\nteh\n", encoding='utf-8')
    return path


@pytest.fixture
def checker(dictionary_file, stop_words_file, config) -> NaiveSpellChecker:
    return NaiveSpellChecker(dictionary_file, stop_words_file, config)
