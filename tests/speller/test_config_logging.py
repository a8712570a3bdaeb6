"""
Tests for Configuration & Logging
=================================
"""

import json
import logging

import pytest

from naive_speller.config_logging import (
    DEFAULT_REPORT_LABEL,
    JsonFormatter,
    SourceReadError,
    SpellerConfig,
    SpellerError,
    StructuredLogger,
    ValidationError,
    get_config,
    reset_config,
)


class TestSpellerConfig:
    """Tests for SpellerConfig defaults, env loading and validation."""

    def test_defaults(self):
        config = SpellerConfig()
        assert config.suggestions_count == 5
        assert config.tokenization == 'lines'
        assert config.scoring == 'folded'
        assert config.min_token_length == 2
        assert config.report_label == DEFAULT_REPORT_LABEL
        assert config.validate() == (True, [])

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv('SPELLER_SUGGESTIONS', '3')
        monkeypatch.setenv('SPELLER_TOKENIZATION', 'words')
        monkeypatch.setenv('SPELLER_SCORING', 'cosine')
        monkeypatch.setenv('SPELLER_LOG_TO_FILE', 'yes')
        monkeypatch.setenv('SPELLER_LOG_DIR', str(tmp_path / 'logs'))

        config = SpellerConfig.from_env()

        assert config.suggestions_count == 3
        assert config.tokenization == 'words'
        assert config.scoring == 'cosine'
        assert config.log_to_file is True
        assert (tmp_path / 'logs').is_dir()

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv('SPELLER_SUGGESTIONS', 'many')
        with pytest.raises(ValidationError) as exc_info:
            SpellerConfig.from_env()
        assert exc_info.value.details['field'] == 'suggestions_count'

    def test_config_file_then_env(self, monkeypatch, tmp_path):
        config_file = tmp_path / 'speller.json'
        config_file.write_text(json.dumps({
            'suggestions_count': 7,
            'scoring': 'cosine',
            'unknown_key': True,
        }))
        monkeypatch.setenv('SPELLER_CONFIG_FILE', str(config_file))
        monkeypatch.setenv('SPELLER_SCORING', 'folded')

        config = SpellerConfig.from_env()

        assert config.suggestions_count == 7
        assert config.scoring == 'folded'

    def test_broken_config_file(self, monkeypatch, tmp_path):
        config_file = tmp_path / 'speller.json'
        config_file.write_text("{not json")
        monkeypatch.setenv('SPELLER_CONFIG_FILE', str(config_file))
        with pytest.raises(ValidationError):
            SpellerConfig.from_env()

    def test_validate_reports_every_problem(self):
        config = SpellerConfig(tokenization='sentences', scoring='soundex', min_token_length=0, log_format='xml')
        is_valid, errors = config.validate()
        assert not is_valid
        assert len(errors) == 4

    def test_min_token_length_has_a_floor_of_two(self):
        is_valid, errors = SpellerConfig(min_token_length=1, log_to_console=False).validate()
        assert not is_valid
        assert errors == ["min_token_length must be at least 2"]

    def test_global_config_is_cached(self, monkeypatch):
        first = get_config()
        assert get_config() is first
        monkeypatch.setenv('SPELLER_SUGGESTIONS', '9')
        reset_config()
        assert get_config().suggestions_count == 9


class TestErrors:

    def test_source_read_error(self):
        error = SourceReadError(source='words.txt')
        assert isinstance(error, SpellerError)
        assert error.to_dict() == {
            'success': False,
            'error': {
                'code': 'SOURCE_READ_ERROR',
                'message': 'There is a problem with reading from this input.',
                'details': {'source': 'words.txt'},
            }
        }

    def test_validation_error(self):
        error = ValidationError("bad n", field='n')
        assert error.status_code == 400
        assert error.details == {'field': 'n'}


class TestStructuredLogger:

    def test_text_format(self, caplog):
        config = SpellerConfig(log_to_console=False)
        logger = StructuredLogger('speller.test.text', config)
        logger.logger.propagate = True
        with caplog.at_level(logging.INFO, logger='speller.test.text'):
            logger.info("Loaded dictionary", size=3)
        assert "Loaded dictionary (size=3)" in caplog.text

    def test_json_format(self, caplog):
        config = SpellerConfig(log_to_console=False, log_format='json')
        logger = StructuredLogger('speller.test.json', config)
        logger.logger.propagate = True
        with caplog.at_level(logging.INFO, logger='speller.test.json'):
            logger.info("Loaded dictionary", size=3)
        record = json.loads(caplog.records[-1].getMessage())
        assert record['message'] == "Loaded dictionary"
        assert record['size'] == 3
        assert record['level'] == 'INFO'

    def test_log_operation_reraises(self):
        logger = StructuredLogger('speller.test.op', SpellerConfig(log_to_console=False))
        with pytest.raises(RuntimeError):
            with logger.log_operation('analyze'):
                raise RuntimeError("boom")

    def test_file_handler(self, tmp_path):
        config = SpellerConfig(log_to_console=False, log_to_file=True, log_dir=tmp_path)
        logger = StructuredLogger('speller_file', config)
        logger.warning("disk check")
        for handler in logger.logger.handlers:
            handler.flush()
        assert "disk check" in (tmp_path / 'speller_file.log').read_text(encoding='utf-8')

    def test_json_formatter_wraps_plain_messages(self):
        record = logging.LogRecord('x', logging.INFO, __file__, 1, "plain", None, None)
        data = json.loads(JsonFormatter().format(record))
        assert data['message'] == "plain"
        assert data['level'] == 'INFO'


class TestVersion:

    def test_package_version_matches_config_module(self):
        import naive_speller
        from naive_speller import config_logging
        assert naive_speller.__version__ == config_logging.__version__ == "1.0.0"
