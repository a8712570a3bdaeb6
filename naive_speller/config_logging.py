#!/usr/bin/env python3
"""
Naive Speller Configuration & Logging Module
============================================
Centralized configuration, structured logging, and error types.

Configuration can be set via:
1. Config file (SPELLER_CONFIG_FILE=/path/to/speller.json)
2. Environment variables (SPELLER_SUGGESTIONS=3)
3. Direct construction (SpellerConfig(scoring='cosine'))
"""

import os
import sys
import json
import logging
import uuid
import time
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Tuple, List
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

__version__ = "1.0.0"
APP_NAME = "NaiveSpeller"

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
DEFAULT_SUGGESTIONS_COUNT = 5
DEFAULT_MIN_TOKEN_LENGTH = 2
DEFAULT_REPORT_LABEL = "Suggestions for the correction of"
TOKENIZATION_MODES = ('lines', 'words')
SCORING_MODES = ('folded', 'cosine')
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5

READ_FAILURE_MESSAGE = "There is a problem with reading from this input."


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

@dataclass
class SpellerConfig:
    """Spell checker configuration."""

    # Suggestion engine
    suggestions_count: int = DEFAULT_SUGGESTIONS_COUNT
    tokenization: str = "lines"  # Options: lines, words
    scoring: str = "folded"      # Options: folded, cosine
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH

    # Reporting
    report_label: str = DEFAULT_REPORT_LABEL

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # Options: json, text
    log_to_file: bool = False
    log_to_console: bool = True
    log_dir: Path = field(default_factory=lambda: Path.cwd() / 'logs')

    def __post_init__(self):
        self.log_dir = Path(self.log_dir)
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls) -> 'SpellerConfig':
        """Load configuration from the optional config file, then environment variables."""
        values: Dict[str, Any] = {}

        config_file = os.environ.get('SPELLER_CONFIG_FILE')
        if config_file:
            values.update(_load_config_file(Path(config_file)))

        env_mappings = {
            'SPELLER_SUGGESTIONS': ('suggestions_count', int),
            'SPELLER_TOKENIZATION': ('tokenization', str),
            'SPELLER_SCORING': ('scoring', str),
            'SPELLER_MIN_TOKEN_LENGTH': ('min_token_length', int),
            'SPELLER_REPORT_LABEL': ('report_label', str),
            'SPELLER_LOG_LEVEL': ('log_level', str),
            'SPELLER_LOG_FORMAT': ('log_format', str),
            'SPELLER_LOG_TO_FILE': ('log_to_file', _parse_bool),
            'SPELLER_LOG_DIR': ('log_dir', Path),
        }
        for env_var, (key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            try:
                values[key] = converter(value)
            except ValueError as e:
                raise ValidationError(f"Invalid env var {env_var}={value}: {e}", field=key)

        return cls(**values)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate configuration and return (is_valid, errors)."""
        errors = []

        if self.tokenization not in TOKENIZATION_MODES:
            errors.append(f"Invalid tokenization: {self.tokenization}. Must be one of {TOKENIZATION_MODES}")

        if self.scoring not in SCORING_MODES:
            errors.append(f"Invalid scoring: {self.scoring}. Must be one of {SCORING_MODES}")

        if self.min_token_length < DEFAULT_MIN_TOKEN_LENGTH:
            errors.append(f"min_token_length must be at least {DEFAULT_MIN_TOKEN_LENGTH}")

        if self.log_format not in ('json', 'text'):
            errors.append(f"Invalid log_format: {self.log_format}")

        if not hasattr(logging, self.log_level.upper()):
            errors.append(f"Invalid log_level: {self.log_level}")

        return (len(errors) == 0, errors)


def _load_config_file(path: Path) -> Dict[str, Any]:
    """Read known keys from a JSON config file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ValidationError(f"Could not load config file: {e}", field='config_file')

    if not isinstance(data, dict):
        raise ValidationError("Config file must contain a JSON object", field='config_file')

    known = set(SpellerConfig.__dataclass_fields__)
    return {key: value for key, value in data.items() if key in known}


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


# Global config instance
_config: Optional[SpellerConfig] = None


def get_config() -> SpellerConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = SpellerConfig.from_env()
    return _config


def reset_config():
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Structured logger with JSON or text output and correlation IDs."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[SpellerConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            log_file = self.config.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        return getattr(cls._local, 'correlation_id', None) or str(uuid.uuid4())[:8]

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _build_log_record(self, level: str, message: str, **kwargs) -> Dict[str, Any]:
        return {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': level,
            'logger': self.name,
            'correlation_id': self.get_correlation_id(),
            'message': message,
            **kwargs
        }

    def _render(self, level: str, message: str, **kwargs) -> str:
        if self.config.log_format == 'json':
            return json.dumps(self._build_log_record(level, message, **kwargs), default=str)
        if kwargs:
            details = ' '.join(f"{k}={v}" for k, v in kwargs.items())
            return f"{message} ({details})"
        return message

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._render('DEBUG', message, **kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(self._render('INFO', message, **kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._render('WARNING', message, **kwargs))

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self.logger.error(self._render('ERROR', message, **kwargs), exc_info=exc_info)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), **context)
            raise
        duration_ms = (time.time() - start_time) * 1000
        self.info(f"{operation} completed", operation=operation, status='completed',
                  duration_ms=round(duration_ms, 2), **context)


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        try:
            log_data = json.loads(message)
        except ValueError:
            log_data = None
        if not isinstance(log_data, dict):
            log_data = {
                'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
                'level': record.levelname,
                'logger': record.name,
                'message': message,
            }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str, config: Optional[SpellerConfig] = None) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name, config or get_config())


# =============================================================================
# ERROR HANDLING
# =============================================================================

class SpellerError(Exception):
    """Base exception for the spell checker."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 status_code: int = 500, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(SpellerError):
    """Input or configuration validation error."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400,
                         details={'field': field, **kwargs})


class SourceReadError(SpellerError):
    """A dictionary, stop-word or text source could not be read."""
    def __init__(self, source: Optional[str] = None, **kwargs):
        super().__init__(READ_FAILURE_MESSAGE, code="SOURCE_READ_ERROR", status_code=500,
                         details={'source': source, **kwargs})
