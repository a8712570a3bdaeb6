"""
Speller Flask Routes
====================
API endpoints for word suggestions and text checking.

The checker instance is read from ``current_app.extensions['naive_speller']``;
see app.create_app().
"""

import time
from functools import wraps
from flask import Blueprint, current_app, g, jsonify, request

from .config_logging import SpellerError, ValidationError, get_logger
from .metadata import TextMetadataAnalyzer

logger = get_logger('naive_speller.routes')

speller_blueprint = Blueprint('naive_speller', __name__, url_prefix='/api/speller')

EXTENSION_KEY = 'naive_speller'


# =============================================================================
# STANDARDIZED ERROR HANDLING DECORATOR
# =============================================================================

def handle_speller_errors(f):
    """
    Decorator for standardized API error handling in speller routes.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        start_time = time.time()
        try:
            result = f(*args, **kwargs)

            elapsed = time.time() - start_time
            if elapsed > 5.0:
                logger.warning(f"Slow speller API call: {f.__name__} took {elapsed:.1f}s")

            return result

        except ValidationError as e:
            logger.warning(f"Validation error in {f.__name__}: {e}")
            return jsonify({
                'success': False,
                'error': {
                    'code': e.code,
                    'message': e.message,
                    'correlation_id': getattr(g, 'correlation_id', 'unknown')
                }
            }), e.status_code
        except SpellerError as e:
            logger.error(f"Speller error in {f.__name__}: {e}")
            return jsonify({
                'success': False,
                'error': {
                    'code': e.code,
                    'message': e.message,
                    'correlation_id': getattr(g, 'correlation_id', 'unknown')
                }
            }), e.status_code
        except Exception as e:
            logger.exception(f"Unexpected error in {f.__name__}: {e}")
            return jsonify({
                'success': False,
                'error': {
                    'code': 'INTERNAL_ERROR',
                    'message': 'An unexpected error occurred',
                    'correlation_id': getattr(g, 'correlation_id', 'unknown')
                }
            }), 500

    return decorated


@speller_blueprint.before_request
def assign_correlation_id():
    g.correlation_id = request.headers.get('X-Correlation-ID') or logger.new_correlation_id()


# =============================================================================
# HELPERS
# =============================================================================

def _get_checker():
    checker = current_app.extensions.get(EXTENSION_KEY)
    if checker is None:
        raise SpellerError("Spell checker is not configured", code="NOT_CONFIGURED")
    return checker


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _suggestion_count(data: dict, checker) -> int:
    n = data.get('n', checker.config.suggestions_count)
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValidationError("n must be an integer", field='n')
    return n


def _required_string(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string", field=key)
    return value


# =============================================================================
# ROUTES
# =============================================================================

@speller_blueprint.route('/health', methods=['GET'])
@handle_speller_errors
def health():
    """Dictionary sizes and active scoring strategy."""
    checker = _get_checker()
    return jsonify({
        'success': True,
        'data': {
            'dictionary_size': len(checker.dictionary),
            'stop_words_size': len(checker.stop_words),
            'scoring': checker.ranker.strategy.NAME,
            'tokenization': checker.config.tokenization,
        }
    })


@speller_blueprint.route('/suggest', methods=['POST'])
@handle_speller_errors
def suggest():
    """
    Suggest dictionary words for a single word.

    Request JSON:
        word: The word to look up
        n: Optional number of suggestions
    """
    checker = _get_checker()
    data = _json_body()
    word = _required_string(data, 'word')
    n = _suggestion_count(data, checker)

    suggestions = checker.find_closest_words(word, n)
    logger.debug("Suggestions computed", word=word, count=len(suggestions))

    return jsonify({
        'success': True,
        'data': {
            'word': word,
            'suggestions': suggestions,
        }
    })


@speller_blueprint.route('/check', methods=['POST'])
@handle_speller_errors
def check():
    """
    Check a block of text.

    Request JSON:
        text: Text to check, tokenized per the checker configuration
        n: Optional number of suggestions per misspelled word
    """
    checker = _get_checker()
    data = _json_body()
    text = _required_string(data, 'text')
    n = _suggestion_count(data, checker)

    reports = checker.check_text(text, n)
    metadata = TextMetadataAnalyzer(checker).analyze_lines(text.splitlines())

    return jsonify({
        'success': True,
        'data': {
            'misspellings': [r.to_dict() for r in reports],
            'metadata': metadata.to_dict(),
        }
    })
