"""
Speller Flask Application
=========================
Builds a Flask app serving the speller blueprint.

Run with:
    SPELLER_DICTIONARY=words.txt SPELLER_STOP_WORDS=stop.txt flask --app naive_speller.app run
"""

import os
from typing import Optional

from flask import Flask

from .checker import NaiveSpellChecker
from .config_logging import ValidationError
from .routes import EXTENSION_KEY, speller_blueprint


def create_app(checker: Optional[NaiveSpellChecker] = None) -> Flask:
    """
    Create the Flask app.

    Without an explicit checker one is built from the SPELLER_DICTIONARY and
    SPELLER_STOP_WORDS paths.
    """
    if checker is None:
        dictionary = os.environ.get('SPELLER_DICTIONARY')
        stop_words = os.environ.get('SPELLER_STOP_WORDS')
        if not dictionary or not stop_words:
            raise ValidationError(
                "SPELLER_DICTIONARY and SPELLER_STOP_WORDS must be set",
                field='dictionary'
            )
        checker = NaiveSpellChecker(dictionary, stop_words)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = checker
    app.register_blueprint(speller_blueprint)
    return app
