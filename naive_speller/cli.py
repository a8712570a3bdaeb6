#!/usr/bin/env python3
"""
Naive Speller Command Line
==========================
Checks a text against a dictionary and prints suggestions.

Examples:
    naive-speller --dictionary words.txt --stop-words stop.txt --text essay.txt -n 3
    cat essay.txt | naive-speller -d words.txt -s stop.txt --tokenization words --json
"""

import argparse
import dataclasses
import json
import sys
from typing import List, Optional

from .checker import NaiveSpellChecker
from .config_logging import SCORING_MODES, TOKENIZATION_MODES, SourceReadError, ValidationError, get_config
from .metadata import TextMetadataAnalyzer
from .sources import read_lines

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_READ_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Dictionary-driven spell checker with bigram suggestions')
    parser.add_argument('-d', '--dictionary', required=True, help='Dictionary file, one word per line')
    parser.add_argument('-s', '--stop-words', required=True, help='Stop-word file, one word per line')
    parser.add_argument('-t', '--text', help='Text file to check (default: stdin)')
    parser.add_argument('-o', '--output', help='Report file (default: stdout)')
    parser.add_argument('-n', '--suggestions', type=int, help='Suggestions per misspelled word')
    parser.add_argument('--tokenization', choices=TOKENIZATION_MODES, help='Treat each line or each word as a token')
    parser.add_argument('--scoring', choices=SCORING_MODES, help='Similarity strategy')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--metadata', action='store_true', help='Include character/word/mistake counts')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.suggestions is not None:
        overrides['suggestions_count'] = args.suggestions
    if args.tokenization:
        overrides['tokenization'] = args.tokenization
    if args.scoring:
        overrides['scoring'] = args.scoring

    try:
        config = dataclasses.replace(get_config(), **overrides)
        checker = NaiveSpellChecker(args.dictionary, args.stop_words, config)
        text_source = args.text or sys.stdin

        if args.json or args.metadata:
            lines = read_lines(text_source)
            payload = {'misspellings': [r.to_dict() for r in checker.check_lines(lines)]}
            if args.metadata:
                payload['metadata'] = TextMetadataAnalyzer(checker).analyze_lines(lines).to_dict()
            rendered = json.dumps(payload, indent=2)
            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(rendered + '\n')
            else:
                print(rendered)
        elif args.output:
            checker.analyze(text_source, args.output)
        else:
            checker.analyze(text_source, sys.stdout, close_output=False)

    except SourceReadError as e:
        print(f"Error: {e.message} ({e.details.get('source')})", file=sys.stderr)
        return EXIT_READ_FAILURE
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
