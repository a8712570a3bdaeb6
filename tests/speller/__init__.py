"""
Speller Tests Package
=====================
Test suite for the naive_speller package.

Run all tests: python3 -m pytest tests/speller/ -v
Run specific: python3 -m pytest tests/speller/test_ranker.py -v
"""
