"""Fuzz property tests for PropLexEngine.

This package contains:
- test_syntax_parser_property: Crash-freedom and line reader invariants
  over arbitrary and structure-dense input

Run with: pytest -m fuzz

Python 3.13+.
"""
