"""Fuzz testing for datedialect.

This package contains intensive property tests for the translator and the
session output path. They are skipped unless run with ``pytest -m fuzz``.

Python 3.13+.
"""
