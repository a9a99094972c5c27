"""
Test suite for pdf-reference-vectors

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
