"""
Test suite for refactoring-kata

Contains:
- tests/unit/          : Unit tests for individual modules
"""
