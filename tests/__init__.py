"""
Test suite for measureconv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
