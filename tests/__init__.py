"""
Test suite for number-types

Contains:
- tests/unit/          : Unit tests for individual modules and invariant properties
"""
