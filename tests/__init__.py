"""
Test suite for Integer Base Converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
