"""
Test suite for fracheap

Contains:
- tests/unit/          : Unit tests for individual modules
"""
