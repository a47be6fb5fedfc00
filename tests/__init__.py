"""
Test suite for fractalcomplex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
