"""
Test suite for rref-matrix

Contains:
- tests/unit/          : Unit tests for individual modules
"""
