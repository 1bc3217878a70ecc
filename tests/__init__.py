"""
Test suite for frame-element

Contains:
- tests/unit/          : Unit tests for individual modules
"""
