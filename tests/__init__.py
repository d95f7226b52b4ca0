"""
Test suite for paintestimator

Contains:
- tests/unit/          : Unit tests for the model layer and the widgets
"""
