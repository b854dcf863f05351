"""
Test suite for chromarand

Contains:
- tests/unit/          : Unit tests for individual modules
"""
