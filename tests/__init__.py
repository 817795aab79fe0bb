"""
Test suite for vectorspace

Contains:
- tests/unit/          : Unit tests and hypothesis property tests for the capability laws
"""
