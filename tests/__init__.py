"""
Test suite for BigNumber

Contains:
- tests/unit/     : Unit tests for individual modules
- tests/vectors/  : Reference vectors (RSA-scale operands) and their schema
"""
