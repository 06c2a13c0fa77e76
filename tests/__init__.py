"""
Test suite for bigfraction

Contains:
- tests/unit/          : Unit tests for the math algorithms, the BigFraction model and contracts
"""
