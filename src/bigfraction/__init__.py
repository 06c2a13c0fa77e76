"""
Exact arbitrary-precision rational numbers.

The value type, its numeric algorithms (rounding, IEEE-754 and decimal
bridges, parsing, Farey navigation, narrowing) and the JSON contracts for
its external forms. Pure and immutable: no I/O, no shared state.
"""
