"""
Core arithmetic primitives and value types.

This package contains the arbitrary-precision integer engine: digit-level
magnitude algorithms (core.math) and the immutable BigNumber value type
built on them (core.domain). It has no I/O and no external state.
"""
