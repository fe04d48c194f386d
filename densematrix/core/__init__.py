"""
Core matrix model, numerical primitives, and invariants.

This module contains the foundational building blocks of densematrix:
the Matrix value type, the determinant/cofactor engine, the error
taxonomy, and input contracts.
"""
