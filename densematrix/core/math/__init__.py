"""
Core math modules для densematrix

Численные примитивы и движок определителя/алгебраических дополнений,
работающие с плоскими буферами строк list[list[float]].
"""

# Numerical Safeguards
from densematrix.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_MATRIX_COMPARE,
    EPS_PIVOT,
    # Epsilon comparisons
    is_close_abs,
    is_valid_float,
    is_zero,
    # Validation
    validate_dimension,
    validate_index,
    validate_square,
    validate_tolerance,
)

# Elimination (Gaussian, partial pivoting)
from densematrix.core.math.elimination import (
    EliminationResult,
    determinant,
    eliminate,
    raw_rearrange,
)

# Cofactors
from densematrix.core.math.cofactors import (
    cofactor_rows,
    minor_rows,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_MATRIX_COMPARE",
    "EPS_PIVOT",
    # Numerical Safeguards — Epsilon comparisons
    "is_close_abs",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — Validation
    "validate_dimension",
    "validate_index",
    "validate_square",
    "validate_tolerance",
    # Elimination — Types
    "EliminationResult",
    # Elimination — Functions
    "determinant",
    "eliminate",
    "raw_rearrange",
    # Cofactors — Functions
    "cofactor_rows",
    "minor_rows",
]
