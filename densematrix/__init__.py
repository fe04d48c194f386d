"""
densematrix: dense real-valued matrices without external linear-algebra dependencies.

Submodules:
    core.domain: Matrix value type and tolerance configuration
    core.math: numerical safeguards, Gaussian elimination, cofactors
    core.contracts: row-list input contract
    core.errors: error taxonomy
"""

__version__ = "0.1.0"

from densematrix.core.domain import DEFAULT_TOLERANCES, Matrix, MatrixTolerances
from densematrix.core.errors import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    MatrixErrorKind,
    NotSquareError,
    RowsContractError,
    ShapeMismatchError,
    SingularMatrixError,
)
from densematrix.core.math import EliminationResult

__all__ = [
    "__version__",
    # Model
    "Matrix",
    "MatrixTolerances",
    "DEFAULT_TOLERANCES",
    "EliminationResult",
    # Errors
    "MatrixError",
    "MatrixErrorKind",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    "RowsContractError",
]
