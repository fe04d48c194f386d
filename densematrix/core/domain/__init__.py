"""
Domain models and value objects.

Contains the Matrix value type and its tolerance configuration.
"""

from densematrix.core.domain.matrix import Matrix
from densematrix.core.domain.settings import DEFAULT_TOLERANCES, MatrixTolerances

__all__ = [
    # Settings
    "MatrixTolerances",
    "DEFAULT_TOLERANCES",
    # Matrix model
    "Matrix",
]
