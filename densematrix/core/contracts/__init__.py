"""
Contract Validation Module

Модуль для валидации входных данных densematrix (списков строк).
"""

from .validators import (
    ROWS_SCHEMA,
    RowsContractValidator,
    is_valid_rows,
    validate_rows,
)

__all__ = [
    # Schema
    "ROWS_SCHEMA",
    # Classes
    "RowsContractValidator",
    # Functions
    "validate_rows",
    "is_valid_rows",
]
