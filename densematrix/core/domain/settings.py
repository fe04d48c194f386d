"""
MatrixTolerances — Конфигурация численных порогов

Immutable Pydantic модель с толерантностями, которые принимают
determinant / elimination_report / inverse_matrix. Все изменения
конфигурации должны создавать новый экземпляр.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from densematrix.core.math.numerical_safeguards import (
    EPS_MATRIX_COMPARE,
    EPS_PIVOT,
    validate_tolerance,
)


class MatrixTolerances(BaseModel):
    """
    Толерантности матричных вычислений.

    compare_eps используется при поэлементном сравнении матриц,
    pivot_eps — при детекции нулевого ведущего элемента: порог относительный,
    ведущий элемент столбца k нулевой, если |pivot| <= pivot_eps × max|a(i, k)|.
    """

    compare_eps: float = Field(
        default=EPS_MATRIX_COMPARE,
        gt=0,
        description="Абсолютная толерантность сравнения элементов",
    )
    pivot_eps: float = Field(
        default=EPS_PIVOT,
        gt=0,
        description="Относительный порог вырожденности ведущего элемента (к масштабу столбца)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("compare_eps", "pivot_eps")
    @classmethod
    def validate_finite(cls, v: float, info: ValidationInfo) -> float:
        """Толерантность должна быть конечной (Inf отвергается)."""
        validate_tolerance(v, info.field_name)
        return v


# Глобальный экземпляр по умолчанию
DEFAULT_TOLERANCES = MatrixTolerances()
