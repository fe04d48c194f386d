"""
Иерархия исключений densematrix.

Все ошибки — нарушения предусловий: детерминированы и постоянны для данного
входа, поэтому никогда не повторяются и не подавляются внутри библиотеки.
Каждое исключение несёт вид ошибки (MatrixErrorKind) и диагностические
атрибуты с ожидаемым и фактическим значением.
"""

from enum import Enum
from typing import Any, Optional


class MatrixErrorKind(str, Enum):
    """Вид ошибки матричной операции"""

    INVALID_DIMENSION = "invalid_dimension"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    SHAPE_MISMATCH = "shape_mismatch"
    NOT_SQUARE = "not_square"
    SINGULAR_MATRIX = "singular_matrix"
    CONTRACT_VIOLATION = "contract_violation"


class MatrixError(Exception):
    """
    Базовое исключение для всех ошибок densematrix.

    Attributes:
        kind: Вид ошибки
        expected: Ожидаемое значение или форма (если применимо)
        actual: Фактическое значение или форма (если применимо)
    """

    kind: MatrixErrorKind

    def __init__(
        self,
        message: str,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidDimensionError(MatrixError, ValueError):
    """Количество строк или столбцов <= 0 (при создании, resize или миноре 1×1)."""

    kind = MatrixErrorKind.INVALID_DIMENSION


class IndexOutOfRangeError(MatrixError, IndexError):
    """Индекс элемента или минора вне текущей формы матрицы."""

    kind = MatrixErrorKind.INDEX_OUT_OF_RANGE


class ShapeMismatchError(MatrixError, ValueError):
    """Формы операндов несовместимы для поэлементной операции или умножения."""

    kind = MatrixErrorKind.SHAPE_MISMATCH


class NotSquareError(MatrixError, ValueError):
    """Определитель, алгебраические дополнения или обратная матрица для неквадратной матрицы."""

    kind = MatrixErrorKind.NOT_SQUARE


class SingularMatrixError(MatrixError, ArithmeticError):
    """
    Обращение вырожденной матрицы.

    Attributes:
        determinant: Вычисленный определитель (ноль в пределах толерантности)
    """

    kind = MatrixErrorKind.SINGULAR_MATRIX

    def __init__(self, message: str, determinant: float = 0.0):
        super().__init__(message, expected="|det| > tolerance", actual=determinant)
        self.determinant = determinant


class RowsContractError(MatrixError, ValueError):
    """
    Список строк не соответствует контракту ROWS_SCHEMA.

    Attributes:
        path: Путь до невалидного элемента (например, [1, 0])
    """

    kind = MatrixErrorKind.CONTRACT_VIOLATION

    def __init__(self, message: str, path: Optional[list] = None):
        super().__init__(message)
        self.path = path or []
