"""
Cofactors — Миноры и матрица алгебраических дополнений

    cofactor(i, j) = (-1)^(i+j) × det(minor(i, j))

Каждый минор считается независимо через исключение Гаусса: O(n^3) на минор,
n^2 миноров, итого O(n^4). Общего изменяемого состояния между ячейками нет.

Соглашение для 1×1: матрица алгебраических дополнений равна [[1.0]]
(минор пуст, его определитель по определению равен 1).
"""

from densematrix.core.errors import InvalidDimensionError
from densematrix.core.math.elimination import determinant
from densematrix.core.math.numerical_safeguards import EPS_PIVOT, validate_index, validate_square


def minor_rows(rows: list[list[float]], row_i: int, col_j: int) -> list[list[float]]:
    """
    Подматрица без строки row_i и столбца col_j.

    Относительный порядок оставшихся строк и столбцов сохраняется.

    Args:
        rows: Квадратный буфер строк n×n (не изменяется)
        row_i: Удаляемая строка
        col_j: Удаляемый столбец

    Returns:
        Новый буфер (n-1)×(n-1)

    Raises:
        NotSquareError: Если буфер не квадратный
        IndexOutOfRangeError: Если row_i или col_j вне [0, n)
        InvalidDimensionError: Если n == 1 (минор был бы пустым)
    """
    n = validate_square(rows)
    validate_index(row_i, n, "row_i")
    validate_index(col_j, n, "col_j")

    if n == 1:
        raise InvalidDimensionError(
            "Minor of a 1x1 matrix is empty",
            expected=">= 2",
            actual=n,
        )

    return [
        [value for j, value in enumerate(row) if j != col_j]
        for i, row in enumerate(rows)
        if i != row_i
    ]


def cofactor_rows(rows: list[list[float]], pivot_eps: float = EPS_PIVOT) -> list[list[float]]:
    """
    Матрица алгебраических дополнений.

    Args:
        rows: Квадратный буфер строк n×n (не изменяется)
        pivot_eps: Относительный порог вырожденности для определителей миноров

    Returns:
        Новый буфер n×n; для n == 1 — [[1.0]]

    Raises:
        NotSquareError: Если буфер не квадратный
    """
    n = validate_square(rows)

    if n == 1:
        return [[1.0]]

    result = []
    for i in range(n):
        cofactor_row = []
        for j in range(n):
            minor_det = determinant(minor_rows(rows, i, j), pivot_eps)
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cofactor_row.append(sign * minor_det)
        result.append(cofactor_row)

    return result
