"""
Elimination — Определитель методом Гаусса с частичным выбором ведущего элемента

Модуль вычисляет определитель квадратного буфера строк (list[list[float]]):
- Частичный выбор ведущего элемента (raw_rearrange) по максимуму модуля в столбце
- Учёт знака перестановок строк
- Детекция вырожденности по порогу ведущего элемента
- Диагностика прохода (EliminationResult) без кэширования между вызовами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Исходный буфер никогда не изменяется (работа на приватной глубокой копии)
2. Каждая перестановка строк меняет знак на противоположный
3. |pivot| <= pivot_eps × max|a(i, k)| (масштаб исходного столбца k)
   → определитель ровно 0.0, исключение прекращается
4. NaN/Inf не перехватываются и распространяются по правилам IEEE-754

ФОРМУЛА:
    det = sign × Π work[k][k],  k = 0 … n-1
"""

import logging
from typing import NamedTuple

from densematrix.core.math.numerical_safeguards import EPS_PIVOT, is_zero, validate_square

_LOG: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class EliminationResult(NamedTuple):
    """
    Результат одного прохода исключения Гаусса.

    Attributes:
        determinant: Определитель (0.0 для вырожденной матрицы)
        sign: Накопленный знак перестановок (+1.0 или -1.0)
        swaps: Количество выполненных перестановок строк
        pivots: Ведущие элементы в порядке обработки столбцов
            (для вырожденной матрицы заканчиваются первым нулевым)
        singular: True если найден нулевой ведущий элемент
    """

    determinant: float
    sign: float
    swaps: int
    pivots: tuple[float, ...]
    singular: bool


# =============================================================================
# ВЫБОР ВЕДУЩЕГО ЭЛЕМЕНТА
# =============================================================================


def raw_rearrange(work: list[list[float]], k: int) -> float:
    """
    Частичный выбор ведущего элемента в столбце k.

    Находит строку r >= k с максимальным |work[r][k]| (при равенстве
    побеждает первая) и, если r != k, меняет строки r и k местами на месте.

    Args:
        work: Рабочий квадратный буфер (изменяется на месте)
        k: Индекс текущего столбца/строки

    Returns:
        Множитель знака: -1.0 если строки переставлены, иначе 1.0

    Examples:
        >>> work = [[1.0, 2.0], [3.0, 4.0]]
        >>> raw_rearrange(work, 0)
        -1.0
        >>> work
        [[3.0, 4.0], [1.0, 2.0]]
    """
    pivot_row = k
    pivot_abs = abs(work[k][k])

    for r in range(k + 1, len(work)):
        candidate = abs(work[r][k])
        if candidate > pivot_abs:
            pivot_row = r
            pivot_abs = candidate

    if pivot_row == k:
        return 1.0

    work[k], work[pivot_row] = work[pivot_row], work[k]
    _LOG.debug("Pivot swap: column %d, rows %d <-> %d", k, k, pivot_row)
    return -1.0


# =============================================================================
# ИСКЛЮЧЕНИЕ ГАУССА
# =============================================================================


def eliminate(rows: list[list[float]], pivot_eps: float = EPS_PIVOT) -> EliminationResult:
    """
    Исключение Гаусса с частичным выбором ведущего элемента.

    Алгоритм (для каждого столбца k = 0 … n-1):
        1. raw_rearrange: выбор строки с максимальным |work[r][k]|, r >= k
        2. |work[k][k]| <= pivot_eps × scale[k] → матрица вырождена, det = 0.0,
           где scale[k] = max_i |rows[i][k]| (порог не зависит от масштаба матрицы)
        3. Обнуление work[i][k] для i > k:
           work[i] -= (work[i][k] / work[k][k]) * work[k]

    Args:
        rows: Квадратный буфер строк (не изменяется)
        pivot_eps: Относительный порог вырожденности ведущего элемента

    Returns:
        EliminationResult с определителем и диагностикой прохода

    Raises:
        NotSquareError: Если буфер не квадратный
    """
    n = validate_square(rows)
    work = [list(row) for row in rows]
    scales = [max(abs(row[k]) for row in rows) for k in range(n)]

    sign = 1.0
    swaps = 0
    pivots: list[float] = []

    for k in range(n):
        factor = raw_rearrange(work, k)
        if factor < 0:
            sign = -sign
            swaps += 1

        pivot = work[k][k]
        pivots.append(pivot)

        threshold = pivot_eps * scales[k]
        if is_zero(pivot, threshold):
            _LOG.debug("Singular pivot at column %d: %r (threshold=%g)", k, pivot, threshold)
            return EliminationResult(
                determinant=0.0,
                sign=sign,
                swaps=swaps,
                pivots=tuple(pivots),
                singular=True,
            )

        pivot_row = work[k]
        for i in range(k + 1, n):
            row = work[i]
            ratio = row[k] / pivot
            if ratio == 0.0:
                continue
            for j in range(k, n):
                row[j] -= ratio * pivot_row[j]
            row[k] = 0.0

    det = sign
    for pivot in pivots:
        det *= pivot

    return EliminationResult(
        determinant=det,
        sign=sign,
        swaps=swaps,
        pivots=tuple(pivots),
        singular=False,
    )


def determinant(rows: list[list[float]], pivot_eps: float = EPS_PIVOT) -> float:
    """
    Определитель квадратного буфера строк.

    Для 1×1 возвращает единственный элемент (точный ноль → 0.0).

    Args:
        rows: Квадратный буфер строк (не изменяется)
        pivot_eps: Относительный порог вырожденности ведущего элемента

    Returns:
        Определитель

    Raises:
        NotSquareError: Если буфер не квадратный

    Examples:
        >>> determinant([[1.0, 2.0], [3.0, 4.0]])
        -2.0
        >>> determinant([[1.0, 2.0], [2.0, 4.0]])
        0.0
    """
    return eliminate(rows, pivot_eps).determinant
