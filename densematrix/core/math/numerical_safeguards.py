"""
Numerical Safeguards — Epsilon-защиты для матричной арифметики

Модуль задаёт численные пороги и примитивы сравнения, на которые опираются
хранилище матрицы и движок определителя:
- Epsilon-параметры для сравнения матриц и выбора ведущего элемента
- Сравнения float с абсолютной толерантностью
- Проверка конечности значений (NaN/Inf не отбрасываются, только детектируются)
- Валидация размерностей и индексов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размерность матрицы всегда целое число >= 1
2. Индексы всегда в диапазоне [0, size), отрицательные индексы запрещены
3. Все сравнения детерминированы и воспроизводимы
"""

import math
from typing import Final

from densematrix.core.errors import IndexOutOfRangeError, InvalidDimensionError, NotSquareError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность поэлементного сравнения матриц
# Поглощает дрейф округления после исключения Гаусса и алгебраических дополнений
EPS_MATRIX_COMPARE: Final[float] = 1e-7

# Порог вырожденности ведущего элемента (и определителя при обращении)
# |pivot| <= EPS_PIVOT → матрица считается вырожденной
EPS_PIVOT: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_PIVOT) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    NaN никогда не считается нулём.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_PIVOT)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def is_close_abs(a: float, b: float, tol: float = EPS_MATRIX_COMPARE) -> bool:
    """
    Сравнение двух float по абсолютной разности.

    В отличие от math.isclose не использует относительную толерантность:
    матрицы сравниваются поэлементно с одним и тем же порогом.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_MATRIX_COMPARE)

    Returns:
        True если abs(a - b) <= tol

    Examples:
        >>> is_close_abs(1.0, 1.0 + 1e-9)
        True
        >>> is_close_abs(1.0, 1.001)
        False
        >>> is_close_abs(float('inf'), float('inf'))
        True
    """
    if a == b:
        # Покрывает одинаковые бесконечности, для которых a - b = NaN
        return True
    return abs(a - b) <= tol


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация, что толерантность конечна и положительна.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


# =============================================================================
# ВАЛИДАЦИЯ РАЗМЕРНОСТЕЙ И ИНДЕКСОВ
# =============================================================================


def validate_dimension(value: int, name: str) -> int:
    """
    Валидация размерности матрицы.

    Args:
        value: Количество строк или столбцов
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, если размерность допустима

    Raises:
        InvalidDimensionError: Если value не целое (bool тоже отвергается) или value <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionError(
            f"{name} must be an integer, got {type(value).__name__}",
            expected=">= 1",
            actual=value,
        )

    if value <= 0:
        raise InvalidDimensionError(
            f"{name} must be >= 1, got {value}",
            expected=">= 1",
            actual=value,
        )

    return value


def validate_index(value: int, size: int, name: str) -> int:
    """
    Валидация индекса строки или столбца.

    Индексация 0-based, без отрицательных индексов в стиле Python.

    Args:
        value: Проверяемый индекс
        size: Текущая размерность по оси
        name: Имя индекса (для сообщения об ошибке)

    Returns:
        value, если индекс в диапазоне [0, size)

    Raises:
        IndexOutOfRangeError: Если индекс не целый или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise IndexOutOfRangeError(
            f"{name} must be an integer, got {type(value).__name__}",
            expected=f"[0, {size})",
            actual=value,
        )

    if value < 0 or value >= size:
        raise IndexOutOfRangeError(
            f"{name}={value} out of range [0, {size})",
            expected=f"[0, {size})",
            actual=value,
        )

    return value


def validate_square(rows: list[list[float]]) -> int:
    """
    Валидация квадратности буфера строк.

    Args:
        rows: Буфер строк

    Returns:
        n — размер квадратного буфера

    Raises:
        NotSquareError: Если хотя бы одна строка имеет длину != количеству строк
    """
    n = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n:
            raise NotSquareError(
                f"Matrix must be square: row {i} has {len(row)} columns, expected {n}",
                expected=(n, n),
                actual=(n, len(row)),
            )
    return n
