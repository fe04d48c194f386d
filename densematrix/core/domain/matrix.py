"""
Matrix — Плотная вещественная матрица (value type)

Модель владеет прямоугольным буфером float (list строк) и предоставляет:
- Создание: по умолчанию (1×1, ноль), по размеру (нули), копирование, перемещение
- Изменение размера с сохранением пересекающейся левой верхней области
- Доступ к элементам m[i, j] (0-based, отрицательные индексы запрещены)
- Поэлементные операции, умножение на число и на матрицу
- Транспонирование, миноры, алгебраические дополнения, определитель, обратную матрицу

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1 и cols >= 1 всегда
2. len(buffer) == rows и len(buffer[i]) == cols для каждой строки
3. Разные экземпляры никогда не разделяют буфер (и строки буфера)
4. Операции на месте валидируют операнды до изменения (нет частичной мутации)
5. Производные матрицы — всегда новые независимые экземпляры
"""

import logging
import numbers
from typing import Any, Optional, Union

from densematrix.core.contracts.validators import validate_rows
from densematrix.core.domain.settings import DEFAULT_TOLERANCES, MatrixTolerances
from densematrix.core.errors import ShapeMismatchError, SingularMatrixError
from densematrix.core.math.cofactors import cofactor_rows, minor_rows
from densematrix.core.math.elimination import EliminationResult, eliminate
from densematrix.core.math.numerical_safeguards import (
    is_close_abs,
    validate_dimension,
    validate_index,
)

_LOG: logging.Logger = logging.getLogger(__name__)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _require_real(value: Any, name: str) -> float:
    if not _is_real(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _require_matrix(value: Any, name: str) -> "Matrix":
    if not isinstance(value, Matrix):
        raise TypeError(f"{name} must be a Matrix, got {type(value).__name__}")
    return value


class Matrix:
    """
    Плотная матрица rows × cols из float.

    Индексация 0-based: m[i, j], i ∈ [0, rows), j ∈ [0, cols).

    Экземпляр изменяемый, поэтому не хешируется. Методы sum_matrix,
    sub_matrix, mul_matrix, mul_number и операторы +=, -=, *= изменяют
    матрицу на месте и возвращают self; все остальные операции возвращают
    новые экземпляры.
    """

    __slots__ = ("_rows", "_cols", "_data")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Union[int, "Matrix"] = 1, cols: Optional[int] = None):
        """
        Args:
            rows: Количество строк (>= 1) или Matrix для копирования
            cols: Количество столбцов (>= 1, default: 1); при копировании не задаётся

        Raises:
            InvalidDimensionError: Если rows или cols <= 0
            TypeError: Если cols передан вместе с Matrix
        """
        if isinstance(rows, Matrix):
            if cols is not None:
                raise TypeError("cols must not be given when copying a Matrix")
            source = rows
            self._rows = source._rows
            self._cols = source._cols
            self._data = [list(row) for row in source._data]
            return

        self._rows = validate_dimension(rows, "rows")
        self._cols = validate_dimension(1 if cols is None else cols, "cols")
        self._data = [[0.0] * self._cols for _ in range(self._rows)]

    @classmethod
    def _from_buffer(cls, data: list[list[float]]) -> "Matrix":
        # Буфер передаётся во владение без копирования
        matrix = cls.__new__(cls)
        matrix._rows = len(data)
        matrix._cols = len(data[0])
        matrix._data = data
        return matrix

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Any) -> "Matrix":
        """
        Создание матрицы из прямоугольного списка строк.

        Args:
            rows: Непустой список непустых строк с вещественными числами

        Returns:
            Новая матрица (элементы скопированы и приведены к float)

        Raises:
            RowsContractError: Если данные не соответствуют контракту строк
            ShapeMismatchError: Если строки разной длины
        """
        return cls._from_buffer(validate_rows(rows))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """
        Единичная матрица n × n.

        Raises:
            InvalidDimensionError: Если n <= 0
        """
        matrix = cls(n, n)
        for i in range(n):
            matrix._data[i][i] = 1.0
        return matrix

    def to_rows(self) -> list[list[float]]:
        """Глубокая копия буфера в виде списка строк."""
        return [list(row) for row in self._data]

    # =========================================================================
    # КОПИРОВАНИЕ И ПЕРЕМЕЩЕНИЕ
    # =========================================================================

    def copy(self) -> "Matrix":
        """Независимая глубокая копия."""
        return Matrix(self)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    def assign(self, other: "Matrix") -> "Matrix":
        """
        Копирующее присваивание: содержимое и форма other копируются в self.

        Returns:
            self
        """
        _require_matrix(other, "other")
        if other is self:
            return self

        data = [list(row) for row in other._data]
        self._rows, self._cols, self._data = other._rows, other._cols, data
        return self

    def move(self) -> "Matrix":
        """
        Передача владения буфером новой матрице.

        Исходная матрица сбрасывается в состояние по умолчанию (1×1, ноль)
        и остаётся пригодной к использованию.

        Returns:
            Новая матрица, владеющая прежним буфером self
        """
        moved = Matrix._from_buffer(self._data)
        self._rows, self._cols, self._data = 1, 1, [[0.0]]
        _LOG.debug("Moved %dx%d buffer out of matrix", moved._rows, moved._cols)
        return moved

    # =========================================================================
    # РАЗМЕРНОСТИ
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        self.set_rows(value)

    @property
    def cols(self) -> int:
        return self._cols

    @cols.setter
    def cols(self, value: int) -> None:
        self.set_cols(value)

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def get_rows(self) -> int:
        return self._rows

    def get_cols(self) -> int:
        return self._cols

    def set_rows(self, rows: int) -> None:
        """
        Изменение количества строк.

        Raises:
            InvalidDimensionError: Если rows <= 0 (матрица не изменяется)
        """
        self.resize(rows, self._cols)

    def set_cols(self, cols: int) -> None:
        """
        Изменение количества столбцов.

        Raises:
            InvalidDimensionError: Если cols <= 0 (матрица не изменяется)
        """
        self.resize(self._rows, cols)

    def resize(self, rows: int, cols: int) -> None:
        """
        Изменение формы с сохранением пересекающейся левой верхней области.

        Новые ячейки заполняются нулями, ячейки вне новых границ отбрасываются.
        Буфер заменяется только после полного заполнения нового.

        Args:
            rows: Новое количество строк
            cols: Новое количество столбцов

        Raises:
            InvalidDimensionError: Если rows или cols <= 0 (матрица не изменяется)
        """
        validate_dimension(rows, "rows")
        validate_dimension(cols, "cols")

        keep_rows = min(self._rows, rows)
        keep_cols = min(self._cols, cols)

        data = [[0.0] * cols for _ in range(rows)]
        for i in range(keep_rows):
            data[i][:keep_cols] = self._data[i][:keep_cols]

        _LOG.debug("Resize %dx%d -> %dx%d", self._rows, self._cols, rows, cols)
        self._rows, self._cols, self._data = rows, cols, data

    # =========================================================================
    # ДОСТУП К ЭЛЕМЕНТАМ
    # =========================================================================

    def _check_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, col) tuple, got {key!r}")
        i, j = key
        validate_index(i, self._rows, "row")
        validate_index(j, self._cols, "col")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        """
        Raises:
            IndexOutOfRangeError: Если индекс вне текущей формы
        """
        i, j = self._check_key(key)
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        """
        Raises:
            IndexOutOfRangeError: Если индекс вне текущей формы
            TypeError: Если value не вещественное число
        """
        i, j = self._check_key(key)
        self._data[i][j] = _require_real(value, "value")

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: Any, tolerances: Optional[MatrixTolerances] = None) -> bool:
        """
        Поэлементное сравнение с абсолютной толерантностью.

        Несовпадение формы (или не-Matrix) — False, а не ошибка.

        Args:
            other: Сравниваемая матрица
            tolerances: Пороги; используется compare_eps, максимальная
                допустимая |a(i,j) - b(i,j)| (default: DEFAULT_TOLERANCES)

        Returns:
            True если формы совпадают и все элементы близки
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False

        epsilon = (tolerances or DEFAULT_TOLERANCES).compare_eps
        return all(
            is_close_abs(a, b, epsilon)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def eq_matrix(self, other: "Matrix", tolerances: Optional[MatrixTolerances] = None) -> bool:
        return self.equals(other, tolerances)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # =========================================================================
    # ПОЭЛЕМЕНТНАЯ АРИФМЕТИКА
    # =========================================================================

    def _require_same_shape(self, other: "Matrix", operation: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"Cannot {operation} {self._rows}x{self._cols} and "
                f"{other._rows}x{other._cols} matrices",
                expected=self.shape,
                actual=other.shape,
            )

    def sum_matrix(self, other: "Matrix") -> "Matrix":
        """
        Сложение на месте.

        Raises:
            ShapeMismatchError: Если формы различаются (self не изменяется)
        """
        _require_matrix(other, "other")
        self._require_same_shape(other, "add")

        for row, other_row in zip(self._data, other._data):
            for j, value in enumerate(other_row):
                row[j] += value
        return self

    def sub_matrix(self, other: "Matrix") -> "Matrix":
        """
        Вычитание на месте.

        Raises:
            ShapeMismatchError: Если формы различаются (self не изменяется)
        """
        _require_matrix(other, "other")
        self._require_same_shape(other, "subtract")

        for row, other_row in zip(self._data, other._data):
            for j, value in enumerate(other_row):
                row[j] -= value
        return self

    def mul_number(self, number: float) -> "Matrix":
        """
        Умножение на число на месте. NaN/Inf распространяются по IEEE-754.

        Raises:
            TypeError: Если number не вещественное число
        """
        factor = _require_real(number, "number")

        for row in self._data:
            for j in range(self._cols):
                row[j] *= factor
        return self

    # =========================================================================
    # МАТРИЧНОЕ УМНОЖЕНИЕ
    # =========================================================================

    def _product(self, other: "Matrix") -> list[list[float]]:
        if self._cols != other._rows:
            raise ShapeMismatchError(
                f"Cannot multiply {self._rows}x{self._cols} by "
                f"{other._rows}x{other._cols}: columns of the left operand "
                f"must equal rows of the right one",
                expected=self._cols,
                actual=other._rows,
            )

        result = []
        for a_row in self._data:
            out_row = []
            for j in range(other._cols):
                acc = 0.0
                for k in range(self._cols):
                    acc += a_row[k] * other._data[k][j]
                out_row.append(acc)
            result.append(out_row)
        return result

    def mul_matrix(self, other: "Matrix") -> "Matrix":
        """
        Умножение на матрицу на месте: self = self × other.

        Произведение вычисляется полностью до замены буфера, поэтому
        допустимо m.mul_matrix(m) для квадратной m.

        Raises:
            ShapeMismatchError: Если self.cols != other.rows (self не изменяется)
        """
        _require_matrix(other, "other")
        data = self._product(other)
        self._rows, self._cols, self._data = len(data), len(data[0]), data
        return self

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().sum_matrix(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().sub_matrix(other)

    def __mul__(self, other: object) -> "Matrix":
        if isinstance(other, Matrix):
            return Matrix._from_buffer(self._product(other))
        if _is_real(other):
            return self.copy().mul_number(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Matrix":
        if _is_real(other):
            return self.copy().mul_number(other)
        return NotImplemented

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix._from_buffer(self._product(other))

    def __iadd__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum_matrix(other)

    def __isub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub_matrix(other)

    def __imul__(self, other: object) -> "Matrix":
        if isinstance(other, Matrix):
            return self.mul_matrix(other)
        if _is_real(other):
            return self.mul_number(other)
        return NotImplemented

    def __neg__(self) -> "Matrix":
        return self * -1.0

    # =========================================================================
    # СТРУКТУРНЫЕ ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def transpose(self) -> "Matrix":
        """Новая матрица cols × rows: result(i, j) = self(j, i)."""
        return Matrix._from_buffer([list(column) for column in zip(*self._data)])

    def create_minor(self, row_i: int, col_j: int) -> "Matrix":
        """
        Минор: матрица без строки row_i и столбца col_j.

        Args:
            row_i: Удаляемая строка
            col_j: Удаляемый столбец

        Returns:
            Новая матрица (n-1) × (n-1)

        Raises:
            NotSquareError: Если матрица не квадратная
            IndexOutOfRangeError: Если row_i или col_j вне [0, n)
            InvalidDimensionError: Если матрица 1×1 (минор пуст)
        """
        return Matrix._from_buffer(minor_rows(self._data, row_i, col_j))

    # =========================================================================
    # ОПРЕДЕЛИТЕЛЬ И ОБРАТНАЯ МАТРИЦА
    # =========================================================================

    def elimination_report(self, tolerances: Optional[MatrixTolerances] = None) -> EliminationResult:
        """
        Полная диагностика исключения Гаусса (определитель, знак, ведущие элементы).

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        tolerances = tolerances or DEFAULT_TOLERANCES
        return eliminate(self._data, tolerances.pivot_eps)

    def determinant(self, tolerances: Optional[MatrixTolerances] = None) -> float:
        """
        Определитель методом Гаусса с частичным выбором ведущего элемента.

        Матрица не изменяется. Для вырожденной матрицы возвращается ровно 0.0.

        Args:
            tolerances: Пороги (default: DEFAULT_TOLERANCES)

        Returns:
            Определитель

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        return self.elimination_report(tolerances).determinant

    def calc_complements(self, tolerances: Optional[MatrixTolerances] = None) -> "Matrix":
        """
        Матрица алгебраических дополнений.

        Для 1×1 по соглашению возвращается [[1.0]] независимо от значения
        элемента: минор 1×1 пуст, а определитель пустой матрицы равен 1.

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        tolerances = tolerances or DEFAULT_TOLERANCES
        return Matrix._from_buffer(cofactor_rows(self._data, tolerances.pivot_eps))

    def inverse_matrix(self, tolerances: Optional[MatrixTolerances] = None) -> "Matrix":
        """
        Обратная матрица через присоединённую: adj(A) / det(A).

        ФОРМУЛА:
            A^-1 = transpose(calc_complements(A)) × (1 / det(A))

        Args:
            tolerances: Пороги (default: DEFAULT_TOLERANCES)

        Returns:
            Новая матрица n × n

        Raises:
            NotSquareError: Если матрица не квадратная
            SingularMatrixError: Если исключение нашло нулевой ведущий элемент
                (|pivot| <= tolerances.pivot_eps × масштаб столбца)
        """
        tolerances = tolerances or DEFAULT_TOLERANCES
        report = self.elimination_report(tolerances)

        if report.singular:
            raise SingularMatrixError(
                f"Matrix is singular (det={report.determinant!r}), inverse is undefined",
                determinant=report.determinant,
            )

        adjugate = self.calc_complements(tolerances).transpose()
        return adjugate.mul_number(1.0 / report.determinant)

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"
