"""
Тесты для Matrix: транспонирование, миноры, определитель, алгебраические дополнения, обратная матрица

Проверяемые инварианты:
1. transpose(transpose(a)) == a
2. Определитель не изменяет матрицу; det(I) = 1; повторяющаяся строка → 0
3. calc_complements 1×1 → [[1]]
4. a · inverse(a) == I в пределах 1e-7
5. Вырожденная матрица → SingularMatrixError, неквадратная → NotSquareError
"""

import pytest

from densematrix import (
    EliminationResult,
    IndexOutOfRangeError,
    InvalidDimensionError,
    Matrix,
    MatrixErrorKind,
    MatrixTolerances,
    NotSquareError,
    SingularMatrixError,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def square() -> Matrix:
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def well_conditioned() -> Matrix:
    return Matrix.from_rows(
        [
            [4.0, -2.0, 1.0, 0.5],
            [3.0, 10.0, -4.0, 2.0],
            [2.0, 1.0, 8.0, -1.0],
            [0.5, -1.5, 2.0, 5.0],
        ]
    )


# =============================================================================
# ТРАНСПОНИРОВАНИЕ
# =============================================================================


class TestTranspose:
    """Тесты transpose"""

    def test_shape_and_values(self) -> None:
        """2×3 → 3×2, result(i, j) = a(j, i)"""
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.to_rows() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_double_transpose(self, well_conditioned: Matrix) -> None:
        """transpose(transpose(a)) == a"""
        assert well_conditioned.transpose().transpose() == well_conditioned

    def test_one_by_n(self) -> None:
        """Строка становится столбцом"""
        assert Matrix.from_rows([[1.0, 2.0]]).transpose().to_rows() == [[1.0], [2.0]]

    def test_result_independent(self, square: Matrix) -> None:
        """Результат не разделяет буфер"""
        t = square.transpose()
        t[0, 0] = -9.0
        assert square[0, 0] == 1.0


# =============================================================================
# МИНОРЫ
# =============================================================================


class TestCreateMinor:
    """Тесты create_minor"""

    def test_minor_zero_zero(self, square: Matrix) -> None:
        """[[1,2],[3,4]] → minor(0, 0) = [[4]]"""
        assert square.create_minor(0, 0) == Matrix.from_rows([[4.0]])

    def test_minor_three_by_three(self) -> None:
        """Порядок оставшихся элементов сохраняется"""
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
        assert m.create_minor(0, 1).to_rows() == [[4.0, 6.0], [7.0, 9.0]]

    def test_out_of_range(self, square: Matrix) -> None:
        """Индекс вне формы — IndexOutOfRangeError"""
        with pytest.raises(IndexOutOfRangeError):
            square.create_minor(2, 0)

    def test_not_square(self) -> None:
        """Неквадратная матрица — NotSquareError"""
        with pytest.raises(NotSquareError):
            Matrix(2, 3).create_minor(0, 0)

    def test_one_by_one(self) -> None:
        """Минор 1×1 нарушил бы инвариант размерности"""
        with pytest.raises(InvalidDimensionError):
            Matrix().create_minor(0, 0)


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ
# =============================================================================


class TestDeterminant:
    """Тесты determinant"""

    def test_concrete_scenario(self, square: Matrix) -> None:
        """det([[1,2],[3,4]]) = -2"""
        assert square.determinant() == pytest.approx(-2.0)

    def test_receiver_not_mutated(self, square: Matrix) -> None:
        """Определитель считается на копии"""
        square.determinant()
        assert square.to_rows() == [[1.0, 2.0], [3.0, 4.0]]

    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    def test_identity(self, n: int) -> None:
        """det(I) = 1"""
        assert Matrix.identity(n).determinant() == pytest.approx(1.0)

    def test_duplicated_row(self) -> None:
        """Повторяющаяся строка → 0"""
        m = Matrix.from_rows([[2.0, 3.0, 1.0], [4.0, 1.0, 7.0], [2.0, 3.0, 1.0]])
        assert m.determinant() == pytest.approx(0.0, abs=1e-7)

    def test_one_by_one(self) -> None:
        """1×1 — единственный элемент"""
        assert Matrix.from_rows([[-3.5]]).determinant() == -3.5

    def test_not_square(self) -> None:
        """Неквадратная матрица — NotSquareError"""
        with pytest.raises(NotSquareError) as exc_info:
            Matrix(2, 3).determinant()
        assert exc_info.value.kind is MatrixErrorKind.NOT_SQUARE

    def test_product_rule(self, square: Matrix) -> None:
        """det(a · b) = det(a) · det(b)"""
        other = Matrix.from_rows([[0.0, 1.0], [-2.0, 5.0]])
        assert (square * other).determinant() == pytest.approx(
            square.determinant() * other.determinant()
        )

    def test_transpose_invariant(self, well_conditioned: Matrix) -> None:
        """det(aᵀ) = det(a)"""
        assert well_conditioned.transpose().determinant() == pytest.approx(
            well_conditioned.determinant()
        )

    def test_elimination_report(self, square: Matrix) -> None:
        """elimination_report раскрывает знак и ведущие элементы"""
        report = square.elimination_report()
        assert isinstance(report, EliminationResult)
        assert report.swaps == 1
        assert report.sign == -1.0
        assert report.pivots[0] == 3.0
        assert not report.singular

    def test_custom_tolerances(self) -> None:
        """Порог вырожденности из MatrixTolerances"""
        m = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0 + 1e-9]])
        assert m.determinant() == pytest.approx(1e-9, rel=1e-6)
        assert m.determinant(MatrixTolerances(pivot_eps=1e-6)) == 0.0

    def test_small_scale_not_singular(self) -> None:
        """det(1e-8·I) = 1e-16, а не 0"""
        m = Matrix.identity(2) * 1e-8
        assert m.determinant() == pytest.approx(1e-16, abs=0.0, rel=1e-9)

    def test_mixed_scale_diagonal(self) -> None:
        """det(diag(1e-13, 1e13)) = 1"""
        assert Matrix.from_rows([[1e-13, 0.0], [0.0, 1e13]]).determinant() == pytest.approx(1.0)


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ ДОПОЛНЕНИЯ
# =============================================================================


class TestCalcComplements:
    """Тесты calc_complements"""

    def test_two_by_two(self, square: Matrix) -> None:
        """[[1,2],[3,4]] → [[4,-3],[-2,1]]"""
        assert square.calc_complements() == Matrix.from_rows([[4.0, -3.0], [-2.0, 1.0]])

    def test_one_by_one_convention(self) -> None:
        """1×1 → [[1]] независимо от элемента"""
        assert Matrix.from_rows([[5.0]]).calc_complements().to_rows() == [[1.0]]

    def test_three_by_three(self) -> None:
        """Пример 3×3"""
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 4.0, 2.0], [5.0, 2.0, 1.0]])
        expected = Matrix.from_rows([[0.0, 10.0, -20.0], [4.0, -14.0, 8.0], [-8.0, -2.0, 4.0]])
        assert m.calc_complements() == expected

    def test_adjugate_identity(self, well_conditioned: Matrix) -> None:
        """a · adj(a) = det(a) · I"""
        adjugate = well_conditioned.calc_complements().transpose()
        expected = Matrix.identity(4) * well_conditioned.determinant()
        assert (well_conditioned * adjugate).equals(expected, MatrixTolerances(compare_eps=1e-6))

    def test_not_square(self) -> None:
        """Неквадратная матрица — NotSquareError"""
        with pytest.raises(NotSquareError):
            Matrix(3, 1).calc_complements()


# =============================================================================
# ОБРАТНАЯ МАТРИЦА
# =============================================================================


class TestInverseMatrix:
    """Тесты inverse_matrix"""

    def test_concrete_scenario(self, square: Matrix) -> None:
        """inverse([[1,2],[3,4]]) = [[-2,1],[1.5,-0.5]]"""
        expected = Matrix.from_rows([[-2.0, 1.0], [1.5, -0.5]])
        assert square.inverse_matrix() == expected

    def test_product_is_identity(self, well_conditioned: Matrix) -> None:
        """a · inverse(a) == I в пределах 1e-7"""
        inverse = well_conditioned.inverse_matrix()
        assert well_conditioned * inverse == Matrix.identity(4)
        assert inverse * well_conditioned == Matrix.identity(4)

    def test_one_by_one(self) -> None:
        """inverse([[x]]) = [[1/x]]"""
        assert Matrix.from_rows([[4.0]]).inverse_matrix().to_rows() == [[0.25]]

    def test_receiver_not_mutated(self, square: Matrix) -> None:
        """Обращение не изменяет матрицу"""
        square.inverse_matrix()
        assert square.to_rows() == [[1.0, 2.0], [3.0, 4.0]]

    def test_singular(self) -> None:
        """[[1,2],[2,4]] — SingularMatrixError"""
        with pytest.raises(SingularMatrixError, match="singular") as exc_info:
            Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]]).inverse_matrix()
        assert exc_info.value.kind is MatrixErrorKind.SINGULAR_MATRIX
        assert exc_info.value.determinant == 0.0

    def test_singular_one_by_one(self) -> None:
        """[[0]] необратима"""
        with pytest.raises(SingularMatrixError):
            Matrix().inverse_matrix()

    def test_singular_is_arithmetic_error(self) -> None:
        """SingularMatrixError совместим с ArithmeticError"""
        with pytest.raises(ArithmeticError):
            Matrix(3, 3).inverse_matrix()

    def test_not_square(self) -> None:
        """Неквадратная матрица — NotSquareError"""
        with pytest.raises(NotSquareError):
            Matrix(2, 3).inverse_matrix()

    def test_double_inverse(self, well_conditioned: Matrix) -> None:
        """inverse(inverse(a)) == a"""
        assert well_conditioned.inverse_matrix().inverse_matrix() == well_conditioned

    def test_small_scale_invertible(self) -> None:
        """inverse(0.001·I) = 1000·I"""
        a = Matrix.identity(5) * 0.001
        inverse = a.inverse_matrix()
        assert inverse == Matrix.identity(5) * 1000.0
        assert a * inverse == Matrix.identity(5)

    def test_mixed_scale_invertible(self) -> None:
        """inverse(diag(1e-13, 1e13)) = diag(1e13, 1e-13)"""
        inverse = Matrix.from_rows([[1e-13, 0.0], [0.0, 1e13]]).inverse_matrix()
        assert inverse[0, 0] == pytest.approx(1e13)
        assert inverse[1, 1] == pytest.approx(1e-13)
        assert inverse[0, 1] == 0.0
        assert inverse[1, 0] == 0.0

    def test_custom_tolerances_singular(self) -> None:
        """Почти вырожденная матрица отвергается при грубом pivot_eps"""
        m = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0 + 1e-9]])
        with pytest.raises(SingularMatrixError):
            m.inverse_matrix(MatrixTolerances(pivot_eps=1e-6))
