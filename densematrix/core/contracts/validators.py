"""
Rows Contract Validator

Валидация списка строк, из которого строится Matrix.from_rows.
Использует библиотеку jsonschema для проверки структуры, затем
дополнительно проверяет прямоугольность (JSON Schema её не выражает).

Контракт:
- непустой массив строк
- каждая строка — непустой массив чисел (bool не является числом)
- все строки одной длины
"""

import numbers
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from densematrix.core.errors import RowsContractError, ShapeMismatchError


# =============================================================================
# SCHEMA
# =============================================================================

ROWS_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "matrix_rows",
    "type": "array",
    "minItems": 1,
    "items": {
        "type": "array",
        "minItems": 1,
        "items": {"type": "number"},
    },
}


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class RowsContractValidator:
    """
    Валидатор контракта списка строк.

    Инкапсулирует Draft202012Validator для ROWS_SCHEMA.
    """

    def __init__(self, schema: Dict[str, Any] = ROWS_SCHEMA):
        """
        Инициализация валидатора.

        Args:
            schema: JSON Schema контракта (default: ROWS_SCHEMA)

        Raises:
            ValueError: Если схема сама по себе невалидна
        """
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid rows JSON Schema: {e.message}") from e

        self.schema = schema
        self.validator = Draft202012Validator(schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Список строк

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """
        Проверка валидности данных без exception.

        Args:
            data: Список строк

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Args:
            data: Список строк

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


# Глобальный экземпляр валидатора
_ROWS_VALIDATOR = RowsContractValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rows(data: Any) -> list[list[float]]:
    """
    Валидация списка строк и приведение элементов к float.

    Args:
        data: Список строк (list/tuple вложенных последовательностей чисел)

    Returns:
        Новый буфер строк list[list[float]]

    Raises:
        RowsContractError: Если данные не соответствуют ROWS_SCHEMA
        ShapeMismatchError: Если строки разной длины
    """
    # jsonschema распознаёт только list как array
    if isinstance(data, tuple):
        data = list(data)
    if isinstance(data, list):
        data = [list(row) if isinstance(row, tuple) else row for row in data]

    try:
        _ROWS_VALIDATOR.validate(data)
    except ValidationError as e:
        path = list(e.absolute_path)
        raise RowsContractError(
            f"Rows contract violation at {path}: {e.message}",
            path=path,
        ) from e

    width = len(data[0])
    for i, row in enumerate(data):
        if len(row) != width:
            raise ShapeMismatchError(
                f"Row {i} has {len(row)} columns, expected {width}",
                expected=width,
                actual=len(row),
            )
        for j, value in enumerate(row):
            # "number" в jsonschema пропускает complex
            if not isinstance(value, numbers.Real):
                raise RowsContractError(
                    f"Rows contract violation at {[i, j]}: {value!r} is not a real number",
                    path=[i, j],
                )

    return [[float(value) for value in row] for row in data]


def is_valid_rows(data: Any) -> bool:
    """
    Проверка контракта без exception.

    Args:
        data: Список строк

    Returns:
        True если данные соответствуют схеме и прямоугольны
    """
    try:
        validate_rows(data)
    except (RowsContractError, ShapeMismatchError):
        return False
    return True
