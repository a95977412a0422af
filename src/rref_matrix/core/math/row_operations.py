"""
Row Operations — Gauss-Jordan Elimination to RREF

Модуль реализует редукцию плотной сетки float64 к Reduced Row Echelon Form.
Сетка: list[list[float]], строки адресуются независимо, операции мутируют
сетку in-place.

Один проход редукции (current_col = 0, для current_row = 0..rows-1):
1. Pivot search: первая строка (сверху вниз), чей leftmost nonzero
   находится ровно в current_col. Нет такой строки → итерация пропускается,
   current_col НЕ увеличивается.
2. Scale: строка pivot умножается на 1 / pivot начиная с current_col.
3. Eliminate: из каждой другой строки с ненулевым значением в current_col
   вычитается (значение × строка pivot) по всем столбцам.
4. Reposition: строка pivot переставляется на позицию current_row.
5. current_col += 1 только если pivot был обработан.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения с нулём точные (!= 0.0), без epsilon
2. После scale значение pivot ровно 1.0
3. После eliminate все остальные строки содержат ровно 0.0 в current_col
4. Форма сетки никогда не меняется
5. Нефинитный reciprocal pivot → InvalidPivot (редукция прерывается)
"""

import logging
from typing import Optional

from rref_matrix.core.math.numerical_safeguards import (
    NonFiniteReciprocal,
    safe_reciprocal,
)

LOG = logging.getLogger(__name__)

Grid = list[list[float]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixComputationError(ArithmeticError):
    """Базовое исключение для ошибок вычислений над матрицей."""
    pass


class InvalidPivot(MatrixComputationError):
    """
    Reciprocal значения pivot не является конечным числом.

    Под корректным pivot search недостижимо, кроме сеток с NaN
    (NaN != 0.0, поэтому NaN может стать pivot).
    """

    def __init__(self, row: int, column: int, value: float):
        self.row = row
        self.column = column
        self.value = value
        super().__init__(
            f"Invalid pivot {value!r} at row={row}, column={column}: "
            f"reciprocal is not finite"
        )


# =============================================================================
# PIVOT SEARCH
# =============================================================================


def leftmost_nonzero_in_row(grid: Grid, row: int) -> Optional[int]:
    """
    Индекс первого столбца строки, значение в котором != 0.0.

    Returns:
        Индекс столбца или None для нулевой строки
    """
    for column, value in enumerate(grid[row]):
        if value != 0.0:
            return column
    return None


def find_pivot_row(grid: Grid, column: int) -> Optional[int]:
    """
    Первая строка (сверху вниз), чей leftmost nonzero ровно в column.

    Строки, уже поставленные на место выше, имеют leftmost nonzero в более
    ранних столбцах и не проходят проверку.

    Args:
        grid: Сетка
        column: Текущий столбец редукции

    Returns:
        Индекс строки или None если pivot не найден
        (в том числе при column за пределами ширины сетки)

    Examples:
        >>> find_pivot_row([[0.0, 5.0], [10.0, 0.0]], 0)
        1
        >>> find_pivot_row([[0.0, 5.0], [10.0, 0.0]], 1)
        0
        >>> find_pivot_row([[0.0, 5.0], [10.0, 0.0]], 2) is None
        True
    """
    if not grid or column >= len(grid[0]):
        return None

    for row in range(len(grid)):
        if leftmost_nonzero_in_row(grid, row) == column:
            return row
    return None


# =============================================================================
# SCALE
# =============================================================================


def pivot_reciprocal(grid: Grid, row: int, column: int) -> float:
    """
    1 / grid[row][column] с проверкой finite.

    Raises:
        InvalidPivot: если reciprocal не конечен (0.0, NaN, subnormal)
    """
    value = grid[row][column]
    try:
        return safe_reciprocal(value)
    except NonFiniteReciprocal as e:
        raise InvalidPivot(row, column, value) from e


def scale_row_to_one(grid: Grid, row: int, pivot_column: int) -> None:
    """
    Умножение строки на 1 / pivot начиная с pivot_column.

    Значения левее pivot_column не трогаются (они нулевые, так как pivot это
    leftmost nonzero). Значение pivot выставляется ровно в 1.0: p * (1/p)
    не всегда даёт 1.0 в IEEE 754.

    Raises:
        InvalidPivot: если reciprocal pivot не конечен
    """
    scalar = pivot_reciprocal(grid, row, pivot_column)
    target = grid[row]

    for column in range(pivot_column, len(target)):
        target[column] *= scalar

    target[pivot_column] = 1.0


# =============================================================================
# ELIMINATE
# =============================================================================


def replacement_addition(grid: Grid, target_row: int, source_row: int, column: int) -> None:
    """
    target_row -= target_row[column] * source_row, по всем столбцам.

    Множитель фиксируется до цикла; при source_row[column] == 1.0
    target_row[column] становится ровно 0.0.
    """
    scalar = grid[target_row][column]
    target = grid[target_row]
    source = grid[source_row]

    for i in range(len(target)):
        target[i] -= scalar * source[i]


def zero_column(grid: Grid, column: int, pivot_row: int) -> None:
    """
    Обнуление column во всех строках, кроме pivot_row.

    Строки с нулём в column не трогаются.
    """
    for row in range(len(grid)):
        if row != pivot_row and grid[row][column] != 0.0:
            replacement_addition(grid, row, pivot_row, column)


# =============================================================================
# REPOSITION
# =============================================================================


def swap_rows(grid: Grid, from_row: int, to_row: int) -> None:
    """Перестановка двух строк целиком. При from_row == to_row ничего не делает."""
    if from_row == to_row:
        return
    grid[from_row], grid[to_row] = grid[to_row], grid[from_row]


# =============================================================================
# REDUCTION
# =============================================================================


def reduce_to_rref(grid: Grid) -> Grid:
    """
    In-place редукция сетки к Reduced Row Echelon Form.

    Ровно len(grid) итераций; см. описание алгоритма в docstring модуля.

    Args:
        grid: Прямоугольная сетка (мутируется)

    Returns:
        Та же сетка (для chaining)

    Raises:
        InvalidPivot: если reciprocal pivot не конечен. Сетка остаётся
            в промежуточном состоянии.

    Examples:
        >>> reduce_to_rref([[2.0, 2.0, 0.0], [0.0, 0.0, 1.0]])
        [[1.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
        >>> reduce_to_rref([[0.0, 0.0], [0.0, 0.0]])
        [[0.0, 0.0], [0.0, 0.0]]
    """
    current_col = 0

    for current_row in range(len(grid)):
        pivot_row = find_pivot_row(grid, current_col)

        if pivot_row is None:
            LOG.debug("row %d: no pivot in column %d, skipped", current_row, current_col)
            continue

        scale_row_to_one(grid, pivot_row, current_col)
        zero_column(grid, current_col, pivot_row)
        swap_rows(grid, pivot_row, current_row)

        LOG.debug(
            "row %d: pivot from row %d in column %d", current_row, pivot_row, current_col
        )
        current_col += 1

    return grid
