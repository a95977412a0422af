"""
Inversion — Gauss-Jordan Inverse via [A | I]

Обращение квадратной сетки через редукцию augmented-матрицы:
1. Проверка квадратности (NonSquareMatrix)
2. Augmentation: копия A, к каждой строке дописана строка identity → [A | I]
3. RREF in-place (row_operations.reduce_to_rref)
4. Проверка, что левый блок стал identity (SingularMatrix)
5. Split: левые n столбцов отбрасываются, правые n образуют результат
6. Проверка A @ A^-1 ≈ I в пределах tol (SingularMatrix)

Проверки п.4 и п.6 являются намеренным усилением: без них для вырожденной
матрицы правый блок возвращался бы как "обратная", хотя ей не является.
Для float-входа вроде [[0.1, 0.3], [0.2, 0.6]] остаток округления ~1e-16
становится pivot, и левый блок выходит ровно identity; ловит это только п.6.
InvalidPivot во время редукции [A | I] также трактуется как вырожденность.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная сетка никогда не мутируется (успех или ошибка)
2. Результат имеет форму n x n
"""

import logging
from collections.abc import Sequence

from rref_matrix.core.math.numerical_safeguards import (
    EPS_IDENTITY_CHECK,
    is_identity_block,
)
from rref_matrix.core.math.row_operations import (
    Grid,
    InvalidPivot,
    MatrixComputationError,
    reduce_to_rref,
)

LOG = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonSquareMatrix(MatrixComputationError, ValueError):
    """Обращение матрицы, у которой число строк != числу столбцов."""

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        super().__init__(f"Cannot invert non-square matrix ({rows}x{columns})")


class SingularMatrix(MatrixComputationError):
    """Левый блок [A | I] не редуцировался к identity: A необратима."""

    def __init__(self, size: int, reason: str = "left block did not reduce to identity"):
        self.size = size
        super().__init__(f"Singular matrix ({size}x{size}), not invertible: {reason}")


# =============================================================================
# GRID HELPERS
# =============================================================================


def identity_grid(size: int) -> Grid:
    """
    Единичная сетка size x size.

    Examples:
        >>> identity_grid(2)
        [[1.0, 0.0], [0.0, 1.0]]
    """
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


def augment(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Grid:
    """
    Конкатенация по столбцам: строка i результата = left[i] + right[i].

    Обе стороны копируются; результат не разделяет строк со входами.

    Raises:
        ValueError: если число строк различается
    """
    if len(left) != len(right):
        raise ValueError(
            f"Cannot augment grids with different row counts: {len(left)} != {len(right)}"
        )
    return [list(a) + list(b) for a, b in zip(left, right)]


def drop_leading_columns(grid: Sequence[Sequence[float]], count: int) -> Grid:
    """Новая сетка без первых count столбцов каждой строки."""
    return [list(row[count:]) for row in grid]


def multiply_grids(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Grid:
    """
    Произведение сеток left @ right.

    Raises:
        ValueError: если ширина left != числу строк right

    Examples:
        >>> multiply_grids([[1.0, 2.0]], [[3.0], [4.0]])
        [[11.0]]
    """
    if len(left[0]) != len(right):
        raise ValueError(
            f"Cannot multiply {len(left)}x{len(left[0])} "
            f"by {len(right)}x{len(right[0])} matrix"
        )
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in left]


# =============================================================================
# INVERSION
# =============================================================================


def invert_grid(grid: Sequence[Sequence[float]], tol: float = EPS_IDENTITY_CHECK) -> Grid:
    """
    Обратная сетка через Gauss-Jordan над [A | I].

    Args:
        grid: Квадратная сетка A (не мутируется)
        tol: Абсолютная толерантность проверки левого блока и A @ A^-1
            на identity

    Returns:
        Новая сетка A^-1

    Raises:
        NonSquareMatrix: если A не квадратная
        SingularMatrix: если A вырожденная

    Examples:
        >>> invert_grid([[2.0, 0.0], [0.0, 4.0]])
        [[0.5, 0.0], [0.0, 0.25]]
    """
    rows = len(grid)
    columns = len(grid[0]) if rows else 0

    if rows != columns:
        raise NonSquareMatrix(rows, columns)

    augmented = augment(grid, identity_grid(rows))
    LOG.debug("inverting %dx%d matrix via %dx%d augmented grid", rows, rows, rows, 2 * rows)

    try:
        reduce_to_rref(augmented)
    except InvalidPivot as e:
        LOG.warning("singular matrix: %s", e)
        raise SingularMatrix(rows, reason=str(e)) from e

    if not is_identity_block(augmented, rows, tol=tol):
        LOG.warning("singular matrix: %dx%d left block is not identity after RREF", rows, rows)
        raise SingularMatrix(rows)

    inverse = drop_leading_columns(augmented, rows)

    # Остаток округления может стать pivot: левый блок тогда ровно identity,
    # а правый блок мусор порядка 1/eps
    if not is_identity_block(multiply_grids(grid, inverse), rows, tol=tol):
        LOG.warning(
            "singular matrix: %dx%d product with computed inverse is not identity", rows, rows
        )
        raise SingularMatrix(rows, reason="product with computed inverse is not identity")

    return inverse
