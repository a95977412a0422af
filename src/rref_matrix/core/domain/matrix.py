"""
Matrix — Модель плотной матрицы float64

Pydantic модель-значение: прямоугольная сетка строк (rows x columns).
Строки сетки являются строками матрицы, а не столбцами.

Инварианты модели (проверяются при конструировании):
1. Хотя бы одна строка и один столбец
2. Все строки одинаковой длины (прямоугольность)
3. Сетка принадлежит модели: входные данные копируются, aliasing исключён

Равенство по значению grid (стандартный __eq__ BaseModel).
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rref_matrix.core.math.inversion import (
    identity_grid,
    invert_grid,
    multiply_grids,
)
from rref_matrix.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_IDENTITY_CHECK,
    rows_close,
)
from rref_matrix.core.math.row_operations import reduce_to_rref

LOG = logging.getLogger(__name__)


# =============================================================================
# FORMATTING
# =============================================================================


def format_value(value: float) -> str:
    """
    Форматирование значения без лишнего ".0" для целых.

    Examples:
        >>> format_value(1.0)
        '1'
        >>> format_value(-0.5)
        '-0.5'
        >>> format_value(float('inf'))
        'inf'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_row(row: Sequence[float]) -> str:
    """Строка вида '| 1 0 0 |'."""
    return "| " + " ".join(format_value(v) for v in row) + " |"


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Плотная прямоугольная матрица float64.

    Операции:
    - to_reduced_row_echelon_form(): новая матрица в RREF, self не меняется
    - reduce_in_place(): RREF in-place, возвращает self (chaining)
    - inverse(): новая обратная матрица, self не меняется
    """

    grid: list[list[float]] = Field(..., min_length=1, description="Строки матрицы")

    @field_validator("grid", mode="before")
    @classmethod
    def copy_rows(cls, v: Any) -> Any:
        """Глубокая копия входных строк до валидации типов."""
        if isinstance(v, (str, bytes)) or not isinstance(v, Sequence):
            return v
        return [list(row) if isinstance(row, Sequence) else row for row in v]

    @field_validator("grid")
    @classmethod
    def validate_rectangular(cls, v: list[list[float]]) -> list[list[float]]:
        """Все строки непустые и одинаковой длины."""
        width = len(v[0])
        if width == 0:
            raise ValueError("matrix must have at least one column")
        for index, row in enumerate(v):
            if len(row) != width:
                raise ValueError(
                    f"matrix must be rectangular: row {index} has {len(row)} "
                    f"columns, expected {width}"
                )
        return v

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из последовательности строк (копия).

        Examples:
            >>> Matrix.from_rows([[1.0, 3.0], [2.0, 1.5]]).shape
            (2, 2)
        """
        return cls(grid=rows)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size x size."""
        return cls(grid=identity_grid(size))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Нулевая матрица rows x columns."""
        return cls(grid=[[0.0] * columns for _ in range(rows)])

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.grid)

    @property
    def column_count(self) -> int:
        return len(self.grid[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.column_count)

    @property
    def is_square(self) -> bool:
        return self.row_count == self.column_count

    def to_rows(self) -> list[list[float]]:
        """Глубокая копия сетки."""
        return [list(row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(format_row(row) for row in self.grid)

    def is_close_to(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементное приближённое равенство (False при разной форме)."""
        return rows_close(self.grid, other.grid, rel_tol=rel_tol, abs_tol=abs_tol)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        """
        Произведение матриц self @ other.

        Raises:
            ValueError: если self.column_count != other.row_count
        """
        if not isinstance(other, Matrix):
            return NotImplemented

        return Matrix(grid=multiply_grids(self.grid, other.grid))

    # -------------------------------------------------------------------------
    # Reduction
    # -------------------------------------------------------------------------

    def reduce_in_place(self) -> "Matrix":
        """
        Редукция self к RREF in-place.

        Returns:
            self

        Raises:
            InvalidPivot: если reciprocal pivot не конечен (сетка остаётся
                в промежуточном состоянии)
        """
        LOG.debug("reducing %dx%d matrix to RREF", self.row_count, self.column_count)
        reduce_to_rref(self.grid)
        return self

    def to_reduced_row_echelon_form(self) -> "Matrix":
        """
        RREF как новая матрица; self не меняется.

        Examples:
            >>> m = Matrix.from_rows([[1.0, 3.0], [2.0, 1.5], [-2.0, -1.5]])
            >>> m.to_reduced_row_echelon_form().grid
            [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]
        """
        return Matrix(grid=self.grid).reduce_in_place()

    # -------------------------------------------------------------------------
    # Inversion
    # -------------------------------------------------------------------------

    def inverse(self, tol: float = EPS_IDENTITY_CHECK) -> "Matrix":
        """
        Обратная матрица через Gauss-Jordan над [A | I]; self не меняется.

        Args:
            tol: Толерантность проверки левого блока на identity

        Raises:
            NonSquareMatrix: если матрица не квадратная
            SingularMatrix: если матрица вырожденная
        """
        return Matrix(grid=invert_grid(self.grid, tol=tol))

    def to_payload(self) -> dict[str, Any]:
        """JSON-совместимое представление {"rows": [[...]]}."""
        return {"rows": self.to_rows()}
