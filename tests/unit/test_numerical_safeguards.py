"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. safe_reciprocal: конечный результат или NonFiniteReciprocal
2. NaN/Inf проверки
3. Epsilon-сравнения float и сеток
4. Проверку левого блока на identity
"""

import math

import pytest

from rref_matrix.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_IDENTITY_CHECK,
    NonFiniteReciprocal,
    is_close,
    is_identity_block,
    is_valid_float,
    rows_close,
    safe_reciprocal,
)

# =============================================================================
# ТЕСТЫ SAFE RECIPROCAL
# =============================================================================


class TestSafeReciprocal:
    """Тесты для safe_reciprocal"""

    def test_regular_values(self) -> None:
        """Обычные значения обращаются как 1 / value"""
        assert safe_reciprocal(5.0) == 1.0 / 5.0
        assert safe_reciprocal(-4.0) == -0.25
        assert safe_reciprocal(1.0) == 1.0

    def test_zero_rejected(self) -> None:
        """Ноль (в том числе -0.0) → NonFiniteReciprocal"""
        with pytest.raises(NonFiniteReciprocal):
            safe_reciprocal(0.0)

        with pytest.raises(NonFiniteReciprocal):
            safe_reciprocal(-0.0)

    def test_nan_rejected(self) -> None:
        """NaN → NonFiniteReciprocal"""
        with pytest.raises(NonFiniteReciprocal, match="not finite"):
            safe_reciprocal(float("nan"))

    def test_subnormal_overflow_rejected(self) -> None:
        """1 / subnormal переполняется до inf → NonFiniteReciprocal"""
        with pytest.raises(NonFiniteReciprocal):
            safe_reciprocal(5e-324)

    def test_infinity_gives_zero(self) -> None:
        """1 / inf == 0.0 является конечным результатом, исключения нет"""
        assert safe_reciprocal(float("inf")) == 0.0

    def test_exception_carries_value(self) -> None:
        """Исключение хранит исходное значение"""
        with pytest.raises(NonFiniteReciprocal) as exc_info:
            safe_reciprocal(0.0)
        assert exc_info.value.value == 0.0
        assert isinstance(exc_info.value, ArithmeticError)


# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(5e-324)

    def test_nan_inf_invalid(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 1e-6, abs_tol=1e-5)


class TestRowsClose:
    """Тесты для rows_close"""

    def test_equal_grids(self) -> None:
        assert rows_close([[1.0, 2.0], [3.0, 4.0]], [[1.0, 2.0], [3.0, 4.0]])

    def test_grids_within_tolerance(self) -> None:
        assert rows_close([[1.0, 0.0]], [[1.0 + 1e-12, 1e-13]])

    def test_different_values(self) -> None:
        assert not rows_close([[1.0, 0.0]], [[1.0, 0.1]])

    def test_different_row_count(self) -> None:
        assert not rows_close([[1.0]], [[1.0], [1.0]])

    def test_different_row_length(self) -> None:
        assert not rows_close([[1.0, 0.0]], [[1.0]])


class TestIsIdentityBlock:
    """Тесты для is_identity_block"""

    def test_identity_left_block(self) -> None:
        """Правые столбцы не влияют на результат"""
        rows = [
            [1.0, 0.0, 7.0, 8.0],
            [0.0, 1.0, 9.0, 10.0],
        ]
        assert is_identity_block(rows, 2)

    def test_within_tolerance(self) -> None:
        rows = [[1.0 + EPS_IDENTITY_CHECK / 2, 1e-12], [0.0, 1.0]]
        assert is_identity_block(rows, 2)

    def test_zero_row_not_identity(self) -> None:
        rows = [[1.0, 2.0, 1.0, 0.0], [0.0, 0.0, -2.0, 1.0]]
        assert not is_identity_block(rows, 2)

    def test_nan_not_identity(self) -> None:
        rows = [[math.nan, 0.0], [0.0, 1.0]]
        assert not is_identity_block(rows, 2)

    def test_too_few_rows(self) -> None:
        assert not is_identity_block([[1.0, 0.0]], 2)
