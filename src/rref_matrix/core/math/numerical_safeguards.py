"""
Numerical Safeguards — Safe Float Primitives for Elimination

Модуль содержит численные примитивы, на которые опирается Gauss-Jordan:
- Безопасное обращение pivot-значения (reciprocal) с проверкой finite
- NaN/Inf проверки для значений и строк матрицы
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нефинитный reciprocal никогда не возвращается (NonFiniteReciprocal)
2. Сравнения "на ноль" в алгоритме редукции точные (== 0.0);
   epsilon-сравнения используются только для проверки результатов
3. Все операции детерминированы и воспроизводимы
"""

import math
from collections.abc import Sequence
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Толерантность проверок "левый блок == identity" и "A @ A^-1 == identity"
# при обращении. Значения дальше этого порога от 0/1 означают вырожденную матрицу
EPS_IDENTITY_CHECK: Final[float] = 1e-9


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonFiniteReciprocal(ArithmeticError):
    """
    1 / value не является конечным числом.

    Возникает при value == 0.0, subnormal value (overflow до inf) или NaN.
    """

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Reciprocal of {value!r} is not finite")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def safe_reciprocal(value: float) -> float:
    """
    Обратное значение 1 / value с гарантией конечного результата.

    В отличие от "мягкого" деления с fallback, здесь нефинитный результат
    является фатальным: продолжать редукцию с inf/NaN в строке нельзя.

    Args:
        value: Делитель (pivot)

    Returns:
        1.0 / value

    Raises:
        NonFiniteReciprocal: если value == 0.0 или результат inf/NaN

    Examples:
        >>> safe_reciprocal(5.0)
        0.2
        >>> safe_reciprocal(-4.0)
        -0.25
        >>> safe_reciprocal(0.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NonFiniteReciprocal: Reciprocal of 0.0 is not finite
    """
    if value == 0.0:
        raise NonFiniteReciprocal(value)

    reciprocal = 1.0 / value

    if not is_valid_float(reciprocal):
        raise NonFiniteReciprocal(value)

    return reciprocal


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def rows_close(
    left: Sequence[Sequence[float]],
    right: Sequence[Sequence[float]],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух сеток одинаковой формы.

    Returns:
        False если формы различаются, иначе all(is_close(...))
    """
    if len(left) != len(right):
        return False

    for left_row, right_row in zip(left, right):
        if len(left_row) != len(right_row):
            return False
        for a, b in zip(left_row, right_row):
            if not is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
                return False

    return True


def is_identity_block(
    rows: Sequence[Sequence[float]],
    size: int,
    tol: float = EPS_IDENTITY_CHECK,
) -> bool:
    """
    Проверка, что левый блок size x size сетки равен единичной матрице.

    Сравнивается только rows[i][:size], правые столбцы игнорируются.

    Args:
        rows: Строки (ширина >= size)
        size: Размер проверяемого квадратного блока
        tol: Абсолютная толерантность для 0 и 1

    Returns:
        True если rows[i][j] ≈ (1 если i == j иначе 0) для всех i, j < size
    """
    if len(rows) < size:
        return False

    for i in range(size):
        for j in range(size):
            expected = 1.0 if i == j else 0.0
            value = rows[i][j]
            if not is_valid_float(value) or abs(value - expected) > tol:
                return False

    return True
