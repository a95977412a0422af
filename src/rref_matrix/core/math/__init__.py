"""
Core math modules для rref-matrix

Gauss-Jordan элиминация, обращение матриц и численные примитивы.
"""

# Numerical Safeguards
from rref_matrix.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_IDENTITY_CHECK,
    # Exceptions
    NonFiniteReciprocal,
    # Checks and comparisons
    is_close,
    is_identity_block,
    is_valid_float,
    rows_close,
    safe_reciprocal,
)

# Row Operations
from rref_matrix.core.math.row_operations import (
    InvalidPivot,
    MatrixComputationError,
    find_pivot_row,
    leftmost_nonzero_in_row,
    reduce_to_rref,
    replacement_addition,
    scale_row_to_one,
    swap_rows,
    zero_column,
)

# Inversion
from rref_matrix.core.math.inversion import (
    NonSquareMatrix,
    SingularMatrix,
    augment,
    drop_leading_columns,
    identity_grid,
    invert_grid,
    multiply_grids,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_IDENTITY_CHECK",
    # Numerical Safeguards: Exceptions
    "NonFiniteReciprocal",
    # Numerical Safeguards: Functions
    "is_close",
    "is_identity_block",
    "is_valid_float",
    "rows_close",
    "safe_reciprocal",
    # Row Operations: Exceptions
    "InvalidPivot",
    "MatrixComputationError",
    # Row Operations: Functions
    "find_pivot_row",
    "leftmost_nonzero_in_row",
    "reduce_to_rref",
    "replacement_addition",
    "scale_row_to_one",
    "swap_rows",
    "zero_column",
    # Inversion: Exceptions
    "NonSquareMatrix",
    "SingularMatrix",
    # Inversion: Functions
    "augment",
    "drop_leading_columns",
    "identity_grid",
    "invert_grid",
    "multiply_grids",
]
