"""
rref-matrix: Reduced Row Echelon Form and Gauss-Jordan inversion
for dense float64 matrices.
"""

from rref_matrix.core.domain.matrix import Matrix
from rref_matrix.core.math.inversion import NonSquareMatrix, SingularMatrix
from rref_matrix.core.math.row_operations import InvalidPivot, MatrixComputationError

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "MatrixComputationError",
    "InvalidPivot",
    "NonSquareMatrix",
    "SingularMatrix",
]
