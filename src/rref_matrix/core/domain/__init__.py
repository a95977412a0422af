"""
Domain models and value objects.

Contains the Matrix value model and its text formatting helpers.
"""

from rref_matrix.core.domain.matrix import Matrix, format_row, format_value

__all__ = [
    "Matrix",
    "format_row",
    "format_value",
]
