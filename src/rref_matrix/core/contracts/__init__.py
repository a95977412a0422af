"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных матриц.
"""

from .validators import (
    ContractValidator,
    MatrixPayloadValidator,
    SchemaLoader,
    load_matrix,
    matrix_from_payload,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixPayloadValidator",
    # Functions
    "validate_matrix_payload",
    "matrix_from_payload",
    "load_matrix",
]
