"""
Contract Validation Module

Эталонные векторы примитивов xbits и их валидация по JSON Schema.
"""

from .reference_check import (
    ReferenceSuite,
    ReferenceVector,
    VectorMismatch,
    VerificationReport,
    evaluate_vector,
    load_reference_vectors,
    verify_reference_vectors,
)
from .validators import (
    ContractValidator,
    ReferenceVectorsValidator,
    SchemaLoader,
    load_vector_file,
    validate_reference_vectors,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ReferenceVectorsValidator",
    # Models
    "ReferenceVector",
    "ReferenceSuite",
    "VectorMismatch",
    "VerificationReport",
    # Functions
    "validate_reference_vectors",
    "load_vector_file",
    "load_reference_vectors",
    "evaluate_vector",
    "verify_reference_vectors",
]
