"""
Core module for cliffmv.

Contains:
- Constants: Dimension bounds, numeric defaults and involution parameters
- Errors: The error taxonomy shared by every module
- Types: Type aliases for signatures and coefficient tensors
"""

from .constants import (
    # Dimension bounds
    MIN_DIMENSIONS,
    MAX_DIMENSIONS,
    SIGNATURE_BITS,
    INVERTIBLE_DIMENSIONS,
    # Numeric defaults
    DEFAULT_DTYPE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    # Involutions
    SPACE_INVERSION,
    REVERSION,
    CONJUGATION,
    QUADRIC_INVOLUTION,
)

from .errors import (
    CliffordError,
    ConstructionError,
    BladeIndexError,
    DimensionMismatchError,
    UnsupportedDimensionError,
    NonInvertibleError,
)

from .types import (
    Signature,
    ScalarLike,
    CoefficientTensor,
    BladeTable,
    CayleyTable,
)

__all__ = [
    # Constants
    "MIN_DIMENSIONS",
    "MAX_DIMENSIONS",
    "SIGNATURE_BITS",
    "INVERTIBLE_DIMENSIONS",
    "DEFAULT_DTYPE",
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "SPACE_INVERSION",
    "REVERSION",
    "CONJUGATION",
    "QUADRIC_INVOLUTION",
    # Errors
    "CliffordError",
    "ConstructionError",
    "BladeIndexError",
    "DimensionMismatchError",
    "UnsupportedDimensionError",
    "NonInvertibleError",
    # Types
    "Signature",
    "ScalarLike",
    "CoefficientTensor",
    "BladeTable",
    "CayleyTable",
]
