"""
Centralized constants for cliffmv.

This module defines the dimension bounds, default numeric types and
tolerances used throughout the library.

Usage:
    from cliffmv.core.constants import MAX_DIMENSIONS, DEFAULT_DTYPE
"""

import torch

# =============================================================================
# Dimension Bounds
# =============================================================================

# Smallest supported number of basis vectors
MIN_DIMENSIONS: int = 2

# Largest supported number of basis vectors (8-bit blade signatures)
MAX_DIMENSIONS: int = 8

# Width of a blade signature in bits
SIGNATURE_BITS: int = MAX_DIMENSIONS

# Dimension counts with a closed-form multiplicative inverse
INVERTIBLE_DIMENSIONS: tuple = (2, 3, 4)


# =============================================================================
# Numeric Defaults
# =============================================================================

# Coefficients are double precision unless requested otherwise
DEFAULT_DTYPE: torch.dtype = torch.float64

# Tolerances for approximate comparisons
DEFAULT_RTOL: float = 1e-9
DEFAULT_ATOL: float = 1e-9


# =============================================================================
# Grade Involution Parameters (grade_addend, grade_divisor)
# =============================================================================

SPACE_INVERSION: tuple = (0, 1)
REVERSION: tuple = (0, 2)
CONJUGATION: tuple = (1, 2)

# Negates grades 3 and 4 (mod 8); used by the 4-D inverse
QUADRIC_INVOLUTION: tuple = (1, 4)


# =============================================================================
# Formatting
# =============================================================================

SCALAR_BLADE_NAME: str = "1"
BLADE_PREFIX: str = "e"
