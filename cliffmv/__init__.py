"""
cliffmv: Dense multivector arithmetic for Euclidean Clifford algebras

A PyTorch library for multivectors of Cl(n, 0) with 2 to 8 basis vectors.

Key Features:
- Signature-indexed blades (bit i set means e(i+1) is present)
- Blade index generation grade by grade
- Geometric product with exact anticommutation signs
- Space inversion, reversion and Clifford conjugation
- Closed-form multiplicative inverse for 2, 3 and 4 dimensions

Example:
    >>> import cliffmv
    >>> mv = cliffmv.generate(3)
    >>> mv.set_element(0, 2.0)
    >>> mv.set_element(0b011, 1.0)  # e12
    >>> product = mv.multiply(mv.multiplicative_inverse())
    >>> round(product.scalar(), 9)
    1.0
"""

__version__ = "0.1.0"
__author__ = "cliffmv Contributors"

from . import core
from . import ga
from . import utils

from .core.errors import (
    CliffordError,
    ConstructionError,
    BladeIndexError,
    DimensionMismatchError,
    UnsupportedDimensionError,
    NonInvertibleError,
)
from .ga import (
    Multivector,
    CombinationSet,
    generate,
    generate_combinations,
    identity,
    basis_blade,
    from_coefficients,
    random_multivector,
    blade_name,
    sign_of_blade_product,
    reordering_sign,
)
from .utils import Config, load_config, save_config

__all__ = [
    "core",
    "ga",
    "utils",
    # Multivectors
    "Multivector",
    "CombinationSet",
    "generate",
    "generate_combinations",
    "identity",
    "basis_blade",
    "from_coefficients",
    "random_multivector",
    "blade_name",
    "sign_of_blade_product",
    "reordering_sign",
    # Configuration
    "Config",
    "load_config",
    "save_config",
    # Errors
    "CliffordError",
    "ConstructionError",
    "BladeIndexError",
    "DimensionMismatchError",
    "UnsupportedDimensionError",
    "NonInvertibleError",
]
