"""
Geometric algebra module.

Implements Euclidean Clifford algebras Cl(n, 0) for 2 <= n <= 8 with dense
multivectors, the geometric product, grade involutions and the
multiplicative inverse for 2, 3 and 4 dimensions.
"""

from .combinatorics import (
    CombinationSet,
    generate_combinations,
    factorial,
    falling_factorial,
    binomial,
    popcount,
)

from .signs import (
    sign_of_blade_product,
    reordering_sign,
    cayley_table,
)

from .multivector import (
    Multivector,
    blade_tables,
    blade_name,
    generate,
    identity,
    basis_blade,
    from_coefficients,
    random_multivector,
)

__all__ = [
    # Combinatorics
    "CombinationSet",
    "generate_combinations",
    "factorial",
    "falling_factorial",
    "binomial",
    "popcount",
    # Signs
    "sign_of_blade_product",
    "reordering_sign",
    "cayley_table",
    # Multivectors
    "Multivector",
    "blade_tables",
    "blade_name",
    "generate",
    "identity",
    "basis_blade",
    "from_coefficients",
    "random_multivector",
]
