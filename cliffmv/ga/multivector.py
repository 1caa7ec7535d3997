"""
Dense multivectors of the Euclidean Clifford algebra Cl(n, 0), 2 <= n <= 8.

A multivector holds one real coefficient per basis blade, 2^n in total.
Coefficients are addressed by blade signature: bit i of the signature set
means e(i+1) participates in the blade.

    n = 3:  signature  0    1    2    3     4    5     6     7
            blade      1    e1   e2   e12   e3   e13   e23   e123

Internally each multivector also carries the natural storage order of its
blades (scalar first, then grade by grade as produced by the blade index
generator) as a pair of lookup tables:

    position_to_signature[signature_to_position[s]] == s

The natural order drives formatting; arithmetic is signature-indexed.

Supported operations:
- Geometric product (multiply, multiply_in_place, *)
- Grade involutions: space inversion, reversion, conjugation
- Multiplicative inverse for 2, 3 and 4 dimensions
- Grade projection, addition, scaling
"""

from __future__ import annotations
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Tuple, Union
import logging
import numbers

import torch

from ..core.constants import (
    MIN_DIMENSIONS,
    MAX_DIMENSIONS,
    INVERTIBLE_DIMENSIONS,
    DEFAULT_DTYPE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    SPACE_INVERSION,
    REVERSION,
    CONJUGATION,
    QUADRIC_INVOLUTION,
    SCALAR_BLADE_NAME,
    BLADE_PREFIX,
)
from ..core.errors import (
    ConstructionError,
    BladeIndexError,
    DimensionMismatchError,
    UnsupportedDimensionError,
    NonInvertibleError,
)
from ..core.types import BladeTable, ScalarLike
from .combinatorics import generate_combinations, popcount
from .signs import _cayley_table

logger = logging.getLogger(__name__)


def _check_dimension_count(dimension_count: int) -> None:
    if (
        isinstance(dimension_count, bool)
        or not isinstance(dimension_count, numbers.Integral)
        or not MIN_DIMENSIONS <= dimension_count <= MAX_DIMENSIONS
    ):
        raise ConstructionError(
            f"dimension_count must be an integer in [{MIN_DIMENSIONS}, {MAX_DIMENSIONS}], "
            f"got {dimension_count!r}"
        )


# === Blade tables ===

@lru_cache(maxsize=None)
def blade_tables(dimension_count: int) -> Tuple[BladeTable, BladeTable]:
    """
    Build the natural position <-> signature tables for n dimensions.

    The scalar takes position 0; grades 1..n follow in the order produced
    by generate_combinations.

    Returns:
        position_to_signature, signature_to_position (tuples of length 2^n)
    """
    _check_dimension_count(dimension_count)
    size = 1 << dimension_count

    position_to_signature = [0] * size
    position = 1
    for grade in range(1, dimension_count + 1):
        for signature in generate_combinations(dimension_count, grade):
            if position >= size:
                raise RuntimeError(
                    f"Blade table overflow at grade {grade} for {dimension_count} dimensions"
                )
            position_to_signature[position] = signature
            position += 1

    if position != size:
        raise RuntimeError(
            f"Blade table for {dimension_count} dimensions filled {position} of {size} slots"
        )

    signature_to_position = [0] * size
    for position, signature in enumerate(position_to_signature):
        signature_to_position[signature] = position

    logger.debug(f"Built blade tables for {dimension_count} dimensions ({size} blades)")
    return tuple(position_to_signature), tuple(signature_to_position)


@lru_cache(maxsize=None)
def _grades(dimension_count: int) -> torch.Tensor:
    """Grade of every signature as a long tensor of shape (2^n,)."""
    return torch.tensor(
        [popcount(signature) for signature in range(1 << dimension_count)],
        dtype=torch.long,
    )


@lru_cache(maxsize=None)
def _involution_signs(dimension_count: int, grade_addend: int, grade_divisor: int) -> torch.Tensor:
    """+1/-1 per signature; -1 where floor((g + addend) / divisor) is odd."""
    return torch.tensor(
        [
            -1.0 if ((popcount(signature) + grade_addend) // grade_divisor) % 2 else 1.0
            for signature in range(1 << dimension_count)
        ],
        dtype=torch.float64,
    )


def blade_name(signature: int) -> str:
    """
    Human-readable name of a blade.

    Examples:
        0 -> "1", 1 -> "e1", 5 -> "e13", 15 -> "e1234"
    """
    if signature < 0:
        raise BladeIndexError(f"Blade signature must be non-negative, got {signature}")
    if signature == 0:
        return SCALAR_BLADE_NAME
    digits = []
    index = 1
    while signature:
        if signature & 1:
            digits.append(str(index))
        signature >>= 1
        index += 1
    return BLADE_PREFIX + "".join(digits)


class Multivector:
    """
    A multivector in Cl(n, 0).

    Coefficients are stored as a tensor of shape (2^n,) indexed by blade
    signature. Every algebraic operation returns a new multivector; only
    multiply_in_place (and *=) rewrites the receiver's coefficients.

    Attributes:
        dimension_count: Number of basis vectors n
        coefficients: Tensor of shape (2^n,)
        position_to_signature: Natural position -> signature
        signature_to_position: Signature -> natural position
    """

    def __init__(
        self,
        dimension_count: int,
        coefficients: Optional[Union[torch.Tensor, Sequence[float]]] = None,
        dtype: Optional[torch.dtype] = None,
    ):
        """
        Initialize a multivector.

        Args:
            dimension_count: Number of basis vectors, 2 <= n <= 8
            coefficients: Optional values of shape (2^n,), copied.
                          Zero-initialized when omitted.
            dtype: Floating dtype; defaults to the dtype of a floating
                   coefficient tensor, else float64
        """
        _check_dimension_count(dimension_count)
        size = 1 << dimension_count

        if coefficients is None:
            values = torch.zeros(size, dtype=dtype or DEFAULT_DTYPE)
        elif isinstance(coefficients, torch.Tensor):
            if dtype is None:
                dtype = coefficients.dtype if coefficients.is_floating_point() else DEFAULT_DTYPE
            values = coefficients.detach().to(dtype=dtype).clone()
        else:
            values = torch.tensor(coefficients, dtype=dtype or DEFAULT_DTYPE)

        if values.shape != (size,):
            raise ConstructionError(
                f"Expected {size} coefficients for {dimension_count} dimensions, "
                f"got shape {tuple(values.shape)}"
            )

        self.dimension_count = dimension_count
        self.coefficients = values
        self.position_to_signature, self.signature_to_position = blade_tables(dimension_count)

    @property
    def size(self) -> int:
        """Number of blades, 2^n."""
        return 1 << self.dimension_count

    @property
    def dtype(self) -> torch.dtype:
        return self.coefficients.dtype

    @property
    def grades(self) -> torch.Tensor:
        """Grade of each coefficient slot."""
        return _grades(self.dimension_count).clone()

    def clone(self) -> 'Multivector':
        """Create an independent copy."""
        return Multivector(self.dimension_count, self.coefficients)

    # === Element access ===

    def _check_signature(self, signature: int) -> None:
        if isinstance(signature, bool) or not isinstance(signature, numbers.Integral):
            raise TypeError(f"Blade signature must be an integer, got {type(signature).__name__}")
        if not 0 <= signature < self.size:
            raise BladeIndexError(
                f"Blade signature {signature} outside [0, {self.size}) "
                f"for {self.dimension_count} dimensions"
            )

    def set_element(self, signature: int, value: ScalarLike) -> None:
        """Store value as the coefficient of the blade with this signature."""
        self._check_signature(signature)
        self.coefficients[signature] = value

    def get_element(self, signature: int) -> float:
        """Coefficient of the blade with this signature."""
        self._check_signature(signature)
        return float(self.coefficients[signature])

    def scalar(self) -> float:
        """Grade-0 coefficient."""
        return float(self.coefficients[0])

    def grade(self, k: int) -> 'Multivector':
        """Extract the grade-k part; other grades are zeroed."""
        mask = (_grades(self.dimension_count) == k).to(self.dtype)
        return Multivector(self.dimension_count, self.coefficients * mask)

    def items(self) -> Iterator[Tuple[int, float]]:
        """(signature, coefficient) pairs in natural position order."""
        for signature in self.position_to_signature:
            yield signature, float(self.coefficients[signature])

    # === Geometric product ===

    def _check_compatible(self, other: 'Multivector') -> None:
        if not isinstance(other, Multivector):
            raise TypeError(f"Expected a Multivector, got {type(other).__name__}")
        if other.dimension_count != self.dimension_count:
            raise DimensionMismatchError(
                f"Cannot combine multivectors of {self.dimension_count} and "
                f"{other.dimension_count} dimensions"
            )

    def _product_coefficients(self, other: 'Multivector') -> torch.Tensor:
        """
        Coefficients of self * other.

        Every blade pair (a, b) contributes A[a] * B[b] * sign(a, b) to the
        slot a ^ b.
        """
        self._check_compatible(other)
        signs, indices = _cayley_table(self.dimension_count)
        dtype = torch.promote_types(self.dtype, other.dtype)

        # (2^n, 1) * (1, 2^n) -> all pairwise products
        products = (
            self.coefficients.to(dtype).unsqueeze(-1)
            * other.coefficients.to(dtype).unsqueeze(-2)
            * signs.to(dtype)
        )

        result = torch.zeros(self.size, dtype=dtype)
        result.index_add_(0, indices.reshape(-1), products.reshape(-1))
        return result

    def multiply(self, other: 'Multivector') -> 'Multivector':
        """Geometric product self * other as a new multivector."""
        return Multivector(self.dimension_count, self._product_coefficients(other))

    def multiply_in_place(self, other: 'Multivector') -> None:
        """Replace this multivector's coefficients with self * other, keeping its dtype."""
        self.coefficients = self._product_coefficients(other).to(self.dtype)

    # === Involutions ===

    def involute(self, grade_addend: int, grade_divisor: int) -> 'Multivector':
        """
        Grade-dependent sign flip.

        The coefficient of every blade of grade g is negated iff
        floor((g + grade_addend) / grade_divisor) is odd.

        Args:
            grade_addend: Offset added to the grade
            grade_divisor: Positive divisor applied after the offset
        """
        if grade_divisor < 1:
            raise ValueError(f"grade_divisor must be >= 1, got {grade_divisor}")
        signs = _involution_signs(self.dimension_count, grade_addend, grade_divisor)
        return Multivector(self.dimension_count, self.coefficients * signs.to(self.dtype))

    def space_inverted(self) -> 'Multivector':
        """Space inversion: negate odd grades."""
        return self.involute(*SPACE_INVERSION)

    def reverted(self) -> 'Multivector':
        """
        Reversion: ~M

        Reverses the order of basis vectors in each blade.
        Grades 2 and 3 (mod 4) change sign.
        """
        return self.involute(*REVERSION)

    def conjugated(self) -> 'Multivector':
        """
        Clifford conjugation: reversion combined with space inversion.

        Grades 1 and 2 (mod 4) change sign.
        """
        return self.involute(*CONJUGATION)

    # === Inverse ===

    def norm_squared(self) -> float:
        """Scalar part of M * ~M."""
        return self.multiply(self.reverted()).scalar()

    def multiplicative_inverse(self) -> 'Multivector':
        """
        Multiplicative inverse M^{-1} with M * M^{-1} = 1.

        Builds a nominator N from conjugates so that M * N is a pure scalar,
        then divides:

            n = 2:  N = conj(M)
            n = 3:  N = conj(M) * reverse(M * conj(M))
            n = 4:  N = conj(M) * involute_{1,4}(M * conj(M))

            M^{-1} = N / <M * N>_0

        Raises:
            UnsupportedDimensionError: n is not 2, 3 or 4
            NonInvertibleError: <M * N>_0 is zero
        """
        if self.dimension_count not in INVERTIBLE_DIMENSIONS:
            raise UnsupportedDimensionError(
                f"Multiplicative inverse is implemented for {INVERTIBLE_DIMENSIONS} "
                f"dimensions, got {self.dimension_count}"
            )

        conjugated = self.conjugated()
        if self.dimension_count == 2:
            nominator = conjugated
        else:
            conjugated_product = self.multiply(conjugated)
            if self.dimension_count == 3:
                conjugated_involuted = conjugated_product.reverted()
            else:
                conjugated_involuted = conjugated_product.involute(*QUADRIC_INVOLUTION)
            nominator = conjugated.multiply(conjugated_involuted)

        divisor = self.multiply(nominator).scalar()
        logger.debug(f"Inverse divisor for {self.dimension_count} dimensions: {divisor}")
        if divisor == 0.0:
            raise NonInvertibleError("Multivector is not invertible (divisor is zero)")

        return Multivector(self.dimension_count, nominator.coefficients / divisor)

    # === Comparison ===

    def allclose(
        self,
        other: 'Multivector',
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Coefficient-wise comparison within tolerance."""
        self._check_compatible(other)
        dtype = torch.promote_types(self.dtype, other.dtype)
        return torch.allclose(
            self.coefficients.to(dtype), other.coefficients.to(dtype), rtol=rtol, atol=atol
        )

    # === Operators ===

    def __add__(self, other: 'Multivector') -> 'Multivector':
        """Addition."""
        if isinstance(other, Multivector):
            self._check_compatible(other)
            return Multivector(self.dimension_count, self.coefficients + other.coefficients)
        return NotImplemented

    def __sub__(self, other: 'Multivector') -> 'Multivector':
        """Subtraction."""
        if isinstance(other, Multivector):
            self._check_compatible(other)
            return Multivector(self.dimension_count, self.coefficients - other.coefficients)
        return NotImplemented

    def __neg__(self) -> 'Multivector':
        """Negation."""
        return Multivector(self.dimension_count, -self.coefficients)

    def __mul__(self, other: Union['Multivector', float]) -> 'Multivector':
        """Geometric product, or scaling by a real number."""
        if isinstance(other, Multivector):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return Multivector(self.dimension_count, self.coefficients * other)
        return NotImplemented

    def __rmul__(self, other: float) -> 'Multivector':
        """Right multiplication by scalar."""
        if isinstance(other, numbers.Real):
            return Multivector(self.dimension_count, self.coefficients * other)
        return NotImplemented

    def __imul__(self, other: Union['Multivector', float]) -> 'Multivector':
        if isinstance(other, Multivector):
            self.multiply_in_place(other)
            return self
        if isinstance(other, numbers.Real):
            self.coefficients = self.coefficients * other
            return self
        return NotImplemented

    def __truediv__(self, other: float) -> 'Multivector':
        """Division by scalar."""
        if isinstance(other, numbers.Real):
            return Multivector(self.dimension_count, self.coefficients / other)
        return NotImplemented

    def __invert__(self) -> 'Multivector':
        """Operator ~: reversion."""
        return self.reverted()

    def __str__(self) -> str:
        terms = []
        for signature, value in self.items():
            if signature == 0:
                terms.append(f"{value!r}")
            else:
                terms.append(f"{value!r}*{blade_name(signature)}")
        return " + ".join(terms)

    def __repr__(self) -> str:
        return f"Multivector(dimension_count={self.dimension_count}, dtype={self.dtype})"


# === Factory functions ===

def generate(dimension_count: int, dtype: Optional[torch.dtype] = None) -> Multivector:
    """Create a zero multivector with fully built blade tables."""
    return Multivector(dimension_count, dtype=dtype)


def identity(dimension_count: int, dtype: Optional[torch.dtype] = None) -> Multivector:
    """Create the multiplicative identity (scalar 1)."""
    return basis_blade(dimension_count, 0, 1.0, dtype=dtype)


def basis_blade(
    dimension_count: int,
    signature: int,
    value: ScalarLike = 1.0,
    dtype: Optional[torch.dtype] = None,
) -> Multivector:
    """Create a single-blade multivector value * e_signature."""
    mv = generate(dimension_count, dtype=dtype)
    mv.set_element(signature, value)
    return mv


def from_coefficients(
    values: Union[torch.Tensor, Sequence[float]],
    dtype: Optional[torch.dtype] = None,
) -> Multivector:
    """
    Create a multivector from a full coefficient list.

    The dimension count is inferred from the length, which must be a power
    of two between 2^2 and 2^8.
    """
    length = len(values)
    dimension_count = length.bit_length() - 1
    if length < 1 or length != 1 << dimension_count:
        raise ConstructionError(f"Coefficient count must be a power of two, got {length}")
    return Multivector(dimension_count, values, dtype=dtype)


def random_multivector(
    dimension_count: int,
    generator: Optional[torch.Generator] = None,
    low: float = -1.0,
    high: float = 1.0,
    dtype: Optional[torch.dtype] = None,
) -> Multivector:
    """Create a multivector with coefficients drawn uniformly from [low, high)."""
    _check_dimension_count(dimension_count)
    values = torch.rand(1 << dimension_count, generator=generator, dtype=dtype or DEFAULT_DTYPE)
    return Multivector(dimension_count, values * (high - low) + low)
