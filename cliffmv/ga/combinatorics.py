"""
Blade index generation for Euclidean Clifford algebras.

A blade of grade k in an n-dimensional algebra is a product of k distinct
basis vectors, so the grade-k blades correspond one-to-one with the
k-element subsets of {0, ..., n-1}. Subsets are encoded as bit signatures:

    {0}       -> 0b001  (e1)
    {0, 2}    -> 0b101  (e13)
    {0, 1, 2} -> 0b111  (e123)

There are C(n, k) blades of grade k and 2^n blades in total.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..core.constants import MAX_DIMENSIONS
from ..core.errors import ConstructionError


# === Scalar helpers ===

def factorial(n: int) -> int:
    """n! for n >= 0."""
    if n < 0:
        raise ValueError(f"factorial requires n >= 0, got {n}")
    return falling_factorial(n, n)


def falling_factorial(n: int, k: int) -> int:
    """
    Falling factorial n * (n-1) * ... * (n-k+1).

    Args:
        n: Top of the product
        k: Number of factors

    Returns:
        The product of k consecutive descending integers starting at n
    """
    if n < 0 or k < 0:
        raise ValueError(f"falling_factorial requires n, k >= 0, got n={n}, k={k}")
    result = 1
    for i in range(k):
        result *= n - i
    return result


def binomial(n: int, k: int) -> int:
    """Number of k-element subsets of an n-element set."""
    if k > n:
        return 0
    return falling_factorial(n, k) // factorial(k)


def popcount(x: int) -> int:
    """Number of set bits in a non-negative int (the grade of a signature)."""
    if x < 0:
        raise ValueError(f"popcount requires a non-negative value, got {x}")
    return bin(x).count('1')


# === Combination sets ===

@dataclass(frozen=True)
class CombinationSet:
    """
    All grade-k blade signatures of an n-dimensional algebra.

    Attributes:
        n: Number of basis vectors
        k: Grade (subset size)
        signatures: Signatures in generation order
    """
    n: int
    k: int
    signatures: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.signatures)

    def __iter__(self) -> Iterator[int]:
        return iter(self.signatures)


def _collect(n: int, k: int, start: int, prefix: int, out: List[int]) -> None:
    """Append every signature extending `prefix` with k indices >= start."""
    if k == 0:
        out.append(prefix)
        return
    # Leave room for the k-1 indices that must follow
    for index in range(start, n - k + 1):
        _collect(n, k - 1, index + 1, prefix | (1 << index), out)


def generate_combinations(n: int, k: int) -> CombinationSet:
    """
    Enumerate the grade-k blades of an n-dimensional algebra.

    Subsets are produced recursively: the smallest index is fixed first and
    the remaining indices are chosen from strictly larger values. Callers
    only ever address coefficients by signature, so the order matters for
    internal layout alone.

    Args:
        n: Number of basis vectors, 0 <= n <= 8
        k: Grade, 0 <= k <= n

    Returns:
        CombinationSet holding exactly C(n, k) distinct signatures
    """
    if not 0 <= k <= n <= MAX_DIMENSIONS:
        raise ConstructionError(
            f"Combinations require 0 <= k <= n <= {MAX_DIMENSIONS}, got n={n}, k={k}"
        )

    signatures: List[int] = []
    _collect(n, k, 0, 0, signatures)

    if len(signatures) != binomial(n, k):
        raise RuntimeError(
            f"Generated {len(signatures)} combinations for n={n}, k={k}, "
            f"expected {binomial(n, k)}"
        )
    return CombinationSet(n=n, k=k, signatures=tuple(signatures))
