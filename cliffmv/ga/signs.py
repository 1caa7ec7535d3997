"""
Sign rule for the geometric product of basis blades.

For blades e_A and e_B given by signatures a and b, the product is

    e_A * e_B = sign(a, b) * e_{a XOR b}

where the symmetric difference follows from e_i * e_i = +1 (Euclidean
metric), and the sign is (-1)^(number of adjacent swaps needed to bring the
concatenated basis vectors of A then B into ascending order).

Two implementations are provided:
- sign_of_blade_product: bit-level scan of a combined 16-bit word
- reordering_sign: explicit bubble sort over index lists, used as an oracle
"""

from __future__ import annotations
from functools import lru_cache
from typing import List
import logging

import torch

from ..core.constants import SIGNATURE_BITS
from ..core.errors import BladeIndexError
from ..core.types import CayleyTable
from .combinatorics import popcount

logger = logging.getLogger(__name__)

_SIGNATURE_LIMIT = 1 << SIGNATURE_BITS


def _check_signature(signature: int) -> None:
    if not 0 <= signature < _SIGNATURE_LIMIT:
        raise BladeIndexError(
            f"Blade signature {signature} outside [0, {_SIGNATURE_LIMIT})"
        )


def sign_of_blade_product(sig_a: int, sig_b: int) -> int:
    """
    Sign picked up when multiplying blade sig_a by blade sig_b.

    The right operand sits in the high byte and the left operand in the low
    byte of a 16-bit word, so the word reads (from bit 15 down to bit 0) as
    the basis vectors of B followed by those of A. Scanning indices upward,
    each vector e_i of B travels down to bit i. Every set bit strictly
    between bit 8+i and bit i is one anticommuting swap. If A also holds
    e_i the pair cancels, otherwise e_i joins A at bit i.

    Args:
        sig_a: Signature of the left blade
        sig_b: Signature of the right blade

    Returns:
        +1 or -1
    """
    _check_signature(sig_a)
    _check_signature(sig_b)

    combined = (sig_b << SIGNATURE_BITS) | sig_a
    sign = 1

    for i in range(SIGNATURE_BITS):
        low = 1 << i
        high = 1 << (SIGNATURE_BITS + i)
        if not combined & high:
            continue

        # Bits i+1 .. 8+i-1
        window = combined & (high - 1) & ~((low << 1) - 1)
        if popcount(window) & 1:
            sign = -sign

        if combined & low:
            combined ^= low | high
        else:
            combined ^= high
            combined |= low

    return sign


def _bits_to_indices(signature: int) -> List[int]:
    """Convert a signature to its ascending list of basis indices."""
    indices = []
    pos = 0
    while signature:
        if signature & 1:
            indices.append(pos)
        signature >>= 1
        pos += 1
    return indices


def reordering_sign(sig_a: int, sig_b: int) -> int:
    """
    Sign of a blade product by brute-force reordering.

    Concatenates the basis indices of A and B and bubble sorts them,
    flipping the sign on every swap of adjacent distinct vectors and
    contracting adjacent equal pairs (e_i * e_i = +1).
    """
    _check_signature(sig_a)
    _check_signature(sig_b)

    combined = _bits_to_indices(sig_a) + _bits_to_indices(sig_b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                combined.pop(i + 1)
                combined.pop(i)
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign = -sign
                changed = True
                i += 1
            else:
                i += 1

    return sign


@lru_cache(maxsize=None)
def _cayley_table(dimension_count: int) -> CayleyTable:
    """
    Build the Cayley table of Cl(n, 0). Cached; callers must not write to it.

    Args:
        dimension_count: Number of basis vectors n

    Returns:
        signs: (2^n, 2^n) float64 tensor of +1/-1
        indices: (2^n, 2^n) long tensor with indices[a, b] = a ^ b
    """
    dim = 1 << dimension_count
    signs = torch.tensor(
        [[sign_of_blade_product(a, b) for b in range(dim)] for a in range(dim)],
        dtype=torch.float64,
    )
    indices = torch.tensor(
        [[a ^ b for b in range(dim)] for a in range(dim)],
        dtype=torch.long,
    )

    logger.debug(f"Built Cayley table for {dimension_count} dimensions ({dim}x{dim})")
    return signs, indices


def cayley_table(dimension_count: int) -> CayleyTable:
    """Copy of the Cayley table of Cl(n, 0); see _cayley_table."""
    signs, indices = _cayley_table(dimension_count)
    return signs.clone(), indices.clone()
