"""
Type aliases for cliffmv.

Blade signatures are plain ints: bit i set means basis vector e(i+1)
participates in the blade, and the popcount of the signature is its grade.
Coefficients live in 1-D tensors of length 2^n indexed by signature.
"""

from typing import Tuple, Union

import torch

# n-bit blade signature
Signature = int

# Real value accepted wherever a single coefficient is expected
ScalarLike = Union[int, float, torch.Tensor]

# Dense coefficient vector of shape (2^n,)
CoefficientTensor = torch.Tensor

# Position <-> signature lookup table
BladeTable = Tuple[int, ...]

# (signs, indices) pair of (2^n, 2^n) tensors
CayleyTable = Tuple[torch.Tensor, torch.Tensor]
