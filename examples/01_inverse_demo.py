"""
Example 01: Multiplicative Inverse in Four Dimensions

Demonstrates:
1. Building a 4-D multivector blade by blade.
2. Computing its grade involutions.
3. Inverting it and checking that M * M^{-1} is the identity.
4. Inverting a seeded random multivector of the configured dimension count.

Optionally reads a JSON config (see cliffmv.utils.Config) as the first
command-line argument.
"""

import logging
import sys

import cliffmv
from cliffmv.core.errors import UnsupportedDimensionError
from cliffmv.utils import Config, load_config

# =============================================================================
# 1. Sample Multivector (signature -> coefficient)
# =============================================================================

SAMPLE_COEFFICIENTS = {
    0b0000: 1.0,   # scalar
    0b0001: 20.0,  # e1
    0b0010: 31.0,  # e2
    0b0100: 42.0,  # e3
    0b0011: 5.0,   # e12
    0b0101: 6.0,   # e13
    0b0110: 7.0,   # e23
    0b0111: 8.0,   # e123
    0b1000: 3.0,   # e4
    0b1001: 2.0,   # e14
    0b1010: 3.0,   # e24
    0b1011: 15.0,  # e124
    0b1100: 4.0,   # e34
    0b1101: 16.0,  # e134
    0b1110: 17.0,  # e234
    0b1111: 18.0,  # e1234
}


def main():
    config = load_config(sys.argv[1]) if len(sys.argv) > 1 else Config()
    logging.basicConfig(level=config.log_level)

    mv = cliffmv.generate(4, dtype=config.torch_dtype)
    for signature, value in SAMPLE_COEFFICIENTS.items():
        mv.set_element(signature, value)

    print("M           =", mv)
    print("reverted    =", mv.reverted())
    print("conjugated  =", mv.conjugated())
    print("space inv.  =", mv.space_inverted())

    # =========================================================================
    # 2. Inverse
    # =========================================================================

    inverse = mv.multiplicative_inverse()
    product = mv.multiply(inverse)

    print("M^-1        =", inverse)
    print("M * M^-1    =", product)

    identity = cliffmv.identity(4, dtype=config.torch_dtype)
    ok = product.allclose(identity, rtol=config.rtol, atol=config.atol)
    print("identity recovered:", ok)

    # =========================================================================
    # 3. Random Multivector of the Configured Dimension
    # =========================================================================

    n = config.dimension_count
    random_mv = cliffmv.random_multivector(
        n, generator=config.make_generator(), low=-0.2, high=0.2, dtype=config.torch_dtype
    )
    # A dominant scalar part keeps the divisor well away from zero
    random_mv.set_element(0, 4.0)
    print(f"random {n}-D  =", random_mv)

    try:
        random_inverse = random_mv.multiplicative_inverse()
    except UnsupportedDimensionError as e:
        print("no inverse:", e)
        return

    ok = random_mv.multiply(random_inverse).allclose(
        cliffmv.identity(n, dtype=config.torch_dtype), rtol=config.rtol, atol=config.atol
    )
    print("identity recovered:", ok)


if __name__ == "__main__":
    main()
