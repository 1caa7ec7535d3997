"""Compare the bit-scan blade sign rule against brute-force reordering."""
import sys

from cliffmv.core.constants import MIN_DIMENSIONS, MAX_DIMENSIONS
from cliffmv.ga.signs import sign_of_blade_product, reordering_sign
from cliffmv.ga.multivector import blade_name

max_dims = int(sys.argv[1]) if len(sys.argv) > 1 else MAX_DIMENSIONS

errors = []

for n in range(MIN_DIMENSIONS, max_dims + 1):
    dim = 1 << n
    for a in range(dim):
        for b in range(dim):
            fast = sign_of_blade_product(a, b)
            slow = reordering_sign(a, b)
            if fast != slow:
                errors.append((n, a, b, fast, slow))
    print(f"n={n}: checked {dim * dim} blade pairs")

if errors:
    print(f"\nFound {len(errors)} discrepancies:")
    for n, a, b, fast, slow in errors[:20]:
        print(f"  n={n}: {blade_name(a)} * {blade_name(b)}: bit-scan {fast:+d}, reordering {slow:+d}")
    sys.exit(1)

print("\nAll blade signs agree.")
