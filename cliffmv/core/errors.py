"""
Error taxonomy for cliffmv.

Every error derives from CliffordError and from the builtin exception that
best describes it, so callers may catch either the library base class or the
familiar builtin:

    CliffordError
    ├── ConstructionError          (ValueError)
    ├── BladeIndexError            (IndexError)
    ├── DimensionMismatchError     (ValueError)
    ├── UnsupportedDimensionError  (NotImplementedError)
    └── NonInvertibleError         (ZeroDivisionError)
"""


class CliffordError(Exception):
    """Base class for all cliffmv errors."""


class ConstructionError(CliffordError, ValueError):
    """Invalid dimension count, coefficient length or combination request."""


class BladeIndexError(CliffordError, IndexError):
    """Blade signature outside the range of the algebra."""


class DimensionMismatchError(CliffordError, ValueError):
    """Binary operation between multivectors of different dimension counts."""


class UnsupportedDimensionError(CliffordError, NotImplementedError):
    """Operation has no implementation for the requested dimension count."""


class NonInvertibleError(CliffordError, ZeroDivisionError):
    """Multivector has no multiplicative inverse."""
