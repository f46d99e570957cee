import numbers
import operator

import numpy as np

#ordered from narrowest to widest
NUMERIC_TOWER = (numbers.Integral, numbers.Rational, numbers.Real)

def is_real_scalar(value):
    return isinstance(value, numbers.Real)

def inexact_type(value):
    """Return `True` if numpy regards the scalar `value` as a floating
    point (rather than an integer or rational) number.

    """
    nparr = np.asarray(value)
    return np.issubdtype(nparr.dtype, np.inexact)

def _tower_rank(value):
    for rank, abc in enumerate(NUMERIC_TOWER):
        if isinstance(value, abc):
            return rank

def _numpy_compatible(value):
    return isinstance(value, (np.generic, int, float))

def promote(a, b):
    """Convert a pair of real scalars to a common type.

    Parameters
    ----------
    a, b : numbers.Real
        scalars to promote. Booleans are treated as integers.

    Returns
    -------
    tuple
        `(a, b)`, both converted to the same type. If either scalar
        is a numpy scalar, the common type is determined by numpy's
        promotion rules. Otherwise the wider of the two types in the
        numeric tower `Integral < Rational < Real` is used.

    Raises
    ------
    TypeError
        Raised if either `a` or `b` is not a real scalar.

    """
    for value in (a, b):
        if not is_real_scalar(value):
            raise TypeError(
                "Expected a real scalar, got an object of type {}".format(
                    type(value).__name__
                ))

    if isinstance(a, bool):
        a = int(a)
    if isinstance(b, bool):
        b = int(b)

    if type(a) is type(b):
        return a, b

    if ((isinstance(a, np.generic) or isinstance(b, np.generic)) and
        _numpy_compatible(a) and _numpy_compatible(b)):
        scalar_type = np.result_type(a, b).type
        return scalar_type(a), scalar_type(b)

    #exact python types must not inherit fixed-width numpy integers
    if isinstance(a, np.integer):
        a = operator.index(a)
    if isinstance(b, np.integer):
        b = operator.index(b)

    scalar_type = type(a)
    if _tower_rank(b) > _tower_rank(a):
        scalar_type = type(b)

    return scalar_type(a), scalar_type(b)

def zero_like(value):
    """Get the additive identity in the same representation as `value`."""
    return type(value)(0)

def one_like(value):
    return type(value)(1)
