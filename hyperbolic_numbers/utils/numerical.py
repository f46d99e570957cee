import numpy as np

#same as numpy's defaults for allclose
RTOL = 1e-05
ATOL = 1e-08

def pairs_close(pair1, pair2, rtol=RTOL, atol=ATOL):
    """Determine whether two pairs of real scalars agree up to a
    tolerance.

    Exact scalar types (e.g. `fractions.Fraction`) are converted to
    floats before comparing.

    """
    return np.allclose(np.asarray(pair1, dtype=float),
                       np.asarray(pair2, dtype=float),
                       rtol=rtol, atol=atol)
