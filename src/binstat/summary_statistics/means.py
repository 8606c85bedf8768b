"""Arithmetic, harmonic and geometric means.

All functions reduce over every element of the input, whatever its
shape, and raise :class:`~binstat.errors.EmptyInput` when there are none.
Floating inputs keep their dtype; anything else is promoted to float64.
"""

import numpy as np

from ..errors import EmptyInput


def as_float_array(a) -> np.ndarray:
    """Flatten `a` into a 1D floating array."""
    a = np.asarray(a)
    if not np.issubdtype(a.dtype, np.floating):
        a = a.astype(np.float64)
    return a.reshape(-1)


def mean(a):
    """Arithmetic mean of all elements.

    Parameters
    ----------
    a : array_like
        Input values.

    Returns
    -------
    np.floating
        ``sum(a) / n``.

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    """
    a = as_float_array(a)
    if a.size == 0:
        raise EmptyInput("The mean of an empty array is not defined.")
    return a.sum() / a.dtype.type(a.size)


def harmonic_mean(a):
    """Harmonic mean, ``1 / mean(1 / a)``.

    Zero or negative entries are not rejected. A zero entry makes the mean
    of reciprocals infinite, so the result is 0; negative entries can give
    any sign, inf or NaN.
    """
    a = as_float_array(a)
    if a.size == 0:
        raise EmptyInput("The harmonic mean of an empty array is not defined.")
    return np.reciprocal(mean(np.reciprocal(a)))


def geometric_mean(a):
    """Geometric mean, ``exp(mean(log(a)))``.

    Negative entries give NaN and zeros give 0; neither is rejected.
    """
    a = as_float_array(a)
    if a.size == 0:
        raise EmptyInput("The geometric mean of an empty array is not defined.")
    return np.exp(mean(np.log(a)))
