"""Central moments of any order.

The central moment of order k is obtained from the raw moments of the
mean-shifted data: with ``x' = x - mean(x)`` and ``c = -mean(x')`` (zero
up to rounding),

    m_k = sum_{i=0}^{k} C(k, i) * E[x'^(k-i)] * c^i

which is evaluated as a polynomial in ``c`` with Horner's method. Keeping
``c`` instead of dropping it absorbs the rounding error of the first
pass. Skewness and kurtosis are ratios of these moments.
"""

import operator
from typing import List, Sequence

import numpy as np

from .means import as_float_array, mean
from ..errors import EmptyInput


def binomial_coefficient(n: int, k: int) -> int:
    """Number of ways to choose `k` of `n` items.

    Raises
    ------
    ValueError
        If `k` is negative or greater than `n`.
    """
    if k < 0 or k > n:
        raise ValueError(f"Tried to compute C({n}, {k}) with k outside [0, n]")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def _check_order(order: int) -> int:
    order = operator.index(order)
    if order < 0:
        raise ValueError(f"Moment order must be >= 0, got {order}")
    return order


def moments(a, order: int) -> List[np.floating]:
    """Raw moments ``[1, E[x], E[x^2], ..., E[x^order]]``.

    Parameters
    ----------
    a : array_like
        Input values.
    order : int
        Highest moment to compute.

    Returns
    -------
    list
        ``order + 1`` moments, starting with the 0th (always 1).

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    """
    a = as_float_array(a)
    order = _check_order(order)
    if a.size == 0:
        raise EmptyInput("The moments of an empty array are not defined.")
    n_elements = a.dtype.type(a.size)
    result = [a.dtype.type(1)]
    if order >= 1:
        result.append(a.sum() / n_elements)
    for k in range(2, order + 1):
        result.append((a ** k).sum() / n_elements)
    return result


def _as_float(n: int, dtype: np.dtype):
    # Integers beyond the range of dtype become inf
    try:
        with np.errstate(over="ignore"):
            return dtype.type(n)
    except OverflowError:
        return dtype.type(np.inf)


def _central_moment_coefficients(shifted_moments: Sequence) -> List:
    # Coefficient of c^i is C(k, i) * E[x'^(k-i)]
    k = len(shifted_moments) - 1
    dtype = shifted_moments[0].dtype
    return [
        _as_float(binomial_coefficient(k, i), dtype) * moment
        for i, moment in enumerate(reversed(shifted_moments))
    ]


def _horner(coefficients: Sequence, x):
    # coefficients are ordered by ascending power of x
    result = 0
    for coefficient in reversed(coefficients):
        result = coefficient + x * result
    return result


def _shifted_moments(a: np.ndarray, order: int) -> List:
    shifted = a - mean(a)
    return moments(shifted, order)


def central_moment(a, order: int):
    """Central moment ``E[(x - mean(x))^order]``.

    Parameters
    ----------
    a : array_like
        Input values.
    order : int
        Order of the moment. 0 gives 1 and 1 gives 0 without touching the
        data beyond the emptiness check.
        For very high orders (above about 130 for float32 and 1000 for
        float64) the binomial coefficients no longer fit the floating type
        and the result is inf or NaN.

    Returns
    -------
    np.floating

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    TypeError
        If `order` is not an integer.
    """
    a = as_float_array(a)
    order = _check_order(order)
    if a.size == 0:
        raise EmptyInput("The central moments of an empty array are not defined.")
    if order == 0:
        return a.dtype.type(1)
    if order == 1:
        return a.dtype.type(0)
    shifted_moments = _shifted_moments(a, order)
    correction_term = -shifted_moments[1]
    coefficients = _central_moment_coefficients(shifted_moments)
    return _horner(coefficients, correction_term)


def central_moments(a, order: int) -> List[np.floating]:
    """All central moments up to `order`, sharing one shift of the data.

    ``central_moments(a, k)[i] == central_moment(a, i)`` for ``i <= k``.

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    """
    a = as_float_array(a)
    order = _check_order(order)
    if a.size == 0:
        raise EmptyInput("The central moments of an empty array are not defined.")
    result = [a.dtype.type(1)]
    if order == 0:
        return result
    result.append(a.dtype.type(0))
    if order == 1:
        return result

    shifted_moments = _shifted_moments(a, order)
    correction_term = -shifted_moments[1]
    for k in range(2, order + 1):
        coefficients = _central_moment_coefficients(shifted_moments[:k + 1])
        result.append(_horner(coefficients, correction_term))
    return result


def skewness(a):
    """Sample skewness ``m_3 / m_2^1.5`` (biased estimator).

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    """
    m = central_moments(a, 3)
    return m[3] / m[2] ** 1.5


def kurtosis(a):
    """Pearson kurtosis ``m_4 / m_2^2``; subtract 3 for excess kurtosis.

    Raises
    ------
    EmptyInput
        If `a` has no elements.
    """
    m = central_moments(a, 4)
    return m[4] / m[2] ** 2
