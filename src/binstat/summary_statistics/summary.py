"""Summary statistics bound to one collection."""

import numpy as np

from . import means, moments
from .means import as_float_array


class SummaryStatistics:
    """Mean and moment computations over a fixed collection.

    Wraps the free functions of :mod:`binstat.summary_statistics.means`
    and :mod:`binstat.summary_statistics.moments` so that a collection can
    be queried repeatedly without passing it around.

    Parameters
    ----------
    data : array_like
        The collection. It is flattened and, if not floating, promoted to
        float64.

    Attributes
    ----------
    data : np.ndarray
        Flattened floating copy of the input.
    """

    def __init__(self, data):
        self.data = np.array(as_float_array(data), copy=True)

    def __len__(self) -> int:
        return self.data.size

    def mean(self):
        return means.mean(self.data)

    def harmonic_mean(self):
        return means.harmonic_mean(self.data)

    def geometric_mean(self):
        return means.geometric_mean(self.data)

    def moments(self, order: int):
        return moments.moments(self.data, order)

    def central_moment(self, order: int):
        return moments.central_moment(self.data, order)

    def central_moments(self, order: int):
        return moments.central_moments(self.data, order)

    def skewness(self):
        return moments.skewness(self.data)

    def kurtosis(self):
        return moments.kurtosis(self.data)

    def __repr__(self) -> str:
        return f"SummaryStatistics(n={self.data.size}, dtype={self.data.dtype})"
