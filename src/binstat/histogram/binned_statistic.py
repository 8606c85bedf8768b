"""Per-bin online statistics using Welford's algorithm.

Each sample is routed to a cell of an N-dimensional grid and folded into
that cell's running count, sum, mean, variance, standard deviation, min
and max in O(1), without keeping the samples around.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional, Tuple

import numpy as np

from .bin_content import BinContent
from .bins import BinLocator
from ..errors import BinNotFound

logger = logging.getLogger(__name__)


class BinnedStatistic:
    """Running statistics for every bin of a grid.

    Usage:
        bs = BinnedStatistic(grid)
        for point, value in stream:
            try:
                bs.add_sample(point, value)
            except BinNotFound:
                pass
        bs.mean, bs.mean_binned()

    Empty bins hold 0 in `count`, `number`, `sum`, `mean`, `variance` and
    `standard_deviation`, ``inf`` in `min` and ``-inf`` in `max`. The
    ``*_binned()`` methods mark them explicitly with ``BinContent.empty()``.

    Parameters
    ----------
    grid : BinLocator
        Maps points to bin indices (see :class:`~binstat.histogram.bins.Grid`).
    dtype : numpy dtype
        Floating type of the statistics, float32 or wider so that `number`
        stays equal to `count`. `count` is always int64.

    Attributes
    ----------
    grid : BinLocator
        The grid the statistics are binned on.
    dtype : np.dtype
        Floating type of the statistics.
    """

    def __init__(self, grid: BinLocator, dtype=np.float64):
        self.dtype = np.dtype(dtype)
        if not np.issubdtype(self.dtype, np.floating):
            raise ValueError(f"dtype must be a floating type, got {self.dtype}")
        if np.finfo(self.dtype).nmant < 23:
            raise ValueError(
                f"dtype {self.dtype} cannot count samples exactly; "
                "use float32 or wider"
            )
        self.grid = grid

        shape = tuple(grid.shape)
        if 0 in shape:
            warnings.warn(
                f"Grid of shape {shape} has an axis without bins; "
                "every sample will be rejected",
                UserWarning
            )

        self._count = np.zeros(shape, dtype=np.int64)
        self._number = np.zeros(shape, dtype=self.dtype)
        self._sum = np.zeros(shape, dtype=self.dtype)
        self._mean = np.zeros(shape, dtype=self.dtype)
        self._variance = np.zeros(shape, dtype=self.dtype)
        self._standard_deviation = np.zeros(shape, dtype=self.dtype)
        self._min = np.full(shape, np.inf, dtype=self.dtype)
        self._max = np.full(shape, -np.inf, dtype=self.dtype)

    def add_sample(self, point, value: float) -> Tuple[int, ...]:
        """Fold one sample into the bin containing `point`.

        Parameters
        ----------
        point : array_like
            Coordinates, one per grid axis. A scalar is accepted for 1D grids.
        value : float
            Value attached to the sample.

        Returns
        -------
        tuple of int
            Index of the updated bin.

        Raises
        ------
        BinNotFound
            If no bin contains `point`. Nothing is modified.
        ValueError
            If `point` does not have exactly `ndim` coordinates.
        """
        point = np.atleast_1d(np.asarray(point))
        if point.shape != (self.ndim,):
            raise ValueError(
                f"Dimensions do not match: sample has shape {point.shape}, "
                f"while the binned statistic has {self.ndim} dimensions."
            )
        idx = self.grid.locate(point)
        if idx is None:
            raise BinNotFound(point)
        idx = tuple(idx)

        value = self.dtype.type(value)
        n1 = self._number[idx]

        self._count[idx] += 1
        self._number[idx] += 1
        self._sum[idx] += value

        n = self._number[idx]
        delta = value - self._mean[idx]
        delta_n = delta / n
        term1 = delta * delta_n * n1

        self._mean[idx] += delta_n
        self._variance[idx] = (self._variance[idx] * n1 + term1) / n
        self._standard_deviation[idx] = np.sqrt(self._variance[idx])

        # fmin/fmax keep the existing extremum when value is NaN
        self._min[idx] = np.fmin(self._min[idx], value)
        self._max[idx] = np.fmax(self._max[idx], value)
        return idx

    def add_samples(self, points: np.ndarray, values: np.ndarray) -> int:
        """Add a batch of samples, skipping those outside the grid.

        Parameters
        ----------
        points : np.ndarray
            Shape (n, d), one point per row. A 1D array of length n is read
            as n one-dimensional points.
        values : np.ndarray
            Shape (n,), values matching the rows of `points`.

        Returns
        -------
        int
            Number of samples skipped because no bin contained them.
        """
        points = np.asarray(points)
        values = np.asarray(values).reshape(-1)
        if points.ndim == 1:
            points = points[:, np.newaxis]
        if points.ndim != 2:
            raise ValueError(f"Expected 1D or 2D array of points, got {points.ndim}D")
        if points.shape[0] != values.shape[0]:
            raise ValueError(
                f"Got {points.shape[0]} points but {values.shape[0]} values"
            )

        skipped = 0
        for point, value in zip(points, values):
            try:
                self.add_sample(point, value)
            except BinNotFound:
                skipped += 1
        if skipped:
            logger.debug("Skipped %d of %d samples outside the grid", skipped, len(values))
        return skipped

    @property
    def ndim(self) -> int:
        """Number of dimensions of the grid."""
        return self._count.ndim

    @property
    def shape(self) -> Tuple[int, ...]:
        """Number of bins along each axis."""
        return self._count.shape

    @staticmethod
    def _view(a: np.ndarray) -> np.ndarray:
        view = a.view()
        view.setflags(write=False)
        return view

    @property
    def count(self) -> np.ndarray:
        """Samples per bin (a histogram)."""
        return self._view(self._count)

    @property
    def number(self) -> np.ndarray:
        """Samples per bin, as the statistic's floating type."""
        return self._view(self._number)

    @property
    def sum(self) -> np.ndarray:
        """Sum of values per bin (a weighted histogram)."""
        return self._view(self._sum)

    @property
    def mean(self) -> np.ndarray:
        """Mean of values per bin."""
        return self._view(self._mean)

    @property
    def variance(self) -> np.ndarray:
        """Population variance per bin."""
        return self._view(self._variance)

    @property
    def standard_deviation(self) -> np.ndarray:
        """Square root of `variance`, per bin."""
        return self._view(self._standard_deviation)

    @property
    def min(self) -> np.ndarray:
        """Smallest value per bin, ``inf`` for empty bins."""
        return self._view(self._min)

    @property
    def max(self) -> np.ndarray:
        """Largest value per bin, ``-inf`` for empty bins."""
        return self._view(self._max)

    def _binned(self, a: np.ndarray) -> np.ndarray:
        out = np.empty(a.shape, dtype=object)
        for idx, n in np.ndenumerate(self._count):
            out[idx] = BinContent(a[idx]) if n else BinContent.empty()
        return out

    def count_binned(self) -> np.ndarray:
        """`count` as an object array of :class:`BinContent`."""
        return self._binned(self._count)

    def number_binned(self) -> np.ndarray:
        """`number` as an object array of :class:`BinContent`."""
        return self._binned(self._number)

    def sum_binned(self) -> np.ndarray:
        """`sum` as an object array of :class:`BinContent`."""
        return self._binned(self._sum)

    def mean_binned(self) -> np.ndarray:
        """`mean` as an object array of :class:`BinContent`."""
        return self._binned(self._mean)

    def variance_binned(self) -> np.ndarray:
        """`variance` as an object array of :class:`BinContent`."""
        return self._binned(self._variance)

    def standard_deviation_binned(self) -> np.ndarray:
        """`standard_deviation` as an object array of :class:`BinContent`."""
        return self._binned(self._standard_deviation)

    def min_binned(self) -> np.ndarray:
        """`min` as an object array of :class:`BinContent`."""
        return self._binned(self._min)

    def max_binned(self) -> np.ndarray:
        """`max` as an object array of :class:`BinContent`."""
        return self._binned(self._max)

    def __repr__(self) -> str:
        return (f"BinnedStatistic(shape={self.shape}, dtype={self.dtype}, "
                f"n={int(self._count.sum())})")


def binned_statistic(
    samples: np.ndarray,
    values: np.ndarray,
    grid: BinLocator,
    dtype: Optional[np.dtype] = None
) -> BinnedStatistic:
    """Build a :class:`BinnedStatistic` from a batch of samples.

    Points outside the grid are ignored.

    Parameters
    ----------
    samples : np.ndarray
        Shape (n, d) with one d-dimensional point per row, or shape (n,)
        for one-dimensional points.
    values : np.ndarray
        Shape (n,), the value attached to each point.
    grid : BinLocator
        Grid to bin on.
    dtype : numpy dtype, optional
        Floating type of the statistics. Defaults to the dtype of `values`,
        widened to at least float32; non-floating values give float64.

    Returns
    -------
    BinnedStatistic

    Examples
    --------
    >>> bins = Bins([-1.0, 0.0, 1.0, 2.0])
    >>> grid = Grid([bins, bins])
    >>> samples = np.array([[1.5, 0.5], [-0.5, 1.5], [-1.0, -0.5], [0.5, -1.0]])
    >>> bs = binned_statistic(samples, np.array([12.0, -0.5, 1.0, 2.0]), grid)
    >>> bs.count
    array([[1, 0, 1],
           [1, 0, 0],
           [0, 1, 0]])
    """
    values = np.asarray(values)
    if dtype is None:
        if np.issubdtype(values.dtype, np.floating):
            dtype = np.promote_types(values.dtype, np.float32)
        else:
            dtype = np.float64
    bs = BinnedStatistic(grid, dtype=dtype)
    bs.add_samples(samples, values)
    return bs
