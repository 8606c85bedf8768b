"""Bin edges and grids.

A :class:`Grid` maps a d-dimensional point to the tuple of per-axis bin
indices it falls into. Bins are left-closed and right-open, so the last
edge of every axis is excluded.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import numpy as np
from scipy.stats import norm


BinIndex = Tuple[int, ...]


class BinLocator(Protocol):
    """Anything that can place a point on an N-dimensional grid."""

    @property
    def shape(self) -> Tuple[int, ...]:
        ...

    @property
    def ndim(self) -> int:
        ...

    def locate(self, point) -> Optional[BinIndex]:
        ...


class Edges:
    """Sorted, de-duplicated 1D bin edges.

    Parameters
    ----------
    values : array_like
        Edge positions, in any order. Duplicates are dropped.
    """

    def __init__(self, values: Iterable):
        edges = np.asarray(values if isinstance(values, np.ndarray) else list(values))
        if edges.ndim != 1:
            raise ValueError(f"Edges must be 1D, got {edges.ndim}D")
        self._edges = np.unique(edges)

    def __len__(self) -> int:
        return self._edges.shape[0]

    def __getitem__(self, i):
        return self._edges[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edges):
            return NotImplemented
        return np.array_equal(self._edges, other._edges)

    def as_array(self) -> np.ndarray:
        """Return a read-only view of the edges."""
        view = self._edges.view()
        view.setflags(write=False)
        return view

    def indices_of(self, value) -> Optional[Tuple[int, int]]:
        """Indices of the two consecutive edges enclosing `value`.

        Parameters
        ----------
        value : scalar
            Coordinate along this axis.

        Returns
        -------
        tuple of int or None
            ``(i, i + 1)`` with ``edges[i] <= value < edges[i + 1]``, or None
            if `value` lies outside ``[edges[0], edges[-1])`` (NaN included).
        """
        n_edges = len(self)
        i = int(np.searchsorted(self._edges, value, side='right'))
        if i == 0 or i == n_edges:
            return None
        return i - 1, i

    def __repr__(self) -> str:
        return f"Edges({self._edges.tolist()})"


class Bins:
    """Consecutive left-closed, right-open intervals along one axis.

    Parameters
    ----------
    edges : Edges or array_like
        Interval boundaries. ``n`` edges give ``n - 1`` bins.
    """

    def __init__(self, edges):
        self.edges = edges if isinstance(edges, Edges) else Edges(edges)

    @classmethod
    def gaussian_quantiles(cls, n_bins: int, loc: float = 0.0, scale: float = 1.0) -> "Bins":
        """Bins holding equal probability mass under N(loc, scale**2).

        The outer edges are -inf and +inf, so every finite value lands in
        some bin.

        Parameters
        ----------
        n_bins : int
            Number of bins, at least 1.
        loc : float
            Mean of the normal distribution.
        scale : float
            Standard deviation of the normal distribution, positive.

        Returns
        -------
        Bins
        """
        n_bins = int(n_bins)
        if n_bins < 1:
            raise ValueError("n_bins must be >= 1")
        if scale <= 0:
            raise ValueError("scale must be > 0")
        qs = np.linspace(0, 1, n_bins + 1)
        return cls(norm.ppf(qs, loc=loc, scale=scale))

    def __len__(self) -> int:
        return max(len(self.edges) - 1, 0)

    def is_empty(self) -> bool:
        return len(self) == 0

    def index_of(self, value) -> Optional[int]:
        """Index of the bin containing `value`, or None."""
        found = self.edges.indices_of(value)
        if found is None:
            return None
        return found[0]

    def range(self, index: int) -> Tuple[float, float]:
        """``(lo, hi)`` bounds of bin `index`."""
        if not (0 <= index < len(self)):
            raise ValueError(f"Bin {index} out of range [0, {len(self)})")
        return self.edges[index], self.edges[index + 1]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bins):
            return NotImplemented
        return self.edges == other.edges

    def __repr__(self) -> str:
        return f"Bins(n_bins={len(self)})"


class Grid:
    """Cartesian product of per-axis :class:`Bins`.

    The i-th element of `projections` holds the bins along axis i.

    Parameters
    ----------
    projections : sequence of Bins
        One entry per axis; must not be empty.
    """

    def __init__(self, projections: Sequence[Bins]):
        projections = list(projections)
        if not projections:
            raise ValueError("A grid needs at least one axis of bins")
        self.projections: List[Bins] = projections

    @property
    def ndim(self) -> int:
        return len(self.projections)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(len(bins) for bins in self.projections)

    def locate(self, point) -> Optional[BinIndex]:
        """Bin index of `point`, or None if some coordinate is out of range.

        Raises
        ------
        ValueError
            If `point` does not have exactly `ndim` coordinates.
        """
        point = np.atleast_1d(np.asarray(point))
        if point.shape != (self.ndim,):
            raise ValueError(
                f"Dimensions do not match: point has shape {point.shape}, "
                f"while the grid has {self.ndim} dimensions."
            )
        index = []
        for coordinate, bins in zip(point, self.projections):
            i = bins.index_of(coordinate)
            if i is None:
                return None
            index.append(i)
        return tuple(index)

    def ranges(self, index: BinIndex) -> List[Tuple[float, float]]:
        """Per-axis ``(lo, hi)`` bounds of the cell at `index`."""
        if len(index) != self.ndim:
            raise ValueError(f"Expected a {self.ndim}-dimensional index, got {index!r}")
        return [bins.range(i) for i, bins in zip(index, self.projections)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.projections == other.projections

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape})"
