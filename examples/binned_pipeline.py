#!/usr/bin/env python3
"""Example: per-bin statistics and shape statistics with binstat.

Bins a noisy 2D field on a regular grid, streams samples through a
BinnedStatistic, then inspects the distribution inside one bin.
"""

import logging

import numpy as np
from binstat import (
    BinContent,
    BinNotFound,
    BinnedStatistic,
    Bins,
    Grid,
    SummaryStatistics,
    binned_statistic,
)


def create_sample_field(n_samples=5000, seed=42):
    """Points in [-1.2, 1.2]^2 with a value that grows with the radius."""
    rng = np.random.default_rng(seed)
    points = rng.uniform(-1.2, 1.2, size=(n_samples, 2))
    radius = np.hypot(points[:, 0], points[:, 1])
    values = 3.0 * radius + rng.normal(scale=0.5, size=n_samples)
    return points, values


def example_streaming():
    """Feed samples one at a time."""
    print("=== Streaming Example ===")

    points, values = create_sample_field()
    bins = Bins(np.linspace(-1.0, 1.0, 5))
    grid = Grid([bins, bins])
    bs = BinnedStatistic(grid)

    outside = 0
    for point, value in zip(points, values):
        try:
            bs.add_sample(point, value)
        except BinNotFound:
            outside += 1

    print(f"{bs}, {outside} samples outside the grid")
    print("Mean per bin:")
    print(np.round(bs.mean, 2))
    print("Standard deviation per bin:")
    print(np.round(bs.standard_deviation, 2))
    print()


def example_batch_with_empty_bins():
    """Batch ingestion on a grid where some bins stay empty."""
    print("=== Batch / Empty Bins Example ===")

    points, values = create_sample_field(n_samples=20)
    edges = np.linspace(-1.0, 1.0, 9)
    grid = Grid([Bins(edges), Bins(edges)])
    bs = binned_statistic(points, values, grid)

    means = bs.mean_binned()
    n_empty = sum(1 for content in means.flat if content.is_empty())
    print(f"{n_empty} of {means.size} bins are empty")

    total = sum(bs.sum_binned().flat, BinContent.zero())
    print(f"Total of all values inside the grid: {total.unwrap_or(0.0):.3f}")
    print()


def example_shape_statistics():
    """Moments of the values that landed in one Gaussian-quantile bin."""
    print("=== Shape Statistics Example ===")

    rng = np.random.default_rng(0)
    x = rng.normal(size=10000)
    values = rng.gamma(2.0, size=10000)
    grid = Grid([Bins.gaussian_quantiles(4)])
    bs = binned_statistic(x, values, grid)
    print(f"Counts per quantile bin: {bs.count.tolist()}")

    in_first_bin = values[x < grid.projections[0].range(0)[1]]
    s = SummaryStatistics(in_first_bin)
    print(f"mean={s.mean():.3f} (binned: {bs.mean[0]:.3f})")
    print(f"variance={s.central_moment(2):.3f} (binned: {bs.variance[0]:.3f})")
    print(f"skewness={s.skewness():.3f}, kurtosis={s.kurtosis():.3f}")
    print(f"central moments up to 6: {np.round(s.central_moments(6), 3).tolist()}")
    print()


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG)
    print("binstat Examples")
    print("=" * 50)

    example_streaming()
    example_batch_with_empty_bins()
    example_shape_statistics()

    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
