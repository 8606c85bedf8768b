"""binstat: streaming binned statistics and central moments.

Per-bin running statistics over N-dimensional grids via Welford's
algorithm, empty-aware bin values, and arbitrary-order central moments
computed by one generic shift-and-expand algorithm.
"""

__version__ = "0.1.0"

from .errors import BinNotFound, EmptyInput, StatisticsError
from .histogram.bin_content import BinContent
from .histogram.binned_statistic import BinnedStatistic, binned_statistic
from .histogram.bins import BinLocator, Bins, Edges, Grid
from .summary_statistics.means import geometric_mean, harmonic_mean, mean
from .summary_statistics.moments import (
    binomial_coefficient,
    central_moment,
    central_moments,
    kurtosis,
    moments,
    skewness,
)
from .summary_statistics.summary import SummaryStatistics

__all__ = [
    "BinContent",
    "BinLocator",
    "BinNotFound",
    "BinnedStatistic",
    "Bins",
    "Edges",
    "EmptyInput",
    "Grid",
    "StatisticsError",
    "SummaryStatistics",
    "binned_statistic",
    "binomial_coefficient",
    "central_moment",
    "central_moments",
    "geometric_mean",
    "harmonic_mean",
    "kurtosis",
    "mean",
    "moments",
    "skewness",
]
