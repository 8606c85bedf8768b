"""Exceptions raised by binstat.

Recoverable conditions derive from :class:`StatisticsError` and are meant
to be caught by callers. Broken preconditions (wrong dimensionality,
mismatched batch lengths, unwrapping an empty bin) raise ``ValueError``.
"""


class StatisticsError(Exception):
    """Base class for recoverable statistics failures."""


class BinNotFound(StatisticsError):
    """The sample does not fall into any bin of the grid."""

    def __init__(self, point=None):
        self.point = point
        if point is None:
            msg = "No bin contains the sample."
        else:
            msg = f"No bin contains the sample {point!r}."
        super().__init__(msg)


class EmptyInput(StatisticsError):
    """The input collection was empty."""

    def __init__(self, msg: str = "Empty input."):
        super().__init__(msg)
