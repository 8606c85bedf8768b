"""Empty-aware bin values.

A :class:`BinContent` is either empty (the bin never received a sample)
or holds a value. Arithmetic is defined for every combination:

=====  ============  ============  ============  ============
op     empty, empty  value, empty  empty, value  value, value
=====  ============  ============  ============  ============
``+``  empty         value(v)      value(w)      value(v + w)
``-``  empty         value(v)      value(-w)     value(v - w)
``*``  empty         empty         empty         value(v * w)
``/``  empty         empty         empty         value(v / w)
``%``  empty         empty         empty         value(v % w)
=====  ============  ============  ============  ============

Empty is the additive identity and absorbs under ``*``, ``/`` and ``%``.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

_EMPTY = object()


class BinContent:
    """Content of one bin: empty, or a value.

    Instances are immutable. Build them with ``BinContent(x)`` for a
    filled bin and ``BinContent.empty()`` for an empty one.

    Parameters
    ----------
    value : object, optional
        Payload of a filled bin. Omit for an empty bin.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY):
        self._value = value

    @classmethod
    def empty(cls) -> "BinContent":
        return cls()

    @classmethod
    def zero(cls) -> "BinContent":
        """Additive identity, i.e. an empty bin."""
        return cls()

    @classmethod
    def one(cls) -> "BinContent":
        """Multiplicative identity, ``BinContent(1)``."""
        return cls(1)

    def is_value(self) -> bool:
        return self._value is not _EMPTY

    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def is_zero(self) -> bool:
        return self.is_empty()

    def is_one(self) -> bool:
        return self.is_value() and self._value == 1

    def contains(self, x) -> bool:
        """True if the bin holds a value equal to `x`."""
        return self.is_value() and self._value == x

    def unwrap(self):
        """Return the payload.

        Raises
        ------
        ValueError
            If the bin is empty. Prefer :meth:`unwrap_or` when emptiness is
            an expected outcome.
        """
        if self.is_empty():
            raise ValueError("called `BinContent.unwrap()` on an empty bin")
        return self._value

    def unwrap_or(self, default):
        """Return the payload, or `default` for an empty bin."""
        return self._value if self.is_value() else default

    def unwrap_or_else(self, f: Callable[[], Any]):
        """Return the payload, or ``f()`` for an empty bin."""
        return self._value if self.is_value() else f()

    # Arithmetic

    def __neg__(self) -> "BinContent":
        if self.is_empty():
            return self
        return BinContent(-self._value)

    def __add__(self, other):
        if not isinstance(other, BinContent):
            return NotImplemented
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return BinContent(self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, BinContent):
            return NotImplemented
        if other.is_empty():
            return self
        if self.is_empty():
            return -other
        return BinContent(self._value - other._value)

    def _absorbing(self, other, op):
        if not isinstance(other, BinContent):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return BinContent()
        return BinContent(op(self._value, other._value))

    def __mul__(self, other):
        return self._absorbing(other, lambda v, w: v * w)

    def __truediv__(self, other):
        return self._absorbing(other, lambda v, w: v / w)

    def __mod__(self, other):
        return self._absorbing(other, lambda v, w: v % w)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BinContent):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return bool(np.array_equal(self._value, other._value))

    def __hash__(self) -> int:
        return hash(None) if self.is_empty() else hash(self._value)

    def __repr__(self) -> str:
        if self.is_empty():
            return "BinContent.empty()"
        return f"BinContent({self._value!r})"
