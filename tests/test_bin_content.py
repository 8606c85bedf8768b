"""Tests for empty-aware bin values."""

import numpy as np
import pytest
from binstat.histogram.bin_content import BinContent


EMPTY = BinContent.empty()


class TestBinContent:
    """Test cases for BinContent class."""

    def test_predicates(self):
        """is_value / is_empty / contains."""
        assert BinContent(2).is_value()
        assert not BinContent(2).is_empty()
        assert EMPTY.is_empty()
        assert BinContent(2).contains(2)
        assert not BinContent(3).contains(2)
        assert not EMPTY.contains(2)

    def test_none_is_a_value(self):
        """An explicit None payload is not the same as an empty bin."""
        assert BinContent(None).is_value()
        assert BinContent(None) != EMPTY

    def test_unwrap(self):
        """unwrap returns the payload or raises on an empty bin."""
        assert BinContent(2.5).unwrap() == 2.5
        with pytest.raises(ValueError):
            EMPTY.unwrap()

    def test_unwrap_fallbacks(self):
        """unwrap_or and unwrap_or_else never raise."""
        assert BinContent(2).unwrap_or(0) == 2
        assert EMPTY.unwrap_or(0) == 0
        assert BinContent(2).unwrap_or_else(lambda: 7) == 2
        assert EMPTY.unwrap_or_else(lambda: 7) == 7

    def test_identities(self):
        """zero() is empty, one() holds 1."""
        assert BinContent.zero() == EMPTY
        assert BinContent.zero().is_zero()
        assert BinContent.one() == BinContent(1)
        assert BinContent.one().is_one()
        assert not EMPTY.is_one()
        assert not BinContent(2).is_zero()

    def test_add(self):
        """Empty is the additive identity."""
        assert EMPTY + EMPTY == EMPTY
        assert BinContent(2) + EMPTY == BinContent(2)
        assert EMPTY + BinContent(2) == BinContent(2)
        assert BinContent(2) + BinContent(2) == BinContent(4)

    def test_sub(self):
        """Subtracting from an empty bin negates."""
        assert EMPTY - EMPTY == EMPTY
        assert BinContent(2) - EMPTY == BinContent(2)
        assert EMPTY - BinContent(2) == BinContent(-2)
        assert BinContent(5) - BinContent(2) == BinContent(3)

    @pytest.mark.parametrize("op", [
        lambda a, b: a * b,
        lambda a, b: a / b,
        lambda a, b: a % b,
    ])
    def test_multiplicative_ops_absorb_empty(self, op):
        """Empty absorbs under *, / and %."""
        assert op(EMPTY, EMPTY) == EMPTY
        assert op(BinContent(2), EMPTY) == EMPTY
        assert op(EMPTY, BinContent(2)) == EMPTY

    def test_multiplicative_ops_on_values(self):
        """*, / and % apply to the payloads."""
        assert BinContent(3) * BinContent(2) == BinContent(6)
        assert BinContent(3.0) / BinContent(2.0) == BinContent(1.5)
        assert BinContent(7) % BinContent(4) == BinContent(3)

    def test_neg(self):
        """Negation keeps emptiness."""
        assert -BinContent(2) == BinContent(-2)
        assert -EMPTY == EMPTY

    def test_in_place_ops(self):
        """Augmented assignment follows the same table."""
        x = BinContent(2)
        x += EMPTY
        assert x == BinContent(2)
        x *= EMPTY
        assert x == EMPTY
        x -= BinContent(1)
        assert x == BinContent(-1)

    def test_sum_of_bins(self):
        """Summing bins ignores the empty ones."""
        bins = [EMPTY, BinContent(1.0), EMPTY, BinContent(2.5)]

        assert sum(bins, BinContent.zero()) == BinContent(3.5)
        assert sum([EMPTY, EMPTY], BinContent.zero()) == EMPTY

    def test_mixed_operands(self):
        """Bare numbers are not BinContent."""
        with pytest.raises(TypeError):
            BinContent(2) + 1

    def test_hash_and_repr(self):
        """Equal bins hash equally and have readable reprs."""
        assert hash(BinContent(2)) == hash(BinContent(2))
        assert len({EMPTY, BinContent.empty(), BinContent(1)}) == 2
        assert repr(EMPTY) == "BinContent.empty()"
        assert repr(BinContent(2)) == "BinContent(2)"

    def test_array_payloads(self):
        """Bins holding arrays compare element-wise as a whole."""
        assert BinContent(np.array([1.0, 2.0])) == BinContent(np.array([1.0, 2.0]))
        assert BinContent(np.array([1.0, 2.0])) != BinContent(np.array([1.0, 3.0]))
        assert BinContent(np.array([1.0, 2.0])) != EMPTY
