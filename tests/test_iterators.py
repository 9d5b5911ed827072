"""Tests for range iterators and grid unwinding."""

import math

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from learning_networks.errors import ConfigurationError, EmptyIteratorError
from learning_networks.ranges import NominalRange, NumericRange, iterator, make_range, unwind


class TestNominalIterator:
    """Tests for iterating nominal ranges."""

    def test_values_in_order(self):
        """Test nominal values are returned as given."""
        r = NominalRange("metric", ["euclidean", "manhattan", "chebyshev"])
        assert iterator(r) == ["euclidean", "manhattan", "chebyshev"]

    def test_n_ignored(self):
        """Test the number of points has no effect on nominal ranges."""
        r = NominalRange("metric", ["a", "b", "c"])
        assert iterator(r, 1) == ["a", "b", "c"]

    def test_repeats_not_removed(self):
        """Test nominal iterators keep repeated values."""
        r = NominalRange("metric", ["a", "a", "b"])
        assert iterator(r) == ["a", "a", "b"]


class TestNumericIterator:
    """Tests for iterating numeric ranges."""

    def test_linear_float(self):
        """Test evenly spaced float points."""
        r = NumericRange("alpha", 0.0, 1.0)
        assert iterator(r, 5) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    def test_log10_int(self):
        """Test a log10 integer range over orders of magnitude."""
        r = make_range({"K": 5}, "K", lower=1, upper=100, scale="log10")
        assert iterator(r, 3) == [1, 10, 100]

    def test_log10_float(self):
        """Test a log10 float range."""
        r = NumericRange("lambda", 0.001, 1000.0, scale="log10")
        assert iterator(r, 4) == pytest.approx([0.001, 0.1, 10.0, 1000.0])

    def test_log2(self):
        """Test a log2 range."""
        r = NumericRange("width", 1.0, 8.0, scale="log2")
        assert iterator(r, 4) == pytest.approx([1.0, 2.0, 4.0, 8.0])

    def test_natural_log(self):
        """Test a natural log range."""
        r = NumericRange("rate", 1.0, math.e ** 2, scale="log")
        assert iterator(r, 3) == pytest.approx([1.0, math.e, math.e ** 2])

    def test_int_rounding_removes_duplicates(self):
        """Test integer ranges drop repeats after rounding."""
        r = NumericRange("depth", 1, 3, kind="int")
        assert iterator(r, 10) == [1, 2, 3]

    def test_int_rounding_ties_to_even(self):
        """Test 2.5 rounds to 2."""
        r = NumericRange("depth", 0, 5, kind="int")
        assert iterator(r, 3) == [0, 2, 5]

    def test_int_values_are_ints(self):
        """Test integer ranges yield Python ints."""
        r = NumericRange("depth", 0, 10, kind="int")
        assert all(type(v) is int for v in iterator(r, 6))

    def test_function_scale_post_processes(self):
        """Test a function scale is applied after linear interpolation."""
        r = NumericRange("alpha", 1.0, 3.0, scale=lambda x: x ** 2)
        assert iterator(r, 3) == pytest.approx([1.0, 4.0, 9.0])

    def test_function_scale_output_kept(self):
        """Test function scale outputs are returned as the function gives them."""
        r = NumericRange("alpha", 1.0, 3.0, scale=lambda x: f"v{x:g}")
        assert iterator(r, 3) == ["v1", "v2", "v3"]

        r = NumericRange("alpha", 1.0, 2.0, scale=lambda x: (x, 2 * x))
        assert iterator(r, 2) == [(1.0, 2.0), (2.0, 4.0)]

    def test_function_scale_unhashable_output(self):
        """Test repeated unhashable outputs are dropped."""
        r = NumericRange("alpha", 0.0, 1.0, scale=lambda x: [round(x)])
        assert iterator(r, 5) == [[0], [1]]

    def test_single_point(self):
        """Test n=1 yields the lower bound."""
        r = NumericRange("alpha", 2.0, 5.0)
        assert iterator(r, 1) == [2.0]

    def test_degenerate_range(self):
        """Test equal bounds collapse to one value."""
        r = NumericRange("alpha", 2.0, 2.0)
        assert iterator(r, 5) == [2.0]

    def test_missing_n_raises(self):
        """Test numeric iterators require n."""
        with pytest.raises(ConfigurationError, match="requires the number of points"):
            iterator(NumericRange("alpha", 0.0, 1.0))

    def test_non_positive_n_raises(self):
        """Test n must be at least 1."""
        with pytest.raises(ConfigurationError, match="at least 1"):
            iterator(NumericRange("alpha", 0.0, 1.0), 0)

    def test_log_scale_with_zero_bound(self):
        """Test log scales fail on non-positive bounds when iterated."""
        r = NumericRange("alpha", 0.0, 1.0, scale="log10")
        with pytest.raises(ValueError, match="requires x > 0"):
            iterator(r, 3)

    def test_not_a_range(self):
        """Test iterating something other than a range raises TypeError."""
        with pytest.raises(TypeError, match="Expected a parameter range"):
            iterator([1, 2, 3], 2)


class TestNumericIteratorProperties:
    """Property-based tests for integer iterators."""

    @given(
        lower=st.integers(min_value=-1000, max_value=1000),
        width=st.integers(min_value=0, max_value=1000),
        n=st.integers(min_value=1, max_value=50),
    )
    @settings(max_examples=200)
    def test_int_values_bounded_unique_sorted(self, lower, width, n):
        """Test integer iterators stay in bounds, ascend strictly, and have at most n values."""
        r = NumericRange("k", lower, lower + width, kind="int")
        values = iterator(r, n)

        assert 1 <= len(values) <= n
        assert values[0] == lower
        assert all(lower <= v <= lower + width for v in values)
        assert all(a < b for a, b in zip(values, values[1:]))
        if n > 1:
            assert values[-1] == lower + width


class TestUnwind:
    """Tests for the Cartesian product of iterators."""

    def test_first_column_fastest(self):
        """Test the first iterator cycles fastest."""
        table = unwind([1, 2], ["a", "b"], ["x", "y", "z"])

        assert table.shape == (12, 3)
        assert table[:4].tolist() == [
            [1, "a", "x"],
            [2, "a", "x"],
            [1, "b", "x"],
            [2, "b", "x"],
        ]
        assert table[-1].tolist() == [2, "b", "z"]

    def test_single_iterator(self):
        """Test one iterator gives a single column."""
        table = unwind([10, 20, 30])
        assert table.shape == (3, 1)
        assert table[:, 0].tolist() == [10, 20, 30]

    def test_no_iterators(self):
        """Test no iterators gives one empty row."""
        table = unwind()
        assert table.shape == (1, 0)

    def test_empty_iterator_raises(self):
        """Test an empty iterator raises EmptyIteratorError."""
        with pytest.raises(EmptyIteratorError, match="length zero"):
            unwind([1, 2], [])

    def test_empty_iterator_is_value_error(self):
        """Test EmptyIteratorError is catchable as ValueError."""
        with pytest.raises(ValueError):
            unwind([])

    def test_mixed_types_preserved(self):
        """Test values keep their types in the object table."""
        table = unwind([1, 2.5], [True, None], [(1, 2)])
        assert table.dtype == object
        assert table[1, 0] == 2.5
        assert table[2, 1] is None
        assert table[0, 2] == (1, 2)

    def test_every_combination_once(self):
        """Test all combinations appear exactly once."""
        table = unwind([1, 2, 3], ["a", "b"])
        rows = {tuple(row) for row in table.tolist()}
        assert rows == {(i, s) for i in [1, 2, 3] for s in ["a", "b"]}

    @given(lengths=st.lists(st.integers(min_value=1, max_value=4), min_size=1, max_size=4))
    def test_row_formula(self, lengths):
        """Test row r holds iterator j's element (r // P_j) % L_j."""
        iterators = [[f"{j}:{i}" for i in range(L)] for j, L in enumerate(lengths)]
        table = unwind(*iterators)

        assert table.shape == (int(np.prod(lengths)), len(lengths))
        for r in range(table.shape[0]):
            P = 1
            for j, L in enumerate(lengths):
                assert table[r, j] == iterators[j][(r // P) % L]
                P *= L
