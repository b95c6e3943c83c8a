"""Tests for the online statistic collectors."""

import math
from decimal import Decimal

import pytest

from fcheck.exceptions import ContractViolationError
from fcheck.profiling.metrics import CategoricalFreq, NumericStats


class TestNumericStats:
    """Tests for Welford running statistics."""

    def test_zero_to_ninety_nine(self):
        stats = NumericStats()
        for i in range(100):
            stats.push(i)

        assert stats.count() == 100
        assert stats.mean == pytest.approx(49.5, abs=1e-9)
        assert stats.stddev() == pytest.approx(29.011491975882016, abs=1e-9)
        assert stats.min == 0
        assert stats.max == 99

    def test_invariants_hold_after_pushes(self):
        stats = NumericStats()
        for value in [3.5, -2, 10, None, 7.25, 0]:
            stats.push(value)

        assert stats.null_count <= stats.total_count
        assert stats.min <= stats.mean <= stats.max
        assert stats.variance() >= 0

    def test_single_value_has_zero_variance(self):
        stats = NumericStats()
        stats.push(42)
        assert stats.count() == 1
        assert stats.variance() == 0.0
        assert stats.mean == 42.0

    def test_large_offset_is_stable(self):
        # Naive sum of squares loses all precision around 1e9
        stats = NumericStats()
        for value in [1e9 + 4, 1e9 + 7, 1e9 + 13, 1e9 + 16]:
            stats.push(value)
        assert stats.variance() == pytest.approx(30.0, rel=1e-9)

    def test_only_nulls(self):
        stats = NumericStats()
        for _ in range(3):
            stats.push(None)

        assert stats.count() == 0
        assert stats.null_count == 3
        assert stats.total_count == 3
        assert stats.summary() == 'ALL NULL'
        assert stats.to_dict()['mean'] is None

    def test_summary_with_some_nulls(self):
        stats = NumericStats()
        for value in [1, None, 3]:
            stats.push(value)
        assert stats.summary() == '1 NULL min: 1, max: 3, mean: 2, std: 1.41'

    def test_summary_uses_three_significant_digits(self):
        stats = NumericStats()
        for value in [1234567.0, 0.5]:
            stats.push(value)
        assert stats.summary().startswith('min: 0.5, max: 1.23e+06')

    def test_accepts_decimal(self):
        stats = NumericStats()
        stats.push(Decimal('2.5'))
        assert stats.mean == 2.5

    @pytest.mark.parametrize('value', ['12', 'abc', True, b'1'])
    def test_rejects_non_numeric(self, value):
        stats = NumericStats()
        with pytest.raises(ContractViolationError):
            stats.push(value)

    def test_frequencies_not_supported(self):
        with pytest.raises(NotImplementedError):
            NumericStats().frequencies(3)

    def test_nan_propagates_without_error(self):
        stats = NumericStats()
        stats.push(float('nan'))
        assert stats.count() == 1
        assert math.isnan(stats.mean)


class TestCategoricalFreq:
    """Tests for exact frequency counting."""

    @pytest.fixture
    def freq(self):
        freq = CategoricalFreq()
        for value, times in [('a', 5), ('b', 3), ('c', 3), ('d', 1)]:
            for _ in range(times):
                freq.push(value)
        return freq

    def test_top_two(self, freq):
        values, counts = freq.top_n(2)
        assert values[0] == 'a'
        assert counts[0] == 5
        # b and c tie at 3; either satisfies the ordering by count
        assert values[1] in ('b', 'c')
        assert counts[1] == 3

    def test_ties_are_broken_lexicographically(self, freq):
        assert freq.top_n(4) == (['a', 'b', 'c', 'd'], [5, 3, 3, 1])
        assert freq.top_n(4) == freq.top_n(4)

    def test_least_frequent(self, freq):
        values, counts = freq.top_n(2, want_least=True)
        assert values == ['c', 'd']
        assert counts == [3, 1]

    def test_frequencies_is_top_n(self, freq):
        assert freq.frequencies(2) == freq.top_n(2)
        assert freq.frequencies(2, least=True) == freq.top_n(2, want_least=True)

    def test_n_is_clamped(self, freq):
        values, counts = freq.top_n(10)
        assert len(values) == len(counts) == 4
        values, counts = freq.top_n(10, want_least=True)
        assert len(values) == 4

    def test_zero_requested(self, freq):
        assert freq.top_n(0) == ([], [])
        assert freq.top_n(0, want_least=True) == ([], [])

    def test_counts_sum_to_non_empty_count(self, freq):
        freq.push('')
        freq.push(None)
        assert sum(freq.counts.values()) == freq.non_empty_count == 12
        assert freq.total_count == 14
        assert freq.null_count == 1

    def test_empty_string_not_counted(self):
        freq = CategoricalFreq()
        freq.push('')
        freq.push('')
        assert freq.count() == 0
        assert freq.total_count == 2
        assert freq.min_length is None
        assert freq.summary() == 'EMPTY'

    def test_length_bounds(self):
        freq = CategoricalFreq()
        for value in ['ccc', 'a', 'bb', 'dddd']:
            freq.push(value)
        assert freq.min_length == 1
        assert freq.max_length == 4
        assert freq.summary() == 'length min: 1, max: 4'

    def test_non_strings_are_stringified(self):
        freq = CategoricalFreq()
        freq.push(12)
        freq.push('12')
        freq.push(1.5)
        assert freq.counts['12'] == 2
        assert freq.counts['1.5'] == 1

    def test_summary_with_nulls(self):
        freq = CategoricalFreq()
        freq.push(None)
        freq.push('xy')
        assert freq.summary() == '1 NULL length min: 2, max: 2'

    def test_all_null(self):
        freq = CategoricalFreq()
        freq.push(None)
        assert freq.summary() == 'ALL NULL'
        assert freq.top_n(5) == ([], [])
