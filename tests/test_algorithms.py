"""Tests for the Fibonacci algorithms."""

import pytest

from fibbench.engine import algorithms
from fibbench.engine.algorithms import (
    MAX_INDEX,
    count_recursive_calls,
    fib_iterative,
    fib_memoize,
    fib_memoize_optimized,
    fib_recursive,
    validate_index,
)
from fibbench.engine.errors import FibonacciError, FibonacciOverflowError, InvalidIndexError

KNOWN_VALUES = {
    0: 0,
    1: 1,
    2: 1,
    3: 2,
    4: 3,
    5: 5,
    10: 55,
    20: 6765,
    90: 2880067194370816120,
}

LINEAR = [fib_iterative, fib_memoize, fib_memoize_optimized]
ALL = [fib_recursive, *LINEAR]


class TestKnownValues:
    @pytest.mark.parametrize("fib", LINEAR)
    def test_known_values(self, fib):
        for n, expected in KNOWN_VALUES.items():
            assert fib(n) == expected

    def test_recursive_known_values(self):
        for n, expected in KNOWN_VALUES.items():
            if n <= 20:
                assert fib_recursive(n) == expected

    @pytest.mark.parametrize("fib", ALL)
    def test_base_cases(self, fib):
        assert fib(0) == 0
        assert fib(1) == 1

    @pytest.mark.parametrize("fib", LINEAR)
    def test_largest_index(self, fib):
        assert fib(MAX_INDEX) == 2880067194370816120
        assert fib(MAX_INDEX) < 2**63


class TestEquivalence:
    def test_linear_algorithms_agree(self):
        for n in range(MAX_INDEX + 1):
            assert fib_iterative(n) == fib_memoize(n) == fib_memoize_optimized(n)

    def test_recursive_agrees_with_iterative(self):
        for n in range(21):
            assert fib_recursive(n) == fib_iterative(n)

    def test_monotonic(self):
        values = [fib_iterative(n) for n in range(MAX_INDEX + 1)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_recurrence(self):
        for n in range(2, MAX_INDEX + 1):
            assert fib_memoize_optimized(n) == fib_memoize_optimized(n - 1) + fib_memoize_optimized(n - 2)


class TestParitySelection:
    @pytest.mark.parametrize("fib", [fib_memoize, fib_memoize_optimized])
    def test_even_reads_first_accumulator(self, fib):
        # After three passes the pair is (8, 13)
        assert fib(6) == 8

    @pytest.mark.parametrize("fib", [fib_memoize, fib_memoize_optimized])
    def test_odd_reads_second_accumulator(self, fib):
        assert fib(7) == 13

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 10, 20, 90])
    def test_both_loops_match_table(self, n):
        assert fib_memoize(n) == fib_memoize_optimized(n) == KNOWN_VALUES[n]


class TestValidation:
    @pytest.mark.parametrize("fib", ALL)
    def test_negative_index(self, fib):
        with pytest.raises(InvalidIndexError) as exc:
            fib(-1)
        assert exc.value.index == -1

    @pytest.mark.parametrize("bad", [1.5, "3", None, True])
    def test_non_integer_index(self, bad):
        with pytest.raises(InvalidIndexError):
            validate_index(bad)

    @pytest.mark.parametrize("fib", ALL)
    def test_overflow(self, fib):
        with pytest.raises(FibonacciOverflowError) as exc:
            fib(MAX_INDEX + 1)
        assert exc.value.index == 91
        assert exc.value.limit == MAX_INDEX

    def test_error_hierarchy(self):
        assert issubclass(InvalidIndexError, ValueError)
        assert issubclass(InvalidIndexError, FibonacciError)
        assert issubclass(FibonacciOverflowError, OverflowError)
        assert issubclass(FibonacciOverflowError, FibonacciError)

    def test_validate_returns_index(self):
        assert validate_index(0) == 0
        assert validate_index(MAX_INDEX) == MAX_INDEX


class TestRecursiveCalls:
    def test_small_counts(self):
        assert [count_recursive_calls(n) for n in range(6)] == [1, 1, 3, 5, 9, 15]

    def test_count_matches_actual_calls(self, monkeypatch):
        calls = 0
        original = algorithms._recursive

        def counting(n):
            nonlocal calls
            calls += 1
            return original(n)

        # The recursion looks _recursive up in module globals, so every level is counted
        monkeypatch.setattr(algorithms, "_recursive", counting)
        assert fib_recursive(12) == 144
        assert calls == count_recursive_calls(12)

    def test_max_index(self):
        assert count_recursive_calls(MAX_INDEX) == 2 * 4660046610375530309 - 1
