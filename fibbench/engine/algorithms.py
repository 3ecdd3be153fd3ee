"""Four strategies for computing the n-th Fibonacci number.

F(0) = 0, F(1) = 1 and F(n) = F(n-1) + F(n-2). Every strategy returns the
same value for every index in the supported domain (0..MAX_INDEX); they only
differ in how much work and memory they spend getting there.
"""

from __future__ import annotations

from fibbench.engine.errors import FibonacciOverflowError, InvalidIndexError

# F(91) and beyond do not fit the documented 64-bit domain.
MAX_INDEX = 90


def validate_index(n: int) -> int:
    """Check that n is a supported sequence index.

    Args:
        n: Index into the Fibonacci sequence.

    Returns:
        The index, unchanged.

    Raises:
        InvalidIndexError: If n is not an int or is negative.
        FibonacciOverflowError: If n is above MAX_INDEX.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidIndexError(n)
    if n > MAX_INDEX:
        raise FibonacciOverflowError(index=n, limit=MAX_INDEX)
    return n


def fib_recursive(n: int) -> int:
    """Top-down recursion with no caching.

    Easy to read but exponential: every call recomputes both subtrees, so
    F(5) alone takes 15 calls. See count_recursive_calls().
    """
    return _recursive(validate_index(n))


def _recursive(n: int) -> int:
    # n <= 1 is the base case that stops the recursion
    if n <= 1:
        return n
    return _recursive(n - 1) + _recursive(n - 2)


def fib_iterative(n: int) -> int:
    """Bottom-up iteration that keeps every previous value in a list."""
    validate_index(n)
    if n <= 1:
        return n

    sequence = [0, 1]
    for i in range(2, n + 1):
        sequence.append(sequence[i - 1] + sequence[i - 2])

    return sequence[n]


def fib_memoize(n: int) -> int:
    """Two-variable iteration over a stepped range.

    Only the two previous values are kept. Each pass advances both of them,
    so after k passes ``a`` holds F(2k) and ``b`` holds F(2k+1): even n
    reads ``a``, odd n reads ``b``. For n = 6 the passes give (1, 2),
    (3, 5), (8, 13) and the answer is a = 8; for n = 7 the same passes run
    and the answer is b = 13. Even n computes one value it never uses.

    Args:
        n: Index into the Fibonacci sequence.

    Returns:
        F(n).
    """
    validate_index(n)
    if n <= 1:
        return n

    a, b = 0, 1
    for _ in range(1, n, 2):
        a = a + b
        b = a + b

    return a if n % 2 == 0 else b


def fib_memoize_optimized(n: int) -> int:
    """Same as fib_memoize(), but counts n // 2 passes instead of stepping a range."""
    validate_index(n)
    if n <= 1:
        return n

    a, b = 0, 1
    for _ in range(n // 2):
        a = a + b
        b = a + b

    return a if n % 2 == 0 else b


def count_recursive_calls(n: int) -> int:
    """Number of calls fib_recursive(n) makes, including the outermost one.

    Calls satisfy C(n) = 1 + C(n-1) + C(n-2) with C(0) = C(1) = 1, which
    closes to 2 * F(n+1) - 1.
    """
    validate_index(n)
    a, b = 0, 1
    for _ in range(n + 1):
        a, b = b, a + b
    return 2 * a - 1
