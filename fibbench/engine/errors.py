"""Exception hierarchy for the Fibonacci engine."""

from __future__ import annotations

from typing import Any


class FibonacciError(Exception):
    """Base class for all fibbench errors."""


class InvalidIndexError(FibonacciError, ValueError):
    """Raised when a sequence index is negative or not an integer."""

    def __init__(self, index: Any) -> None:
        self.index = index
        super().__init__(f"Invalid Fibonacci index: {index!r} (expected a non-negative int)")


class FibonacciOverflowError(FibonacciError, OverflowError):
    """Raised when a result would not fit in a 64-bit signed integer."""

    def __init__(self, index: int, limit: int) -> None:
        self.index = index
        self.limit = limit
        super().__init__(
            f"F({index}) overflows a 64-bit signed integer (largest supported index is {limit})"
        )


class UnknownAlgorithmError(FibonacciError, KeyError):
    """Raised when an algorithm name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.name}"
