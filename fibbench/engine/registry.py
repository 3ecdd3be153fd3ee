"""Algorithm registry for looking up Fibonacci strategies by name."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from fibbench.engine.algorithms import (
    MAX_INDEX,
    fib_iterative,
    fib_memoize,
    fib_memoize_optimized,
    fib_recursive,
)

logger = logging.getLogger(__name__)

RECURSIVE = "fib_recursive"


@dataclass(frozen=True)
class Algorithm:
    """A named Fibonacci strategy with its complexity notes."""

    name: str
    func: Callable[[int], int]
    time_complexity: str
    space_complexity: str
    description: str = ""

    def __call__(self, n: int) -> int:
        return self.func(n)


class AlgorithmRegistry:
    """Registry that maps algorithm names to strategies.

    Keeps registration order so benchmarks run in a stable sequence.
    """

    def __init__(self) -> None:
        self._algorithms: dict[str, Algorithm] = {}

    def register(self, algorithm: Algorithm) -> None:
        """Register an algorithm.

        Args:
            algorithm: Algorithm to register.

        Raises:
            ValueError: If an algorithm with the same name is already registered.
        """
        if algorithm.name in self._algorithms:
            raise ValueError(f"Algorithm '{algorithm.name}' is already registered")
        self._algorithms[algorithm.name] = algorithm
        logger.debug("Registered algorithm: %s", algorithm.name)

    def get(self, name: str) -> Algorithm | None:
        """Look up an algorithm by name."""
        return self._algorithms.get(name)

    @property
    def names(self) -> list[str]:
        """All registered names, in registration order."""
        return list(self._algorithms.keys())

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._algorithms.values())

    def __len__(self) -> int:
        return len(self._algorithms)

    def __contains__(self, name: str) -> bool:
        return name in self._algorithms


def default_registry() -> AlgorithmRegistry:
    """Build a registry with the four built-in strategies in canonical order."""
    registry = AlgorithmRegistry()
    registry.register(
        Algorithm(
            name=RECURSIVE,
            func=fib_recursive,
            time_complexity="O(φⁿ)",
            space_complexity="O(n)",
            description="Naive top-down recursion",
        )
    )
    registry.register(
        Algorithm(
            name="fib_iterative",
            func=fib_iterative,
            time_complexity="O(n)",
            space_complexity="O(n)",
            description="Bottom-up list of every value",
        )
    )
    registry.register(
        Algorithm(
            name="fib_memoize",
            func=fib_memoize,
            time_complexity="O(n)",
            space_complexity="O(1)",
            description="Two running values, stepped range",
        )
    )
    registry.register(
        Algorithm(
            name="fib_memoize_optimized",
            func=fib_memoize_optimized,
            time_complexity="O(n)",
            space_complexity="O(1)",
            description="Two running values, counted loop",
        )
    )
    return registry


def verify_equivalence(
    registry: AlgorithmRegistry,
    upper: int = MAX_INDEX,
    recursive_cap: int = 25,
) -> list[int]:
    """Check that every registered algorithm agrees for each index in [0, upper].

    fib_recursive is only included for indices up to recursive_cap, since
    checking it further would take exponential time.

    Args:
        registry: Algorithms to compare.
        upper: Highest index to check.
        recursive_cap: Highest index at which fib_recursive is checked.

    Returns:
        Indices where the algorithms disagree. Empty when all agree.
    """
    mismatches = []
    for n in range(upper + 1):
        values = {
            algorithm.name: algorithm(n)
            for algorithm in registry
            if algorithm.name != RECURSIVE or n <= recursive_cap
        }
        if len(set(values.values())) > 1:
            logger.warning("Algorithms disagree at n=%d: %s", n, values)
            mismatches.append(n)

    logger.info("Checked %d indices, %d mismatches", upper + 1, len(mismatches))
    return mismatches
