"""Benchmark driver: times each Fibonacci strategy for a single index."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fibbench.bench.timer import TimingSample, benchmark
from fibbench.config import Settings
from fibbench.engine.algorithms import validate_index
from fibbench.engine.errors import UnknownAlgorithmError
from fibbench.engine.registry import RECURSIVE, Algorithm, AlgorithmRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass
class RunRecord:
    """Outcome of one benchmarked algorithm."""

    name: str
    index: int
    value: int
    sample: TimingSample

    @property
    def elapsed_ms(self) -> float:
        return self.sample.elapsed_ms


def select_algorithms(registry: AlgorithmRegistry, names: list[str] | None) -> list[Algorithm]:
    """Pick the algorithms to run, keeping registry order.

    Raises:
        UnknownAlgorithmError: If a requested name is not registered.
    """
    if names is None:
        return list(registry)

    for name in names:
        if name not in registry:
            raise UnknownAlgorithmError(name)
    return [algorithm for algorithm in registry if algorithm.name in names]


def run_benchmarks(
    settings: Settings,
    registry: AlgorithmRegistry | None = None,
    emit: Callable[[str], None] = print,
) -> list[RunRecord]:
    """Benchmark every selected algorithm at the configured index.

    The naive recursive strategy is skipped when the index meets or exceeds
    the configured threshold; its running time grows exponentially.

    Args:
        settings: Loaded settings.
        registry: Algorithms to draw from. Defaults to the built-in four.
        emit: Sink for output lines.

    Returns:
        One record per algorithm that ran, in run order.
    """
    config = settings.benchmark
    n = validate_index(config.target_index)
    if registry is None:
        registry = default_registry()
    records: list[RunRecord] = []

    for algorithm in select_algorithms(registry, config.algorithms):
        if algorithm.name == RECURSIVE and n >= config.recursive_threshold:
            logger.info(
                "Skipping %s: n=%d meets threshold %d",
                algorithm.name,
                n,
                config.recursive_threshold,
            )
            continue

        result: dict[str, int] = {}

        def operation(algorithm: Algorithm = algorithm) -> None:
            result["value"] = algorithm(n)
            emit("")
            emit(f"{algorithm.name}: {result['value']}")

        samples: list[TimingSample] = []
        benchmark(operation, emit=emit, on_sample=samples.append)

        record = RunRecord(name=algorithm.name, index=n, value=result["value"], sample=samples[0])
        records.append(record)
        logger.debug("%s(%d) took %.4fms", record.name, n, record.elapsed_ms)

    return records
