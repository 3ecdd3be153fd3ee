"""Shared test fixtures for the fibbench test suite."""

from __future__ import annotations

import logging

import pytest

from fibbench.config import TARGET_INDEX_ENV, BenchmarkConfig, Settings
from fibbench.engine.registry import default_registry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's environment from leaking into config tests."""
    monkeypatch.delenv(TARGET_INDEX_ENV, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def registry():
    """The four built-in algorithms."""
    return default_registry()


@pytest.fixture
def small_settings():
    """Settings with an index small enough for fib_recursive to run."""
    return Settings(benchmark=BenchmarkConfig(target_index=10, recursive_threshold=35))


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""

    def _write(content: str):
        path = tmp_path / "fibbench.yaml"
        path.write_text(content)
        return path

    return _write
