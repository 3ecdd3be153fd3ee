"""Configuration management for fibbench."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from fibbench.engine.algorithms import MAX_INDEX

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default.yaml"

TARGET_INDEX_ENV = "FIBBENCH_TARGET_INDEX"


class BenchmarkConfig(BaseModel):
    """Driver configuration: which index to compute and which algorithms to time."""

    model_config = ConfigDict(validate_assignment=True)

    target_index: int = Field(default=90, ge=0)
    # fib_recursive is skipped when target_index >= recursive_threshold
    recursive_threshold: int = Field(default=35, ge=0)
    algorithms: list[str] | None = None


class VerifyConfig(BaseModel):
    """Equivalence check configuration."""

    upper: int = Field(default=MAX_INDEX, ge=0, le=MAX_INDEX)
    recursive_cap: int = Field(default=25, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
    file: str | None = None


class Settings(BaseModel):
    """Root configuration for fibbench."""

    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    verify: VerifyConfig = Field(default_factory=VerifyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> Settings:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        path: Path to YAML config file. Uses default if not provided.

    Returns:
        Validated Settings instance.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH

    raw: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        logger.info("Loaded config from %s", config_path)
    else:
        logger.warning("Config file not found at %s, using defaults", config_path)

    # Environment variable overrides
    target_index = os.environ.get(TARGET_INDEX_ENV, "")
    if target_index:
        raw.setdefault("benchmark", {})["target_index"] = target_index

    return Settings(**raw)


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging from settings.

    Handlers write to stderr (and optionally a file) so benchmark output on
    stdout is left untouched.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
        handlers=handlers,
        force=True,
    )
