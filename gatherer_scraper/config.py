"""YAML configuration loader and validation for the fetcher and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gatherer_scraper.fetcher import BACKOFF_BASE, DEFAULT_USER_AGENT, MAX_RETRIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass
class FetchConfig:
    """HTTP settings for fetching card pages."""

    timeout_s: float = 30.0
    max_retries: int = MAX_RETRIES
    backoff_base: float = BACKOFF_BASE
    rate_limit_ms: int = 0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class OutputConfig:
    """Output formatting settings."""

    indent: int = 2


@dataclass
class AppConfig:
    """Top-level application configuration."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        config = AppConfig()
    else:
        logger.info("Loading config from %s", config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        config = _parse_config(raw) if raw else AppConfig()

    _validate_config(config)
    return config


def _parse_config(raw: Dict[str, Any]) -> AppConfig:
    """Parse raw YAML dict into AppConfig."""
    config = AppConfig()

    if "fetch" in raw:
        fc = raw["fetch"] or {}
        config.fetch = FetchConfig(
            timeout_s=float(fc.get("timeout_s", config.fetch.timeout_s)),
            max_retries=int(fc.get("max_retries", config.fetch.max_retries)),
            backoff_base=float(fc.get("backoff_base", config.fetch.backoff_base)),
            rate_limit_ms=int(fc.get("rate_limit_ms", config.fetch.rate_limit_ms)),
            user_agent=str(fc.get("user_agent", config.fetch.user_agent)),
        )

    if "output" in raw:
        out = raw["output"] or {}
        config.output = OutputConfig(
            indent=int(out.get("indent", config.output.indent)),
        )

    return config


def _validate_config(config: AppConfig) -> None:
    """Validate config and raise on errors."""
    fc = config.fetch
    if fc.timeout_s <= 0:
        raise ValueError(f"Config error: fetch.timeout_s must be positive, got {fc.timeout_s}")
    if fc.max_retries < 1:
        raise ValueError(f"Config error: fetch.max_retries must be at least 1, got {fc.max_retries}")
    if fc.backoff_base < 0:
        raise ValueError(f"Config error: fetch.backoff_base must not be negative, got {fc.backoff_base}")
    if fc.rate_limit_ms < 0:
        raise ValueError(f"Config error: fetch.rate_limit_ms must not be negative, got {fc.rate_limit_ms}")
    if config.output.indent < 0:
        raise ValueError(f"Config error: output.indent must not be negative, got {config.output.indent}")

    logger.info(
        "Config validated: timeout=%.1fs, %d attempts, backoff base %.1fs",
        fc.timeout_s,
        fc.max_retries,
        fc.backoff_base,
    )
