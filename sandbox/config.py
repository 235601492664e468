"""
Runtime configuration for the sandbox containers.

Sources, lowest to highest precedence:
1. `SandboxConfig` defaults,
2. a YAML file (path from ``SANDBOX_CONFIG``, or passed to `load_config`),
3. ``SANDBOX_RANDOM_SEED`` / ``SANDBOX_CHECK_INVARIANTS`` / ``SANDBOX_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class SandboxConfig:
    random_seed: Optional[int] = None
    check_invariants: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        seed = self.random_seed
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            raise TypeError("random_seed must be an int or null")
        if not isinstance(self.check_invariants, bool):
            raise TypeError("check_invariants must be a bool")
        if not isinstance(self.log_level, str):
            raise TypeError("log_level must be a str")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"unknown log_level: {self.log_level!r}")


def config_from_dict(obj: Mapping[str, Any]) -> SandboxConfig:
    """Build a config from a mapping, rejecting unknown keys."""
    if not isinstance(obj, Mapping):
        raise TypeError("config must be a mapping")
    known = {f.name for f in fields(SandboxConfig)}
    unknown = sorted(set(obj) - known, key=str)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(map(str, unknown))}")
    return SandboxConfig(**dict(obj))


def load_config(path: Path | str) -> SandboxConfig:
    """Load a YAML config file. An empty file yields the defaults."""
    p = Path(path)
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    if obj is None:
        return SandboxConfig()
    return config_from_dict(obj)


def _env_str(name: str) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None:
        return None
    v = raw.strip()
    return v if v else None


def _env_bool(name: str) -> Optional[bool]:
    raw = _env_str(name)
    if raw is None:
        return None
    low = raw.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _env_int(name: str) -> Optional[int]:
    raw = _env_str(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def apply_env_overrides(config: SandboxConfig) -> SandboxConfig:
    overrides: dict[str, Any] = {}
    seed = _env_int("SANDBOX_RANDOM_SEED")
    if seed is not None:
        overrides["random_seed"] = seed
    check = _env_bool("SANDBOX_CHECK_INVARIANTS")
    if check is not None:
        overrides["check_invariants"] = check
    level = _env_str("SANDBOX_LOG_LEVEL")
    if level is not None:
        overrides["log_level"] = level
    return replace(config, **overrides) if overrides else config


@lru_cache(maxsize=1)
def load_default_config() -> SandboxConfig:
    path = _env_str("SANDBOX_CONFIG")
    config = load_config(path) if path is not None else SandboxConfig()
    config = apply_env_overrides(config)
    logger.debug("loaded sandbox config: %s", config)
    return config


def configure_logging(config: SandboxConfig) -> None:
    """Apply the configured level to the ``sandbox`` logger hierarchy."""
    logging.getLogger("sandbox").setLevel(config.log_level.upper())
