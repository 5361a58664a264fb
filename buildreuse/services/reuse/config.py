from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging
import yaml

from .matcher import DEFAULT_BUILD_VERSION

__all__ = ["ReuseConfig", "load_reuse_config", "reuse_config_from_mapping"]


@dataclass
class ReuseConfig:
    """Configuration for artifact reuse lookups."""
    default_version: str = DEFAULT_BUILD_VERSION
    lookup_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.lookup_timeout is not None:
            self.lookup_timeout = float(self.lookup_timeout)
            if self.lookup_timeout <= 0:
                raise ValueError("lookup_timeout must be positive")


_ALIASES = {
    "build_version": "default_version",
    "lookup_timeout_seconds": "lookup_timeout",
}


def reuse_config_from_mapping(data: Mapping[str, Any]) -> ReuseConfig:
    """Build :class:`ReuseConfig` from a mapping, honouring legacy aliases."""
    if not isinstance(data, Mapping):
        raise TypeError("reuse config must be a mapping")
    values = dict(data)
    for alias, canonical in _ALIASES.items():
        if canonical in values:
            values.pop(alias, None)
        elif alias in values:
            values[canonical] = values.pop(alias)
    return ReuseConfig(**values)


def load_reuse_config(path: str) -> ReuseConfig:
    """Load :class:`ReuseConfig` from a YAML file."""
    logger = logging.getLogger(__name__)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                logger.error("Failed to parse configuration file %s: %s", path, exc)
                raise ValueError(f"Failed to parse configuration file {path}") from exc
    except (FileNotFoundError, OSError) as exc:
        logger.error("Unable to open configuration file %s: %s", path, exc)
        raise
    if not isinstance(data, dict):
        raise TypeError("reuse config must be a mapping")
    return reuse_config_from_mapping(data)
