from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import-untyped]

from buildreuse.services.reuse.config import ReuseConfig, reuse_config_from_mapping

logger = logging.getLogger(__name__)

__all__ = ["UnifiedConfig", "load_config"]


@dataclass
class UnifiedConfig:
    """Top-level configuration file holding one section per service."""

    reuse: ReuseConfig = field(default_factory=ReuseConfig)
    present_sections: frozenset[str] = frozenset()


def load_config(path: str) -> UnifiedConfig:
    """Load a YAML file with an optional ``reuse`` section.

    Unknown top-level sections are ignored with a warning so that one file can
    be shared with other tools.
    """

    file = Path(path)
    try:
        raw = file.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Unable to open configuration file %s: %s", path, exc)
        raise
    try:
        data: Dict[str, Any] = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        logger.error("Failed to parse configuration file %s: %s", path, exc)
        raise ValueError(f"Failed to parse configuration file {path}") from exc
    if not isinstance(data, dict):
        raise TypeError("configuration root must be a mapping")

    sections = set()
    reuse = ReuseConfig()
    for key, value in data.items():
        if key == "reuse":
            reuse = reuse_config_from_mapping(value or {})
            sections.add(key)
        else:
            logger.warning("Ignoring unknown configuration section %r in %s", key, path)
    return UnifiedConfig(reuse=reuse, present_sections=frozenset(sections))
