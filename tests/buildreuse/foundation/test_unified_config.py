from __future__ import annotations

import pytest

from buildreuse.foundation.config import load_config
from buildreuse.services.reuse.config import ReuseConfig


def test_load_config_reads_reuse_section(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("reuse:\n  default_version: '3.1.0'\n  lookup_timeout: 5\n")

    cfg = load_config(str(path))

    assert cfg.reuse.default_version == "3.1.0"
    assert cfg.reuse.lookup_timeout == 5.0
    assert cfg.present_sections == frozenset({"reuse"})


def test_load_config_without_reuse_section_uses_defaults(tmp_path, caplog):
    path = tmp_path / "config.yml"
    path.write_text("gateway:\n  port: 1\n")

    with caplog.at_level("WARNING"):
        cfg = load_config(str(path))

    assert cfg.reuse == ReuseConfig()
    assert cfg.present_sections == frozenset()
    assert "gateway" in caplog.text


def test_load_config_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("reuse: [\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_config(str(tmp_path / "missing.yml"))
