"""Tests for ForgeConfig: defaults and ARTIFACTFORGE_* overrides."""

from __future__ import annotations

from pathlib import Path

from artifactforge.cli.commands._common import load_config
from artifactforge.config import ForgeConfig, config


class TestForgeConfig:
    def test_defaults(self, monkeypatch):
        for key in ("SYSTEM", "LOG_LEVEL", "DEBUG", "PERSIST_SPECS", "STORE_PATH"):
            monkeypatch.delenv(f"ARTIFACTFORGE_{key}", raising=False)
        cfg = ForgeConfig(_env_file=None)
        assert cfg.log_level == "INFO"
        assert cfg.debug is False
        assert cfg.system is None
        assert cfg.persist_specs is False
        assert cfg.strict_platforms is False
        assert cfg.store_path == Path(".artifactforge/specs")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ARTIFACTFORGE_SYSTEM", "aarch64-linux")
        monkeypatch.setenv("ARTIFACTFORGE_PERSIST_SPECS", "true")
        monkeypatch.setenv("ARTIFACTFORGE_STORE_PATH", "/tmp/af-specs")
        monkeypatch.setenv("ARTIFACTFORGE_LOG_LEVEL", "DEBUG")
        cfg = ForgeConfig(_env_file=None)
        assert cfg.system == "aarch64-linux"
        assert cfg.persist_specs is True
        assert cfg.store_path == Path("/tmp/af-specs")
        assert cfg.log_level == "DEBUG"

    def test_init_kwargs_beat_environment(self, monkeypatch):
        monkeypatch.setenv("ARTIFACTFORGE_SYSTEM", "aarch64-linux")
        assert ForgeConfig(_env_file=None, system="x86_64-darwin").system == "x86_64-darwin"

    def test_module_singleton(self):
        assert isinstance(config, ForgeConfig)


class TestCommandLineOverrides:
    def test_options_override_module_settings(self, tmp_path: Path):
        before = config.system
        cfg = load_config("aarch64-darwin", persist=True, store=tmp_path)
        assert cfg.system == "aarch64-darwin"
        assert cfg.persist_specs is True
        assert cfg.store_path == tmp_path
        assert config.system == before

    def test_unset_options_keep_module_settings(self):
        cfg = load_config(None)
        assert cfg.system == config.system
        assert cfg.persist_specs == config.persist_specs
