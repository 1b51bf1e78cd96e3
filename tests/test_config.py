"""Tests for Config."""

from __future__ import annotations

from pathlib import Path

import pytest

from stackcheck.config import DEFAULTS, Config
from stackcheck.errors import ConfigError, ConfigNotFoundError


class TestConfigGet:
    def test_defaults(self) -> None:
        config = Config()
        assert config.get("security.suspicious_names") == DEFAULTS["security"]["suspicious_names"]
        assert config.get("security.scan_templates") is True
        assert config.get("dependencies.check_peer") is True

    def test_override_merges_with_defaults(self) -> None:
        config = Config({"security": {"scan_templates": False}})
        assert config.get("security.scan_templates") is False
        assert config.get("security.suspicious_names") == ["eval", "exec", "shell", "cmd", "backdoor"]

    def test_missing_key_default(self) -> None:
        assert Config().get("nope.nothing", 7) == 7

    def test_defaults_not_mutated(self) -> None:
        config = Config()
        config.get("security.suspicious_names").append("miner")
        assert "miner" not in DEFAULTS["security"]["suspicious_names"]


class TestConfigFromYaml:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "stackcheck.yaml"
        path.write_text("security:\n  suspicious_names: [miner]\n")
        config = Config.from_yaml(path)
        assert config.get("security.suspicious_names") == ["miner"]
        assert config.get("security.scan_templates") is True

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "stackcheck.yaml"
        path.write_text("")
        assert Config.from_yaml(path).get("dependencies.check_peer") is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "stackcheck.yaml"
        path.write_text("security: [unclosed\n")
        with pytest.raises(ConfigError):
            Config.from_yaml(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "stackcheck.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            Config.from_yaml(path)
