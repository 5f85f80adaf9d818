"""Tests for p2site.config."""

import json
import logging

import pytest

from p2site.config import (
    apply_env_overrides,
    configure_logging,
    get_config_path,
    get_default_config,
    load_config,
    merge_configs,
)
from p2site.exit_codes import ConfigurationError


class TestConfig:
    """Tests for configuration loading."""

    def test_default_config(self):
        config = get_default_config()
        assert config["repository_directory"] == "target/repository"
        assert config["category"] == ""
        assert config["extractor"] == "metadata"
        assert config["logging"]["level"] == "INFO"

    def test_load_config_no_file(self):
        assert load_config() == get_default_config()

    def test_project_toml(self, tmp_path):
        (tmp_path / "p2site.toml").write_text('category = "Main"\n[logging]\nlevel = "DEBUG"\n')

        config = load_config()

        assert get_config_path() == tmp_path / "p2site.toml"
        assert config["category"] == "Main"
        assert config["logging"]["level"] == "DEBUG"
        assert config["logging"]["format"] == "%(levelname)s: %(message)s"

    def test_user_yaml(self, isolated_config):
        user_dir = isolated_config / ".p2site"
        user_dir.mkdir()
        (user_dir / "config.yaml").write_text("extractor: filename\n")

        assert load_config()["extractor"] == "filename"

    def test_env_config_path(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"repository_directory": "build/repo"}))
        monkeypatch.setenv("P2SITE_CONFIG", str(path))

        assert get_config_path() == path
        assert load_config()["repository_directory"] == "build/repo"

    def test_malformed_file(self, tmp_path):
        (tmp_path / "p2site.json").write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_non_mapping_file(self, tmp_path):
        (tmp_path / "p2site.json").write_text("[1, 2]")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("P2SITE_CATEGORY", "Main")
        monkeypatch.setenv("P2SITE_REPOSITORY_DIRECTORY", "out/repository")
        monkeypatch.setenv("P2SITE_LOGGING_LEVEL", "WARNING")
        monkeypatch.setenv("P2SITE_UNKNOWN_KEY", "ignored")

        config = apply_env_overrides(get_default_config())

        assert config["category"] == "Main"
        assert config["repository_directory"] == "out/repository"
        assert config["logging"]["level"] == "WARNING"
        assert "unknown" not in config

    def test_merge_configs(self):
        merged = merge_configs({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"b": 10}, "e": 5})
        assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}

    def test_configure_logging_level(self):
        configure_logging({"logging": {"level": "warning"}})
        assert logging.getLogger().level == logging.WARNING

        configure_logging(get_default_config(), debug=True)
        assert logging.getLogger().level == logging.DEBUG
