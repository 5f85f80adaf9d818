#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging

from .exit_codes import ConfigurationError

logger = logging.getLogger("p2site")

CONFIG_FILENAMES = ['p2site.toml', 'p2site.json', 'p2site.yaml', 'p2site.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. P2SITE_CONFIG environment variable
    2. p2site.{toml,json,yaml,yml} in the current directory (project config)
    3. ~/.p2site/config.{toml,json,yaml,yml} (user config)
    """
    if 'P2SITE_CONFIG' in os.environ:
        path = Path(os.environ['P2SITE_CONFIG'])
        if path.exists():
            return path
        logger.warning(f"P2SITE_CONFIG points to missing file {path}")

    for filename in CONFIG_FILENAMES:
        path = Path.cwd() / filename
        if path.is_file():
            return path

    user_dir = Path.home() / '.p2site'
    for filename in ['config.toml', 'config.json', 'config.yaml', 'config.yml']:
        path = user_dir / filename
        if path.is_file():
            return path

    # If no file exists, return default path
    return user_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "repository_directory": "target/repository",
        "category": "",
        "extractor": "metadata",
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        }
    }


def _read_config_file(config_path: Path) -> dict:
    """Parse a config file according to its suffix."""
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ['.yaml', '.yml']:
        import yaml
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    with open(config_path, 'r') as f:
        return json.load(f)


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            file_config = _read_config_file(config_path)
        except Exception as e:
            raise ConfigurationError(f"Error loading config from {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        logger.debug(f"Loaded config from {config_path}")
        config = merge_configs(config, file_config)

    return apply_env_overrides(config)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: P2SITE_SECTION_KEY
    For example: P2SITE_CATEGORY=Main or P2SITE_LOGGING_LEVEL=DEBUG
    """
    env_prefix = "P2SITE_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == 'P2SITE_CONFIG':
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict: env var is longer but we found a non-dict value
                break

    return config


def configure_logging(config, debug: bool = False):
    """Configure stderr logging from the ``logging`` config section."""
    if debug:
        level = logging.DEBUG
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    else:
        section = config.get("logging", {})
        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        fmt = section.get("format", "%(levelname)s: %(message)s")

    logging.basicConfig(level=level, format=fmt, force=True)
