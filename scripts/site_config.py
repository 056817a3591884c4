"""
Load site settings from an optional YAML file and the environment.

Precedence, first wins: explicit overrides, environment, YAML file, defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from constants import (
    BASE_URL_ENV,
    CONFIG_FILE,
    DEFAULT_BASE_URL,
    DEFAULT_FALLBACK_VERSION,
    FALLBACK_VERSION_ENV,
    PUBLIC_DIR,
    SITE_DESCRIPTION,
    SITE_TITLE,
    SRC_DIR,
)

CONFIG_KEYS = ("src", "out", "base_url", "fallback_version", "title", "description")


class ConfigError(ValueError):
    """Raised when the config file cannot be used."""


def defaults() -> Dict[str, Any]:
    return {
        "src": SRC_DIR,
        "out": PUBLIC_DIR,
        "base_url": DEFAULT_BASE_URL,
        "fallback_version": DEFAULT_FALLBACK_VERSION,
        "title": SITE_TITLE,
        "description": SITE_DESCRIPTION,
    }


def read_config_file(path: Path) -> Dict[str, Any]:
    """Parse the YAML config file. A missing file yields an empty dict."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    config = {k: data[k] for k in CONFIG_KEYS if data.get(k) is not None}
    # Relative directories are taken relative to the config file
    for key in ("src", "out"):
        if key in config:
            config[key] = (path.parent / str(config[key])).resolve()
    return config


def read_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    environ = os.environ if environ is None else environ
    config = {}
    if environ.get(BASE_URL_ENV):
        config["base_url"] = environ[BASE_URL_ENV]
    if environ.get(FALLBACK_VERSION_ENV):
        config["fallback_version"] = environ[FALLBACK_VERSION_ENV]
    return config


def load_config(
    path: Path = CONFIG_FILE,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    config = defaults()
    config.update(read_config_file(Path(path)))
    config.update(read_environment(environ))
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    config["src"] = Path(config["src"])
    config["out"] = Path(config["out"])
    return config
