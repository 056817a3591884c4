from __future__ import annotations

from pathlib import Path

import pytest

from constants import DEFAULT_BASE_URL, DEFAULT_FALLBACK_VERSION, SITE_TITLE
from site_config import ConfigError, load_config, read_config_file


def test_defaults_without_file_or_env(tmp_path: Path) -> None:
    config = load_config(tmp_path / "site.yaml", environ={})
    assert config["base_url"] == DEFAULT_BASE_URL
    assert config["fallback_version"] == DEFAULT_FALLBACK_VERSION
    assert config["title"] == SITE_TITLE
    assert isinstance(config["src"], Path)


def test_yaml_file_values(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text(
        "base_url: https://yaml.example.test/\n"
        "title: YAML Schemas\n"
        "src: schemas\n"
        "out: build/site\n",
        encoding="utf-8",
    )
    config = load_config(path, environ={})
    assert config["base_url"] == "https://yaml.example.test/"
    assert config["title"] == "YAML Schemas"
    assert config["src"] == (tmp_path / "schemas").resolve()
    assert config["out"] == (tmp_path / "build" / "site").resolve()


def test_precedence_override_env_file(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("base_url: https://yaml.example.test/\nfallback_version: legacy\n", encoding="utf-8")
    env = {"SCHEMA_BASE_URL": "https://env.example.test/"}

    config = load_config(path, environ=env)
    assert config["base_url"] == "https://env.example.test/"
    assert config["fallback_version"] == "legacy"

    config = load_config(path, overrides={"base_url": "https://cli.example.test/", "src": None}, environ=env)
    assert config["base_url"] == "https://cli.example.test/"


def test_reads_process_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("SCHEMA_BASE_URL", "https://process.example.test/")
    monkeypatch.setenv("SCHEMA_FALLBACK_VERSION", "v0")
    config = load_config(tmp_path / "site.yaml")
    assert config["base_url"] == "https://process.example.test/"
    assert config["fallback_version"] == "v0"


def test_empty_file_is_allowed(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("", encoding="utf-8")
    assert read_config_file(path) == {}


def test_non_mapping_file_rejected(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        read_config_file(path)


def test_invalid_yaml_rejected(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        read_config_file(path)
