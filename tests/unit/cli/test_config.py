"""Tests for prflow.toml loading."""

import tomllib
from pathlib import Path

import pytest

from prflow.cli.config import (
    CONFIG_DIR_ENV_VAR,
    LoadedConfig,
    load_config,
    resolve_config_dir,
)


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == LoadedConfig()
    assert config.username == "origin"
    assert config.target == "main"
    assert config.push_remote == "origin"
    assert config.remotes == {}


def test_load_config_reads_defaults_and_remotes(tmp_path: Path) -> None:
    (tmp_path / "prflow.toml").write_text(
        """
[defaults]
username = "upstream"
target = "develop"
push_remote = "fork"

[remotes]
upstream = "git@github.com:org/repo.git"
fork = "git@github.com:me/repo.git"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.username == "upstream"
    assert config.target == "develop"
    assert config.push_remote == "fork"
    assert config.remotes == {
        "upstream": "git@github.com:org/repo.git",
        "fork": "git@github.com:me/repo.git",
    }


def test_load_config_partial_defaults(tmp_path: Path) -> None:
    (tmp_path / "prflow.toml").write_text('[defaults]\ntarget = "trunk"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.target == "trunk"
    assert config.username == "origin"
    assert config.push_remote == "origin"


def test_load_config_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "prflow.toml").write_text("[defaults\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        load_config(tmp_path)


def test_resolve_config_dir_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_DIR_ENV_VAR, raising=False)
    assert resolve_config_dir(tmp_path) == tmp_path


def test_resolve_config_dir_honors_env_var(tmp_path: Path, monkeypatch) -> None:
    override = tmp_path / "elsewhere"
    monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(override))
    assert resolve_config_dir(tmp_path / "repo") == override
