"""Test configuration management."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from discogs_api.config.config import (
    DEFAULT_BASE_URL,
    Config,
    ConfigParseError,
    ConfigValidationError,
)
from discogs_api.config.paths import CONFIG_ENV_VAR, LOG_FILE_ENV_VAR, default_config_path


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Force portable repo root to a temporary directory for isolation."""
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    import discogs_api.config.paths as p

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(p, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


def _write_config(root: Path, text: str) -> Path:
    config_dir = root / "config"
    config_dir.mkdir(exist_ok=True)
    path = config_dir / "discogs_api.toml"
    _ = path.write_text(text, encoding="utf-8")
    return path


def test_defaults_when_file_is_missing(repo_root: Path) -> None:
    config = Config.load(path=repo_root / "config" / "discogs_api.toml")

    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == 30.0
    assert config.console_level == logging.WARNING
    assert config.resolved_log_file() is None
    assert not default_config_path().exists()


def test_load_reads_toml(repo_root: Path) -> None:
    path = _write_config(
        repo_root,
        'base_url = "https://staging.example.com/api"\n'
        'user_agent = "MyApp/2.0"\n'
        "timeout = 12\n"
        'console_log_level = "debug"\n'
        'log_file = "/tmp/discogs.log"\n',
    )

    config = Config.load(path=path)

    assert config.base_url == "https://staging.example.com/api/"
    assert config.user_agent == "MyApp/2.0"
    assert config.timeout == 12.0
    assert config.console_log_level == "DEBUG"
    assert config.log_file == Path("/tmp/discogs.log")


def test_env_var_overrides_location(repo_root: Path, tmp_path: Path) -> None:
    other = tmp_path / "elsewhere.toml"
    _ = other.write_text("timeout = 3.5\n", encoding="utf-8")

    config = Config.load(env={CONFIG_ENV_VAR: str(other)})

    assert config.timeout == 3.5


def test_file_logging_uses_default_log_file(
    repo_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(LOG_FILE_ENV_VAR, raising=False)
    config = Config(file_logging=True)

    assert config.resolved_log_file() == (repo_root / "logs" / "discogs_api.log").resolve()


def test_log_file_env_var_overrides_default(
    repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = repo_root
    target = tmp_path / "custom" / "client.log"
    monkeypatch.setenv(LOG_FILE_ENV_VAR, str(target))

    assert Config(file_logging=True).resolved_log_file() == target.resolve()


def test_explicit_log_file_wins_over_file_logging_flag(repo_root: Path) -> None:
    _ = repo_root
    config = Config(file_logging=True, log_file=Path("/var/log/discogs.log"))

    assert config.resolved_log_file() == Path("/var/log/discogs.log")


def test_invalid_toml_raises_parse_error(repo_root: Path) -> None:
    path = _write_config(repo_root, "timeout = \n")

    with pytest.raises(ConfigParseError):
        _ = Config.load(path=path)


@pytest.mark.parametrize(
    "text",
    [
        "unknown_key = 1\n",
        "timeout = 0\n",
        'timeout = "fast"\n',
        'console_log_level = "LOUD"\n',
        'base_url = ""\n',
    ],
)
def test_invalid_values_raise_validation_error(repo_root: Path, text: str) -> None:
    path = _write_config(repo_root, text)

    with pytest.raises(ConfigValidationError):
        _ = Config.load(path=path)


def test_load_without_arguments_is_cached(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = repo_root
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert Config.load() is Config.load()
