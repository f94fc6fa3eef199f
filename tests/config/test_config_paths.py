from __future__ import annotations

from pathlib import Path

import pytest

from discogs_api.config.paths import (
    CONFIG_ENV_VAR,
    _detect_repo_root,  # pyright: ignore[reportPrivateUsage]
    resolve_config_path,
    resolve_overridable_path,
)


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "a.toml"

    resolved = resolve_config_path(explicit_path=explicit, env={CONFIG_ENV_VAR: "/ignored.toml"})

    assert resolved == explicit.resolve()


def test_env_path_used_when_no_explicit_path(tmp_path: Path) -> None:
    target = tmp_path / "env.toml"

    assert resolve_config_path(env={CONFIG_ENV_VAR: f"  {target}  "}) == target.resolve()


def test_blank_env_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={CONFIG_ENV_VAR: "   "},
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "module.py") == tmp_path


def test_detect_repo_root_falls_back_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    isolated = tmp_path / "no_markers"
    isolated.mkdir()

    root = _detect_repo_root(isolated / "module.py")

    assert root in {Path.cwd(), *isolated.parents}
