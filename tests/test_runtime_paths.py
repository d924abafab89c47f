from __future__ import annotations

from pathlib import Path

from skinkit import runtime_paths


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "skinkit"
    assert (root / "ui").exists()


def test_source_builtin_theme_resolves() -> None:
    assert runtime_paths.builtin_themes_root().name == "builtin"
    assert runtime_paths.builtin_theme_path().exists()


def test_frozen_prefers_meipass_skinkit_dir(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    package_root = bundle_root / "skinkit"
    package_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == package_root


def test_frozen_falls_back_to_meipass_when_skinkit_missing(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    bundle_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == bundle_root


def test_home_path_prefers_home(monkeypatch) -> None:
    monkeypatch.setenv("HOME", "C:\\Users\\tester\\")
    assert runtime_paths.home_path() == "C:/Users/tester"


def test_home_path_windows_fallback(monkeypatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.setenv("HOMEDRIVE", "D:")
    monkeypatch.setenv("HOMEPATH", "\\Users\\me")
    assert runtime_paths.home_path() == "D:/Users/me"
