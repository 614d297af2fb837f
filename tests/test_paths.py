from pathlib import Path

from textcut import paths


def test_get_textcut_home_defaults(monkeypatch):
    monkeypatch.delenv("TEXTCUT_HOME", raising=False)
    home = paths.get_textcut_home()
    assert home.name == ".textcut"


def test_get_textcut_home_env(monkeypatch, tmp_path: Path):
    target = tmp_path / "custom"
    monkeypatch.setenv("TEXTCUT_HOME", str(target))
    assert paths.get_textcut_home() == target
    assert paths.default_config_path() == target / "config.toml"
