"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from orderly.config import (
    ConfigError,
    ConfigManager,
    OrderlyConfig,
    merge_overrides,
    resolve_with_precedence,
)


def _fresh_manager(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ConfigManager:
    monkeypatch.setenv("HOME", str(tmp_path))
    return ConfigManager()


def test_ensure_exists_creates_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)

    path = manager.ensure_exists()

    assert path == tmp_path / ".orderly" / "config.yaml"
    text = path.read_text(encoding="utf-8")
    assert "Orderly configuration file" in text
    assert "Last updated:" in text

    config = manager.load(include_env=False)
    assert config == OrderlyConfig()
    assert config.organization.subfolder_name == "Recent Downloads"
    assert config.folders.downloads is None


def test_resolve_with_precedence_respects_order(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.save({"folders": {"downloads": "/from/file", "videos": "/file/videos"}})

    env = {
        "ORDERLY__FOLDERS__DOWNLOADS": "/from/env",
        "ORDERLY__LOGGING__LEVEL": "info",
        "UNRELATED": "ignored",
    }
    cli = {"folders.downloads": "/from/cli"}

    config = manager.load(cli_overrides=cli, env_overrides=env)

    assert config.folders.downloads == "/from/cli"
    assert config.folders.videos == "/file/videos"
    assert config.logging.level == "INFO"


def test_env_overrides_can_be_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    monkeypatch.setenv("ORDERLY__CLI__QUIET_DEFAULT", "true")

    assert ConfigManager().load().cli.quiet_default is True
    assert manager.load(include_env=False).cli.quiet_default is False


def test_invalid_yaml_raises_config_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.ensure_exists()

    manager.config_path.write_text("- not-a-mapping", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load()


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=OrderlyConfig(),
            file_overrides={"organization": {"rules": {".zip": "Documents"}}},
        )


@pytest.mark.parametrize("name", ["", "  ", "a/b", "..", "a\\b"])
def test_subfolder_name_must_be_single_component(name: str) -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=OrderlyConfig(),
            cli_overrides={"organization.subfolder_name": name},
        )


def test_invalid_logging_level_raises() -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=OrderlyConfig(), file_overrides={"logging": {"level": "LOUD"}}
        )


def test_merge_overrides_expands_dotted_keys_and_keeps_siblings() -> None:
    base = {"folders": {"videos": "/videos"}, "cli": {"quiet_default": True}}

    merged = merge_overrides(base, {"folders.downloads": "/downloads"})

    assert merged == {
        "folders": {"videos": "/videos", "downloads": "/downloads"},
        "cli": {"quiet_default": True},
    }
    assert base == {"folders": {"videos": "/videos"}, "cli": {"quiet_default": True}}


def test_merge_overrides_rejects_conflicting_keys() -> None:
    with pytest.raises(ConfigError):
        merge_overrides({}, {"folders": "/somewhere", "folders.downloads": "/downloads"})
