"""Unit tests for settings loading."""

from pathlib import Path

import pytest

from jailfs.config import InvalidConfigError, JailSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JAILFS_TEMP_DIR", "JAILFS_PREFIX", "JAILFS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestJailSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        settings = JailSettings()
        assert settings.temp_dir is None
        assert settings.prefix == "jailfs-"
        assert settings.log_level == "WARNING"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            JailSettings(root="/")

    def test_json_serializes_path(self, tmp_path: Path) -> None:
        dumped = JailSettings(temp_dir=tmp_path).model_dump(mode="json")
        assert dumped["temp_dir"] == str(tmp_path)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_no_file_gives_defaults(self) -> None:
        assert load_settings() == JailSettings()

    def test_yaml_file(self, tmp_path: Path) -> None:
        config = tmp_path / "jailfs.yaml"
        config.write_text(f"temp_dir: {tmp_path}\nprefix: box-\n")

        settings = load_settings(config)

        assert settings.temp_dir == tmp_path
        assert settings.prefix == "box-"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_settings(config) == JailSettings()

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "jailfs.yaml"
        config.write_text("prefix: from-file-\nlog_level: INFO\n")
        monkeypatch.setenv("JAILFS_PREFIX", "from-env-")

        settings = load_settings(config)

        assert settings.prefix == "from-env-"
        assert settings.log_level == "INFO"

    def test_env_temp_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JAILFS_TEMP_DIR", str(tmp_path))
        assert load_settings().temp_dir == tmp_path

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings(tmp_path / "missing.yaml")
        assert "missing.yaml" in str(exc_info.value)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("prefix: [unclosed\n")
        with pytest.raises(InvalidConfigError):
            load_settings(config)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigError):
            load_settings(config)

    def test_unknown_key(self, tmp_path: Path) -> None:
        config = tmp_path / "extra.yaml"
        config.write_text("colour: blue\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_settings(config)
        assert "colour" in str(exc_info.value)
