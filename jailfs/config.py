import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer

logger = logging.getLogger(__name__)

ENV_TEMP_DIR = "JAILFS_TEMP_DIR"
ENV_PREFIX = "JAILFS_PREFIX"
ENV_LOG_LEVEL = "JAILFS_LOG_LEVEL"


class InvalidConfigError(Exception):
    def __init__(self, config_path: Path, original_error: Exception):
        super().__init__(f"Invalid jailfs config {config_path}: {original_error}")
        self.config_path = config_path
        self.original_error = original_error


class JailSettings(BaseModel):
    """
    Settings for allocating sandbox roots.

    - `temp_dir`: parent directory for sandbox roots (None: system temp dir)
    - `prefix`: name prefix of each sandbox directory
    - `log_level`: level used by the CLI when configuring logging
    """

    model_config = ConfigDict(
        extra="forbid",
    )

    temp_dir: Path | None = None
    prefix: str = "jailfs-"
    log_level: str = "WARNING"

    @field_serializer("temp_dir")
    def serialize_temp_dir(self, v: Path | None) -> str | None:
        return str(v) if v is not None else None


def _env_overrides() -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, name in (
        ("temp_dir", ENV_TEMP_DIR),
        ("prefix", ENV_PREFIX),
        ("log_level", ENV_LOG_LEVEL),
    ):
        value = os.getenv(name)
        if value is None or value == "":
            continue
        overrides[key] = value
    return overrides


def load_settings(config_path: Path | None = None) -> JailSettings:
    """
    Build settings from an optional YAML file, then environment overrides.

    Environment variables win over file values so a single run can be
    redirected without editing the file.
    """

    data: dict = {}

    if config_path is not None:
        config_path = Path(config_path)
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise InvalidConfigError(config_path, e) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise InvalidConfigError(
                config_path, TypeError("top-level YAML value must be a mapping")
            )
        data.update(loaded)

    data.update(_env_overrides())

    try:
        settings = JailSettings(**data)
    except ValidationError as e:
        raise InvalidConfigError(config_path or Path("<environment>"), e) from e

    logger.debug("Loaded settings: %s", settings.model_dump_json())
    return settings
