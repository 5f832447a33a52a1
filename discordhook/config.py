"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from discordhook.utils.platform import get_config_dir


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DISCORDHOOK_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    webhook_url: str = ""
    timeout: float = 30.0
    # Defaults applied by the CLI when the flags are not given
    username: str = ""
    avatar_url: str = ""
    log_level: str = "INFO"
    log_json: bool = False


def _find_config_file(config_path: str | Path | None) -> Path | None:
    """Explicit path, then $DISCORDHOOK_CONFIG, then config.yaml in the config dir."""
    candidate = config_path or os.environ.get("DISCORDHOOK_CONFIG")
    path = Path(candidate) if candidate else get_config_dir() / "config.yaml"
    return path if path.is_file() else None


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from env vars, with values from a YAML file taking precedence."""
    path = _find_config_file(config_path)
    yaml_data: dict[str, Any] = {}
    if path is not None:
        yaml_data = yaml.safe_load(path.read_text()) or {}
    return Settings(**yaml_data)
