"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "POSTMATTER_"


class Settings(BaseModel):
    marker:     str = Field(default="---", description="Line that opens and closes the front matter block")
    encoding:   str = Field(default="utf-8", description="Encoding used to read post files")
    date_keys:  list[str] = Field(default=["date"], description="Front matter keys decoded as calendar dates")
    extensions: list[str] = Field(default=[".md", ".markdown"], description="Suffixes of post files")
    posts_dir:  str = Field(default="_posts", description="Directory scanned for posts")

    @field_validator("marker")
    @classmethod
    def _check_marker(cls, value: str) -> str:
        if len(value) != 3 or len(set(value)) != 1 or value.isspace():
            raise ValueError("marker must be one character repeated three times, e.g. '---'")
        return value

    @field_validator("extensions")
    @classmethod
    def _dot_extensions(cls, value: list[str]) -> list[str]:
        return [v if v.startswith(".") else f".{v}" for v in (e.strip().lower() for e in value) if v]


def _from_env(name: str, raw: str) -> Any:
    """Comma-separated env values populate list fields."""
    if Settings.model_fields[name].annotation == list[str]:
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then POSTMATTER_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _from_env(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
