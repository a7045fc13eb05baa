"""
Service configuration.

Settings come from an optional YAML file, then environment variables.
A missing file means defaults.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/glyeral.yaml"


class Settings(BaseModel):
    """Runtime settings for the API and UI."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    audit_path: Optional[str] = Field(
        default="data/audit_trail.jsonl",
        description="JSON Lines file for the audit trail; empty keeps it in memory",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:8501", "http://127.0.0.1:8501"]
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("audit_path", "log_file")
    @classmethod
    def _blank_path(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


# Environment variable -> settings field
ENV_OVERRIDES = {
    "LOG_LEVEL": "log_level",
    "GLYERAL_AUDIT_PATH": "audit_path",
    "GLYERAL_CORS_ORIGINS": "cors_origins",
}


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from YAML and the environment.

    Args:
        config_path: YAML file (defaults to $GLYERAL_CONFIG, then config/glyeral.yaml)

    Returns:
        Validated Settings
    """
    path = Path(config_path or os.getenv("GLYERAL_CONFIG", DEFAULT_CONFIG_PATH))
    values: dict = {}

    try:
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        values.update(loaded)
    except FileNotFoundError:
        logger.debug(f"No config file at {path}, using defaults")

    for env_var, field_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_var)
        if env_value is not None:
            values[field_name] = env_value

    return Settings.model_validate(values)
