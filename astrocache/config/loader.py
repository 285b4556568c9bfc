"""YAML config loader with .env secret injection."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from astrocache.config.schema import AppConfig

ACCESS_KEY_ENV = "WEATHER_KEY"


def load_config(path: str | Path | None = None, env_file: str | Path | None = None) -> AppConfig:
    """Load and validate config from an optional YAML file.

    When the YAML leaves ``provider.access_key`` empty, it is filled from
    the WEATHER_KEY environment variable (after loading ``.env``).
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    load_dotenv(env_file or find_dotenv(usecwd=True))

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("access_key"):
        provider["access_key"] = os.environ.get(ACCESS_KEY_ENV, "")

    return AppConfig(**raw)


def get_config_value(config: AppConfig | dict, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'.

    Works on the model or on a dumped dict such as ``redacted(config)``.
    """
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: AppConfig) -> dict:
    """Dump config for display with the access key masked."""
    data = config.model_dump(mode="json")
    if data["provider"]["access_key"]:
        data["provider"]["access_key"] = "****"
    return data
