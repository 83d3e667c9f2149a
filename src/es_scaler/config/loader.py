"""
Configuration loader - Reads a trigger definition from config.yaml and secret.json.

The YAML file holds the trigger metadata and resolved environment; the
secret file holds the auth params. Secrets never live in the YAML file.

config.yaml:
    triggerMetadata:
      addresses: "https://es-0:9200,https://es-1:9200"
      index: "jobs"
      searchTemplateName: "pending-jobs"
      valueLocation: "hits.total.value"
      targetValue: "10"
      passwordFromEnv: "ES_PASSWORD"
    resolvedEnv:
      ES_PASSWORD: "..."

secret.json:
    {"authParams": {"username": "scaler", "password": "..."}}
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml

from ..domain import ConfigurationError, ScalerConfig
from ..infrastructure.logger import StandardLogger
from ..interfaces import ScalerLogger

ENV_CONFIG_PATH = "ES_SCALER_CONFIG"
ENV_SECRET_PATH = "ES_SCALER_SECRET"


def _read_yaml(path: Path, logger: ScalerLogger) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        logger.error(f"Invalid YAML in {path}: {exc}")
        raise ConfigurationError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at top level")
    return data


def _read_secrets(path: Path, logger: ScalerLogger) -> dict[str, Any]:
    if not path.exists():
        logger.info(f"No secret file at {path}, auth params left empty")
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            secrets = json.load(f)
    except json.JSONDecodeError as exc:
        logger.error(f"Invalid JSON in {path}: {exc}")
        raise ConfigurationError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(secrets, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    return secrets


def _merge_dicts(base: dict[str, Any], overrides: dict[str, Any]) -> None:
    """Merge overrides into base recursively."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


def load_scaler_config(
    config_path: str | os.PathLike[str] | None = None,
    secret_path: str | os.PathLike[str] | None = None,
    logger: ScalerLogger | None = None,
) -> ScalerConfig:
    """
    Load a ScalerConfig from disk.

    Paths default to $ES_SCALER_CONFIG / $ES_SCALER_SECRET, then
    config.yaml / secret.json in the working directory. Values from the
    secret file take priority over the YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist
        ConfigurationError: If either file cannot be parsed
    """
    logger = logger or StandardLogger(__name__)
    config_file = Path(config_path or os.environ.get(ENV_CONFIG_PATH, "config.yaml"))
    secret_file = Path(secret_path or os.environ.get(ENV_SECRET_PATH, "secret.json"))

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    data = _read_yaml(config_file, logger)
    _merge_dicts(data, _read_secrets(secret_file, logger))
    logger.info(f"Scaler configuration loaded from {config_file}")
    return ScalerConfig.from_dict(data)


__all__ = [
    "ENV_CONFIG_PATH",
    "ENV_SECRET_PATH",
    "load_scaler_config",
]
