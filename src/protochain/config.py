# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Settings for protochain.

Handles:
- Packaged YAML defaults loading (protochain/defaults/*.yaml)
- PROTOCHAIN_LOG_LEVEL environment override
- Settings wrapper implementing the SettingsModel protocol

The core (normalize/extend) never loads settings itself; only
configure_logging() reads them. DEFAULT_PARENT_NAME is the field name
extend() installs unless told otherwise.
"""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PARENT_NAME = "parent"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

ENV_LOG_LEVEL = "PROTOCHAIN_LOG_LEVEL"


# -----------------------
# Settings wrapper
# -----------------------


class Settings:
    """Simple settings wrapper that implements SettingsModel protocol."""

    def __init__(self, settings_dict: dict[str, Any]):
        self._settings = settings_dict

    @property
    def log_level(self) -> str:
        override = os.getenv(ENV_LOG_LEVEL)
        if override:
            return override.upper()
        return str(self.get_path("logging.level", DEFAULT_LOG_LEVEL)).upper()

    @property
    def log_format(self) -> str:
        return self.get_path("logging.format", DEFAULT_LOG_FORMAT)

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def get_path(self, path: str, default: Any = None) -> Any:
        """
        Nested lookup using dot-separated path.
        Example: get_path("logging.level", "WARNING")
        """
        if not path:
            return default

        cur: Any = self._settings
        for part in path.split("."):
            if not isinstance(cur, dict):
                return default
            if part not in cur:
                return default
            cur = cur[part]
        return cur


# -----------------------
# Packaged defaults loading
# -----------------------


def _defaults_dir() -> Path:
    """Return the installed path to the packaged defaults directory."""
    return Path(
        importlib_resources.files("protochain.defaults")
    )  # type: ignore[arg-type]


def load_defaults_yaml(filename: str) -> dict[str, Any]:
    """
    Load a YAML file from protochain/defaults/.
    """
    defaults_dir = _defaults_dir()
    path = defaults_dir / filename
    if not path.exists():
        raise FileNotFoundError(
            f"Missing defaults YAML: {filename} "
            f"(looked in {defaults_dir})"
        )

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Defaults YAML {filename} must load to a mapping/dict."
        )
    return data


def load_settings() -> Settings:
    """
    Load settings.yaml from packaged defaults and return a Settings wrapper.
    """
    return Settings(load_defaults_yaml("settings.yaml"))
