# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Protocol definitions.

These interfaces describe what protochain accepts from callers (instance
initializers) and what it expects from a settings source.
"""

from __future__ import annotations

from typing import Any, Protocol


class Initializer(Protocol):
    """Protocol for a Constructor's instance initializer."""

    def __call__(self, instance: Any, *args: Any, **kwargs: Any) -> Any:
        """Set instance-level fields on instance. Return value is ignored."""
        ...


class SettingsModel(Protocol):
    """Protocol for configuration access."""

    @property
    def log_level(self) -> str:
        """Level name for the protochain logger."""
        ...

    @property
    def log_format(self) -> str:
        """logging.Formatter format string."""
        ...
