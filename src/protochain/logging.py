# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Logging setup for protochain.

Modules use:
    from .logging import get_logger
    logger = get_logger(__name__)

Nothing is configured on import; applications call configure_logging()
once if they want protochain's DEBUG trace on a stream.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .interfaces import SettingsModel

ROOT_LOGGER = "protochain"


def configure_logging(
    settings: SettingsModel | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the protochain logger.

    Level and format come from settings (packaged defaults when omitted).
    Safe to call multiple times; only one handler is ever installed.
    """
    if settings is None:
        from .config import load_settings

        settings = load_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)

    logger.setLevel(settings.log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
