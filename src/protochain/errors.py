# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Error taxonomy for protochain.

All errors are raised eagerly at the call site; nothing is retried or
recovered internally.
"""

from __future__ import annotations


class ProtochainError(Exception):
    """Base class for every error raised by protochain."""


class ArgumentMissingError(ProtochainError, TypeError):
    """A required specification argument was not supplied at all."""


class ArgumentTypeError(ProtochainError, TypeError):
    """A specification is neither a constructor, a callable, nor a mapping."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class ArgumentCountError(ProtochainError, TypeError):
    """extend() was called with fewer than two specifications."""


class AlreadyInitializedError(ProtochainError, TypeError):
    """The parent-initializer was invoked a second time on one instance."""
