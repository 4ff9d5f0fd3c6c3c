# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
protochain: prototype delegation with a call-once parent initializer.

Only instance-level state is inherited. Attributes set directly on a
Constructor ("statics") are never shared with constructors extended from it.
"""
from .constructor import Constructor as Constructor  # noqa: F401 (re-export)
from .constructor import extend as extend  # noqa: F401
from .constructor import initialize_parent as initialize_parent  # noqa: F401
from .constructor import normalize as normalize  # noqa: F401
from .errors import (  # noqa: F401
    AlreadyInitializedError,
    ArgumentCountError,
    ArgumentMissingError,
    ArgumentTypeError,
    ProtochainError,
)
from .objects import ProtoObject as ProtoObject  # noqa: F401
from .objects import instance_of as instance_of  # noqa: F401
