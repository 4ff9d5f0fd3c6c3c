# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Delegating objects.

A ProtoObject plays two roles:
- Instance: created by calling a Constructor
- Instance template: the shared object instances delegate to

Lookups walk an explicit chain of ProtoObjects (see lookup_chain()); writes
and deletes only ever touch the receiver's own fields.

Attribute names that collide with the ProtoObject API (fields, prototype,
own_keys, ...) are still reachable through item access: obj["fields"].
"""

from __future__ import annotations

import types
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from .errors import AlreadyInitializedError

if TYPE_CHECKING:
    from .constructor import Constructor


class ParentState(Enum):
    """Per-object state of the parent-initializer."""
    UNINITIALIZED = auto()
    INITIALIZED = auto()


class ProtoObject:
    """An object with own fields and an optional delegate for lookups."""

    __slots__ = ("_fields", "_prototype", "_parent_state")

    def __init__(
        self,
        prototype: ProtoObject | None = None,
        fields: dict[str, Any] | None = None,
    ):
        # fields is held by reference; normalize() relies on this
        object.__setattr__(self, "_fields", fields if fields is not None else {})
        object.__setattr__(self, "_prototype", prototype)
        object.__setattr__(self, "_parent_state", ParentState.UNINITIALIZED)

    # -----------------------
    # Introspection
    # -----------------------

    @property
    def fields(self) -> dict[str, Any]:
        """The own-field mapping (not a copy)."""
        return self._fields

    @property
    def prototype(self) -> ProtoObject | None:
        return self._prototype

    @property
    def parent_state(self) -> ParentState:
        return self._parent_state

    def lookup_chain(self) -> list[ProtoObject]:
        """Return [self, delegate, delegate's delegate, ...]."""
        chain: list[ProtoObject] = []
        current: ProtoObject | None = self
        while current is not None:
            chain.append(current)
            current = current._prototype
        return chain

    def own_keys(self) -> list[str]:
        """Own field names in the order they were first set."""
        return list(self._fields)

    def has_own(self, name: str) -> bool:
        return name in self._fields

    # -----------------------
    # Field access
    # -----------------------

    def _lookup(self, name: str) -> Any:
        for obj in self.lookup_chain():
            if name in obj._fields:
                return obj._fields[name]
        raise KeyError(name)

    def __getitem__(self, name: str) -> Any:
        return self._lookup(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self._fields[name] = value

    def __delitem__(self, name: str) -> None:
        del self._fields[name]

    def __contains__(self, name: object) -> bool:
        return any(name in obj._fields for obj in self.lookup_chain())

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails.
        if name in ProtoObject.__slots__:
            raise AttributeError(name)
        try:
            value = self._lookup(name)
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no field {name!r}"
            ) from None
        if isinstance(value, types.FunctionType):
            return types.MethodType(value, self)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        ctor = self._fields.get("constructor")
        if ctor is None and self._prototype is not None:
            ctor = self._prototype._fields.get("constructor")
        label = getattr(ctor, "name", None) or "?"
        return f"<{type(self).__name__} of {label} own={self.own_keys()}>"


class ParentObject(ProtoObject):
    """
    Source-side object built by the parent-initializer.

    Once stored on an instance it replaces the initializer under the same
    name, so calling it again lands here.
    """

    __slots__ = ()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise AlreadyInitializedError(
            "parent already initialized; it now refers to the initialized "
            "parent object and cannot be called again"
        )


def get_prototype_of(obj: ProtoObject) -> ProtoObject | None:
    return obj.prototype


def instance_of(obj: Any, constructor: Constructor) -> bool:
    """True when constructor's template appears in obj's delegation chain."""
    if not isinstance(obj, ProtoObject):
        return False
    template = constructor.template
    return any(proto is template for proto in obj.lookup_chain()[1:])
