# protochain — Prototype Delegation and Parent Initialization for Python
# Copyright (c) 2025
# The protochain authors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Constructors, normalize() and extend().

normalize(spec) coerces a specification into a Constructor:
- Constructor -> returned unchanged
- mapping -> new Constructor whose template wraps the mapping itself
- other callable -> adopted once as an initializer

extend(source, target) returns target's Constructor with a template that
delegates to source's template, plus a call-once parent-initializer that
pulls source's instance fields into each new instance.

Class-level attributes set on a Constructor are never inherited.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any

from .config import DEFAULT_PARENT_NAME
from .errors import (
    AlreadyInitializedError,
    ArgumentCountError,
    ArgumentMissingError,
    ArgumentTypeError,
)
from .interfaces import Initializer
from .logging import get_logger
from .objects import ParentObject, ParentState, ProtoObject

logger = get_logger(__name__)

CONSTRUCTOR_KEY = "constructor"

_MISSING: Any = object()

# Attribute under which a plain callable remembers its adopted Constructor.
# Stored on the callable itself so the pair is freed together.
ADOPTED_ATTR = "_protochain_constructor"


def _noop(instance: ProtoObject, *args: Any, **kwargs: Any) -> None:
    return None


class Constructor:
    """
    Callable that creates ProtoObjects delegating to its template.

    Calling a Constructor is the ``new`` protocol: a fresh instance is
    created, the initializer runs against it, and the instance is returned.
    """

    def __init__(
        self,
        initializer: Initializer | None = None,
        template: ProtoObject | None = None,
        name: str | None = None,
    ):
        self.initializer: Initializer = initializer or _noop
        self.name = name or getattr(initializer, "__name__", None) or "anonymous"
        self.parent: Constructor | None = None

        if template is None:
            template = ProtoObject()
            template[CONSTRUCTOR_KEY] = self
        # A supplied template is shared as-is (link constructors rely on it).
        self.template = template

    def __call__(self, *args: Any, **kwargs: Any) -> ProtoObject:
        instance = ProtoObject(self.template)
        self.initializer(instance, *args, **kwargs)
        return instance

    def __repr__(self) -> str:
        return f"<Constructor {self.name}>"


def _describe(value: Any) -> str:
    if value is None:
        return "None"
    return f"{type(value).__name__} [{value!r}]"


def _check_specification(specification: Any) -> None:
    """Raise if specification cannot be normalized. Never mutates it."""
    if specification is _MISSING:
        raise ArgumentMissingError(
            "normalize(): invalid specification, must be a constructor, "
            "callable or mapping, but was missing"
        )
    if isinstance(specification, Constructor):
        return
    if isinstance(specification, MutableMapping):
        existing = specification.get(CONSTRUCTOR_KEY)
        if existing is not None and not callable(existing):
            raise ArgumentTypeError(
                f"normalize(): mapping {CONSTRUCTOR_KEY!r} must be callable, "
                f"but was {_describe(existing)}",
                value=existing,
            )
        return
    if callable(specification) and not isinstance(specification, ProtoObject):
        return
    raise ArgumentTypeError(
        "normalize(): invalid specification, must be a constructor, "
        f"callable or mapping, but was {_describe(specification)}",
        value=specification,
    )


def _from_mapping(specification: Any) -> Constructor:
    existing = specification.get(CONSTRUCTOR_KEY)
    template = ProtoObject(fields=specification)

    if isinstance(existing, Constructor):
        # Already normalized once: re-point the same Constructor.
        ctor = existing
        ctor.template = template
    else:
        ctor = Constructor(existing, template=template)

    specification[CONSTRUCTOR_KEY] = ctor
    logger.debug("normalized mapping with keys %s into %r", list(specification), ctor)
    return ctor


def _adopted_constructor(specification: Callable[..., Any]) -> Constructor | None:
    try:
        found = vars(specification).get(ADOPTED_ATTR)
    except TypeError:
        # no __dict__ (slots, builtins)
        return None
    return found if isinstance(found, Constructor) else None


def _adopt(specification: Callable[..., Any]) -> Constructor:
    ctor = _adopted_constructor(specification)
    if ctor is None:
        ctor = Constructor(specification)
        try:
            setattr(specification, ADOPTED_ATTR, ctor)
        except (AttributeError, TypeError):
            # read-only callables (bound methods, builtins) adopt afresh each time
            logger.debug("cannot remember %r; adopting without caching", specification)
        logger.debug("adopted callable %r as %r", specification, ctor)
    return ctor


def normalize(specification: Any = _MISSING) -> Constructor:
    """Coerce a specification into a Constructor.

    Args:
        specification: A Constructor, a mapping, or any other callable

    Returns:
        The Constructor itself, a new Constructor whose template wraps the
        mapping (the mapping's "constructor" key is set to it), or the
        Constructor adopted for the callable

    Raises:
        ArgumentMissingError: No specification was passed
        ArgumentTypeError: Specification is none of the accepted kinds
    """
    _check_specification(specification)

    if isinstance(specification, Constructor):
        return specification
    if isinstance(specification, MutableMapping):
        return _from_mapping(specification)
    return _adopt(specification)


def _make_parent_initializer(parent_name: str) -> Callable[..., ProtoObject]:
    def parent(self: ProtoObject, *args: Any, **kwargs: Any) -> ProtoObject:
        """Initialize source-level instance state on self. Call once."""
        if self.parent_state is ParentState.INITIALIZED:
            raise AlreadyInitializedError(
                f"{parent_name}() already ran for {self!r}"
            )

        link: Constructor = self[CONSTRUCTOR_KEY].parent
        p = ParentObject(link.template)
        link.initializer(p)

        source: Constructor = p[CONSTRUCTOR_KEY]
        source.initializer(p, *args, **kwargs)

        for key in p.own_keys():
            self[key] = p[key]

        self[parent_name] = p
        object.__setattr__(self, "_parent_state", ParentState.INITIALIZED)
        logger.debug("initialized parent %r on %r", source, self)
        return self

    parent.__name__ = parent_name
    return parent


def extend(
    source: Any = _MISSING,
    target: Any = _MISSING,
    *extra: Any,
    parent_name: str = DEFAULT_PARENT_NAME,
) -> Constructor:
    """Build target's Constructor on top of source's template.

    Args:
        source: Constructor, mapping or callable to inherit from
        target: Constructor, mapping or callable describing the new type
        *extra: Ignored
        parent_name: Field name of the installed parent-initializer

    Returns:
        The normalized target, whose template now delegates to the source's

    Raises:
        ArgumentCountError: Fewer than two specifications were passed
        ArgumentMissingError, ArgumentTypeError: From normalize()
    """
    if source is _MISSING or target is _MISSING:
        raise ArgumentCountError(
            "extend(): requires 2 arguments, source and target."
        )

    # Validate both before normalize() mutates either.
    _check_specification(source)
    _check_specification(target)

    target_is_mapping = isinstance(target, MutableMapping)
    new_source = normalize(source)
    new_target = normalize(target)

    link = Constructor(name=f"{new_source.name}Link", template=new_source.template)
    new_target.parent = link
    prototype = link()

    if target_is_mapping:
        current = new_target.template
        for key in current.own_keys():
            prototype[key] = current[key]

    prototype[CONSTRUCTOR_KEY] = new_target
    prototype[parent_name] = _make_parent_initializer(parent_name)
    new_target.template = prototype

    logger.debug("extended %r from %r via %r", new_target, new_source, link)
    return new_target


def initialize_parent(
    instance: ProtoObject,
    *args: Any,
    parent_name: str = DEFAULT_PARENT_NAME,
    **kwargs: Any,
) -> ProtoObject:
    """Run the parent-initializer found on instance's template chain.

    Unlike ``instance.parent(...)`` this still reaches the shared
    initializer after the own ``parent`` field has been set, so a repeat
    call fails with AlreadyInitializedError from the state flag.
    """
    for proto in instance.lookup_chain()[1:]:
        if proto.has_own(parent_name) and callable(proto[parent_name]):
            return proto[parent_name](instance, *args, **kwargs)
    raise AttributeError(f"no {parent_name}() initializer on {instance!r}")
