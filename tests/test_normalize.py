"""
Tests for normalize(): coercing specifications into Constructors.
"""

from __future__ import annotations

import gc
import weakref
from types import MappingProxyType

import pytest

from protochain import (
    ArgumentMissingError,
    ArgumentTypeError,
    Constructor,
    ProtoObject,
    normalize,
)


# ----------------------------------------------------------------
# Constructor and callable specifications
# ----------------------------------------------------------------


def test_constructor_is_returned_unchanged() -> None:
    ctor = Constructor()
    assert normalize(ctor) is ctor


def test_new_constructor_template_points_back() -> None:
    ctor = Constructor()
    assert ctor.template["constructor"] is ctor
    assert ctor.parent is None


def test_plain_function_is_adopted_once() -> None:
    def point(self, x, y):
        self.x = x
        self.y = y

    first = normalize(point)
    assert isinstance(first, Constructor)
    assert normalize(point) is first
    assert first.initializer is point
    assert first.name == "point"

    p = first(1, 2)
    assert (p.x, p.y) == (1, 2)
    assert p.constructor is first


class Recorder:
    """Callable that compares by value, which makes it unhashable."""

    def __eq__(self, other):
        return isinstance(other, Recorder)

    def __call__(self, instance, value=None):
        instance.value = value


class Slotted:
    __slots__ = ()

    def __call__(self, instance):
        instance.ok = True


def test_unhashable_callable_is_adopted_once() -> None:
    recorder = Recorder()
    first = normalize(recorder)

    assert normalize(recorder) is first
    assert first(3).value == 3


def test_callable_without_attributes_is_adopted_each_time() -> None:
    slotted = Slotted()
    first = normalize(slotted)
    second = normalize(slotted)

    assert first is not second
    assert first().ok and second().ok


def test_bound_method_is_adopted() -> None:
    holder = Recorder()
    ctor = normalize(holder.__call__)
    assert ctor(1).value == 1


def test_adopted_callables_can_be_collected() -> None:
    refs = []
    for i in range(20):
        f = lambda self, i=i: None  # noqa: E731
        normalize(f)
        refs.append(weakref.ref(f))
    del f
    gc.collect()

    assert all(ref() is None for ref in refs)


# ----------------------------------------------------------------
# Mapping specifications
# ----------------------------------------------------------------


def test_mapping_becomes_template_without_copy() -> None:
    spec: dict = {"kind": "widget"}
    ctor = normalize(spec)

    assert ctor.template.fields is spec
    assert spec["constructor"] is ctor
    assert ctor().kind == "widget"


def test_mapping_constructor_key_is_used_as_initializer() -> None:
    def init(self, size):
        self.size = size

    spec = {"constructor": init, "kind": "widget"}
    ctor = normalize(spec)

    assert ctor.initializer is init
    w = ctor(5)
    assert w.size == 5
    assert w.has_own("size")
    assert not w.has_own("kind")


def test_mapping_without_constructor_gets_noop_initializer() -> None:
    ctor = normalize({})
    obj = ctor("ignored", key="ignored")
    assert obj.own_keys() == []


def test_equal_mappings_give_distinct_constructors() -> None:
    assert normalize({"a": 1}) is not normalize({"a": 1})


def test_same_mapping_twice_reuses_its_constructor() -> None:
    spec: dict = {"a": 1}
    first = normalize(spec)
    second = normalize(spec)

    assert second is first
    assert second.template.fields is spec


# ----------------------------------------------------------------
# Errors
# ----------------------------------------------------------------


def test_missing_argument() -> None:
    with pytest.raises(ArgumentMissingError):
        normalize()


@pytest.mark.parametrize("bad", [None, 42, "text", [1, 2], 3.5])
def test_unsupported_types(bad) -> None:
    with pytest.raises(ArgumentTypeError) as excinfo:
        normalize(bad)
    assert excinfo.value.value is bad


def test_type_error_message_names_type_and_value() -> None:
    with pytest.raises(ArgumentTypeError, match=r"but was int \[42\]"):
        normalize(42)
    with pytest.raises(ArgumentTypeError, match=r"but was None"):
        normalize(None)


def test_read_only_mapping_is_rejected() -> None:
    with pytest.raises(ArgumentTypeError):
        normalize(MappingProxyType({"a": 1}))


def test_proto_object_is_not_a_specification() -> None:
    with pytest.raises(ArgumentTypeError):
        normalize(ProtoObject())


def test_non_callable_constructor_key_is_rejected_without_mutation() -> None:
    spec = {"constructor": "nope"}
    with pytest.raises(ArgumentTypeError):
        normalize(spec)
    assert spec == {"constructor": "nope"}


def test_errors_are_type_errors() -> None:
    with pytest.raises(TypeError):
        normalize()
    with pytest.raises(TypeError):
        normalize(None)
