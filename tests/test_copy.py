"""Tests for the deep copy engine."""

from __future__ import annotations

import sys
from collections import OrderedDict
from decimal import Decimal

import pytest

from redact_secrets.engine.copy import DeepCopyEngine, deep_copy
from redact_secrets.errors import CopyError
from redact_secrets.values import KeyValuePair


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class TestDeepCopy:
    """Tests for copying supported shapes."""

    def test_scalars_returned_as_is(self):
        """Test registered scalar leaves copy to themselves."""
        for value in (None, True, 3, 2.5, "s", Decimal("1.10")):
            assert deep_copy(value) is value

    def test_nested_containers_are_independent(self):
        """Test no container is shared between source and clone."""
        source = {"a": [1, {"b": [2, 3]}], "c": {"d": {"e": []}}}

        clone = deep_copy(source)

        assert clone == source
        assert clone is not source
        assert clone["a"] is not source["a"]
        assert clone["a"][1] is not source["a"][1]
        assert clone["a"][1]["b"] is not source["a"][1]["b"]
        assert clone["c"]["d"]["e"] is not source["c"]["d"]["e"]

        clone["a"][1]["b"].append(4)
        clone["c"]["d"]["new"] = True
        assert source == {"a": [1, {"b": [2, 3]}], "c": {"d": {"e": []}}}

    def test_tuple_contents_copied(self):
        """Test mutable values inside tuples are cloned."""
        inner = {"k": "v"}
        clone = deep_copy({"t": (inner, 1)})

        assert clone == {"t": ({"k": "v"}, 1)}
        assert isinstance(clone["t"], tuple)
        assert clone["t"][0] is not inner

    def test_arbitrary_keys(self):
        """Test mappings with non-string scalar keys copy."""
        source = {1: "a", None: "b", 2.5: {"x": 1}}
        assert deep_copy(source) == source

    def test_key_value_pairs(self):
        """Test KeyValuePair values are cloned structurally."""
        value = {"v": [1]}
        clone = deep_copy([KeyValuePair("k", value)])

        assert clone == [KeyValuePair("k", {"v": [1]})]
        assert clone[0].value is not value

    def test_shared_subtree_is_not_a_cycle(self):
        """Test the same child appearing twice copies without error."""
        shared = {"x": 1}
        clone = deep_copy({"a": shared, "b": shared})
        assert clone == {"a": {"x": 1}, "b": {"x": 1}}


class TestCopyErrors:
    """Tests for copy failure reporting."""

    def test_unregistered_type(self):
        """Test an unregistered object raises CopyError with its path."""
        with pytest.raises(CopyError) as exc_info:
            deep_copy({"shapes": [1, Point(1, 2)]})

        assert exc_info.value.path == "$.shapes[1]"
        assert "Point" in str(exc_info.value)

    def test_subclass_not_registered(self):
        """Test subclasses of registered types are rejected."""
        with pytest.raises(CopyError):
            deep_copy({"ordered": OrderedDict(a=1)})

    def test_unregistered_key_type(self):
        """Test mapping keys must be registered too."""
        with pytest.raises(CopyError):
            deep_copy({frozenset({1}): "x"})

    def test_non_identifier_key_path(self):
        """Test keys that are not identifiers are bracketed in the path."""
        with pytest.raises(CopyError) as exc_info:
            deep_copy({"a-b": {"x": set()}})
        assert exc_info.value.path == "$['a-b'].x"

    def test_cycle_detected(self):
        """Test reference cycles raise CopyError."""
        items: list = []
        items.append(items)
        with pytest.raises(CopyError, match="cycle"):
            deep_copy({"items": items})

    def test_excessive_depth(self):
        """Test nesting beyond the recursion limit raises CopyError."""
        value: dict = {}
        for _ in range(sys.getrecursionlimit() + 10):
            value = {"n": value}
        with pytest.raises(CopyError, match="recursion limit"):
            deep_copy(value)


class TestRegistration:
    """Tests for registering additional types."""

    def test_register_leaf(self):
        """Test a registered leaf is returned unchanged."""
        engine = DeepCopyEngine()
        point = Point(1, 2)
        engine.register(Point)

        assert engine.copy({"p": point})["p"] is point
        assert engine.is_registered(Point)

    def test_register_with_copier(self):
        """Test a custom copier recurses through the engine."""
        engine = DeepCopyEngine()
        engine.register(
            OrderedDict,
            lambda value, copy_child: OrderedDict(
                (key, copy_child(item, f".{key}")) for key, item in value.items()
            ),
        )
        source = OrderedDict(a=[1, 2])

        clone = engine.copy(source)

        assert clone == source
        assert clone["a"] is not source["a"]

    def test_extra_types(self):
        """Test extra_types registers leaves at construction."""
        engine = DeepCopyEngine(extra_types=[bytes])
        assert engine.copy({"raw": b"x"}) == {"raw": b"x"}
        assert bytes in engine.registered_types

    def test_register_rejects_non_class(self):
        """Test register requires a class."""
        with pytest.raises(TypeError):
            DeepCopyEngine().register("dict")  # type: ignore[arg-type]

    def test_default_engine_unaffected(self):
        """Test registering on one engine does not affect another."""
        DeepCopyEngine().register(Point)
        with pytest.raises(CopyError):
            deep_copy(Point(0, 0))
