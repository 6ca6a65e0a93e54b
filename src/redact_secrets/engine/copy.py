"""
Deep Copy Engine.

Clones a generic value tree so that redaction can mutate the clone without
touching the caller's live payload. Only explicitly registered concrete
types are copied; anything else is reported as a CopyError rather than
being shared or guessed at.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from redact_secrets.errors import CopyError
from redact_secrets.values import SCALAR_TYPES, KeyValuePair

# A copier receives the source value and a ``copy_child(child, segment)``
# callback that recurses through the engine, appending ``segment`` to the
# error path.
CopyChild = Callable[[Any, str], Any]
Copier = Callable[[Any, CopyChild], Any]


def _key_segment(key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return f".{key}"
    return f"[{key!r}]"


def _copy_mapping(value: dict[Any, Any], copy_child: CopyChild) -> dict[Any, Any]:
    return {
        copy_child(key, _key_segment(key)): copy_child(item, _key_segment(key))
        for key, item in value.items()
    }


def _copy_list(value: list[Any], copy_child: CopyChild) -> list[Any]:
    return [copy_child(item, f"[{index}]") for index, item in enumerate(value)]


def _copy_tuple(value: tuple[Any, ...], copy_child: CopyChild) -> tuple[Any, ...]:
    return tuple(copy_child(item, f"[{index}]") for index, item in enumerate(value))


def _copy_pair(value: KeyValuePair, copy_child: CopyChild) -> KeyValuePair:
    return KeyValuePair(
        key=copy_child(value.key, ".key"),
        value=copy_child(value.value, ".value"),
    )


class DeepCopyEngine:
    """Structural deep copy over a table of registered concrete types.

    Lookup is by exact type: registering ``dict`` does not register
    ``OrderedDict``. Leaf types (registered without a copier) are returned
    as-is, so they must be immutable.
    """

    def __init__(self, extra_types: Iterable[type] = ()) -> None:
        self._copiers: dict[type, Copier | None] = {t: None for t in SCALAR_TYPES}
        self._copiers[dict] = _copy_mapping
        self._copiers[list] = _copy_list
        self._copiers[tuple] = _copy_tuple
        self._copiers[KeyValuePair] = _copy_pair
        for value_type in extra_types:
            self.register(value_type)

    def register(self, value_type: type, copier: Copier | None = None) -> None:
        """Register a concrete type.

        Args:
            value_type: The exact type to accept.
            copier: How to clone instances. ``None`` registers an immutable
                leaf that is returned unchanged.
        """
        if not isinstance(value_type, type):
            raise TypeError("value_type must be a class.")
        self._copiers[value_type] = copier

    def is_registered(self, value_type: type) -> bool:
        return value_type in self._copiers

    @property
    def registered_types(self) -> list[type]:
        return list(self._copiers)

    def copy(self, value: Any) -> Any:
        """Return a fully independent clone of ``value``.

        Raises:
            CopyError: On an unregistered type, a reference cycle, or nesting
                deeper than the interpreter's recursion limit.
        """
        try:
            return self._copy(value, "$", set())
        except RecursionError:
            raise CopyError("Payload nesting exceeds the recursion limit") from None

    def _copy(self, value: Any, path: str, active: set[int]) -> Any:
        value_type = type(value)
        if value_type not in self._copiers:
            raise CopyError(f"Unsupported type {value_type.__qualname__}", path)

        copier = self._copiers[value_type]
        if copier is None:
            return value

        marker = id(value)
        if marker in active:
            raise CopyError("Reference cycle detected", path)
        active.add(marker)
        try:
            return copier(value, lambda child, segment: self._copy(child, path + segment, active))
        finally:
            active.discard(marker)


_default_engine = DeepCopyEngine()


def deep_copy(value: Any) -> Any:
    """Copy ``value`` with the default engine."""
    return _default_engine.copy(value)


__all__ = ["Copier", "CopyChild", "DeepCopyEngine", "deep_copy"]
