"""Binding values for template expansion.

A binding is one of three shapes: a scalar string, an ordered list of
strings, or an ordered sequence of string key/value pairs. A missing binding
is represented by ``None``.

Callers can build these directly or hand plain Python values to
``coerce_value``:

- ``None`` becomes absent
- ``list`` and ``tuple`` become ``ListValue``
- any ``Mapping`` becomes ``MapValue`` (iteration order is kept)
- everything else becomes ``Scalar(str(value))``

Nested composites are not supported. A list or mapping found inside a list
or mapping is rendered with ``str()`` like any other scalar.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Scalar:
    """A single string value."""

    value: str = field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", str(self.value))


@dataclass(frozen=True)
class ListValue:
    """An ordered list of string values."""

    items: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(str(item) for item in self.items))


@dataclass(frozen=True)
class MapValue:
    """An ordered sequence of string key/value pairs.

    A mapping is accepted in place of the pairs and read in iteration order.
    """

    pairs: tuple[tuple[str, str], ...] = field(default=())

    def __post_init__(self) -> None:
        pairs = self.pairs.items() if isinstance(self.pairs, Mapping) else self.pairs
        object.__setattr__(self, "pairs", tuple((str(k), str(v)) for k, v in pairs))


Value = Scalar | ListValue | MapValue


def coerce_value(raw: Any) -> Value | None:
    """Convert a plain Python value into a binding value.

    Values that are already ``Scalar``, ``ListValue`` or ``MapValue`` are
    returned unchanged.

    Args:
        raw: The value supplied by the caller for one variable.

    Returns:
        The binding value, or None if the variable should be treated as absent.
    """
    if raw is None:
        return None
    if isinstance(raw, (Scalar, ListValue, MapValue)):
        return raw
    if isinstance(raw, Mapping):
        return MapValue(tuple((str(k), str(v)) for k, v in raw.items()))
    if isinstance(raw, (list, tuple)):
        return ListValue(tuple(str(item) for item in raw))
    return Scalar(str(raw))


def coerce_bindings(bindings: Mapping[str, Any] | None) -> dict[str, Value]:
    """Coerce a whole binding map, dropping absent entries."""
    if not bindings:
        return {}

    coerced: dict[str, Value] = {}
    for name, raw in bindings.items():
        value = coerce_value(raw)
        if value is not None:
            coerced[name] = value
    return coerced
