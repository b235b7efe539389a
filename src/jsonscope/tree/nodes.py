"""Value model: a tagged union of the six JSON value kinds.

Every consumer (formatter, diff engine, materializer, search) dispatches on
these classes and treats anything else as an invariant violation.  Instances
are frozen: transformations always build new values.

Equality is *deep value equality*:

- ``JsonObject`` compares its key/value pairs as a mapping, so two objects
  that only differ in source key order are equal.
- ``JsonArray`` compares positionally.
- Variants never compare equal across kinds (``JsonBool(True)`` is not
  ``JsonNumber(1)``), while ``JsonNumber(1) == JsonNumber(1.0)`` holds, as
  numbers are stored as doubles.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import ClassVar

from jsonscope.errors import InvariantViolation

__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "VALUE_TYPES",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "Value",
    "ValueKind",
    "child_count",
    "iter_children",
    "is_container",
]


class ValueKind(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The JSON ``null`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True, slots=True)
class JsonBool:
    """A JSON ``true`` / ``false`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            msg = f"JsonBool requires a bool, got {type(self.value).__name__}"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number: an IEEE-754 double.

    Integers are accepted and stored as ``float``, so ``9007199254740993``
    and ``9007199254740992`` denote the same number, as they do in any
    double-based JSON reader.  Non-finite or out-of-range values are not
    JSON and are rejected.
    """

    kind: ClassVar[ValueKind] = ValueKind.NUMBER
    value: float

    def __post_init__(self) -> None:
        # bool subclasses int; a boolean is never a number here
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            msg = f"JsonNumber requires an int or float, got {type(self.value).__name__}"
            raise TypeError(msg)
        try:
            number = float(self.value)
        except OverflowError:
            msg = "JSON number is out of range for a 64-bit float"
            raise ValueError(msg) from None
        if not math.isfinite(number):
            msg = f"JSON numbers must be finite, got {number!r}"
            raise ValueError(msg)
        object.__setattr__(self, "value", number)


@dataclass(frozen=True, slots=True)
class JsonString:
    """A JSON string (arbitrary Unicode)."""

    kind: ClassVar[ValueKind] = ValueKind.STRING
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"JsonString requires a str, got {type(self.value).__name__}"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class JsonArray:
    """An ordered sequence of values."""

    kind: ClassVar[ValueKind] = ValueKind.ARRAY
    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(frozen=True, slots=True, eq=False)
class JsonObject:
    """An ordered mapping from unique string keys to values.

    ``entries`` preserves source insertion order, which drives default
    display and formatting.  Equality and hashing ignore that order.
    """

    kind: ClassVar[ValueKind] = ValueKind.OBJECT
    entries: tuple[tuple[str, Value], ...] = ()
    _index: dict[str, Value] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = dict(self.entries)
        if len(index) != len(self.entries):
            msg = "JsonObject keys must be unique"
            raise ValueError(msg)
        object.__setattr__(self, "_index", index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return [key for key, _ in self.entries]

    def get(self, key: str) -> Value | None:
        """Return the value stored under ``key``, or None when absent."""
        return self._index.get(key)


Value = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

VALUE_TYPES: tuple[type, ...] = (
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
)

NULL = JsonNull()
TRUE = JsonBool(True)
FALSE = JsonBool(False)


def is_container(value: Value) -> bool:
    """Return True for arrays and objects."""
    return isinstance(value, (JsonArray, JsonObject))


def child_count(value: Value) -> int:
    """Number of direct children; 0 for scalars."""
    if isinstance(value, (JsonArray, JsonObject)):
        return len(value)
    return 0


def iter_children(value: Value) -> Iterator[tuple[str | int, Value]]:
    """Yield ``(segment, child)`` pairs in display order.

    Segments are ``int`` indices for arrays and ``str`` keys for objects.
    Scalars have no children.

    Raises:
        InvariantViolation: If ``value`` is not a Value variant.
    """
    if isinstance(value, JsonArray):
        yield from enumerate(value.items)
    elif isinstance(value, JsonObject):
        yield from value.entries
    elif not isinstance(value, VALUE_TYPES):
        msg = f"not a JSON value: {type(value).__name__}"
        raise InvariantViolation(msg)
