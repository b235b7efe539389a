"""ValueBuilder: converts JSON-shaped Python data into the Value model and back.

The parser feeds ``json.loads`` output through here.  Uses recursive
dispatch with an explicit depth guard so adversarially deep input fails
with ``DepthLimitError`` rather than a ``RecursionError`` somewhere later.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonscope.config import DEFAULT_MAX_DEPTH
from jsonscope.errors import DepthLimitError, InvariantViolation
from jsonscope.tree.nodes import (
    FALSE,
    NULL,
    TRUE,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
)

__all__ = ["ValueBuilder", "from_python", "to_python"]

_MAX_SAFE_INTEGER = 2**53


@dataclass(frozen=True, slots=True)
class ValueBuilder:
    """Converts any JSON-shaped Python value into a Value tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = ValueBuilder()
        value = builder.build({"user": ["a", 1, None]})
        # JsonObject((("user", JsonArray((JsonString("a"), JsonNumber(1.0), NULL))),))
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def build(self, obj: Any, depth: int = 0) -> Value:
        """Convert a Python value to a Value.

        Args:
            obj:   dict (str keys), list/tuple, str, int, float, bool or None.
            depth: Nesting level of ``obj``; the root is 0.

        Returns:
            The equivalent Value.

        Raises:
            TypeError: If ``obj`` (or anything inside it) is not JSON-shaped.
            ValueError: If a number is NaN, infinite or beyond the double range.
            DepthLimitError: If nesting exceeds ``max_depth``.
        """
        if depth > self.max_depth:
            msg = f"value nests deeper than {self.max_depth} levels"
            raise DepthLimitError(msg)

        # CRITICAL: bool MUST be checked before int
        if isinstance(obj, bool):
            return TRUE if obj else FALSE

        if obj is None:
            return NULL

        if isinstance(obj, str):
            return JsonString(obj)

        if isinstance(obj, (int, float)):
            # stored as a double; JsonNumber rejects overflow and NaN
            return JsonNumber(obj)

        if isinstance(obj, dict):
            return self._build_object(obj, depth)

        if isinstance(obj, (list, tuple)):
            return JsonArray(tuple(self.build(item, depth + 1) for item in obj))

        raise TypeError(f"Unsupported JSON value type: {type(obj)!r}")

    def _build_object(self, obj: dict[Any, Any], depth: int) -> JsonObject:
        entries: list[tuple[str, Value]] = []
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            entries.append((key, self.build(val, depth + 1)))
        return JsonObject(tuple(entries))


def from_python(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Shorthand for ``ValueBuilder(max_depth).build(obj)``."""
    return ValueBuilder(max_depth=max_depth).build(obj)


def to_python(value: Value) -> Any:
    """Convert a Value back to plain ``dict`` / ``list`` / scalar data.

    Object key order is preserved, so ``json.dumps`` of the result renders
    keys in source order.  Integral numbers within the exactly representable
    range come back as ``int`` so they dump as ``1`` rather than ``1.0``.

    Raises:
        InvariantViolation: If ``value`` is not a Value variant.
    """
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, JsonNumber):
        number = value.value
        if number.is_integer() and abs(number) <= _MAX_SAFE_INTEGER:
            return int(number)
        return number
    if isinstance(value, (JsonBool, JsonString)):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: to_python(child) for key, child in value.entries}
    raise InvariantViolation(f"not a JSON value: {type(value).__name__}")
