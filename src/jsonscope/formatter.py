"""Formatter: renders a Value back to JSON text under ``FormatOptions``.

The renderer walks the Value tree itself so that numbers and strings come
out the way a browser's ``JSON.stringify`` writes them:

- Numbers are doubles printed in their shortest round-trip form, with no
  trailing ``.0`` (``1``, ``1000``, ``0.5``, ``1e+21``, ``1e-7``).
- Strings keep non-ASCII characters verbatim.  A lone surrogate cannot be
  encoded as UTF-8, so it is written as a ``\\uXXXX`` escape instead.

Layout rules:
- ``compact=True`` wins over ``indent_width``: separators are ``,`` and ``:``
  with no inserted whitespace.
- Otherwise the pretty-printer indents by ``indent_width`` spaces, puts one
  member per line and writes ``": "`` between key and value.
- ``sort_keys=True`` sorts object keys by code point at every level,
  including objects inside arrays.  Arrays keep their order.
"""

from __future__ import annotations

import json
import re
from decimal import Decimal

from jsonscope.config import FormatOptions
from jsonscope.errors import InvariantViolation
from jsonscope.parser import parse
from jsonscope.tree.nodes import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
)

__all__ = [
    "copy_text",
    "escape_lone_surrogates",
    "format_text",
    "format_value",
    "render_number",
    "render_scalar",
    "sort_value_keys",
]

# json.loads pairs valid surrogates into one code point, so any left are lone
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

# ECMAScript switches to exponent notation outside [1e-7, 1e21)
_MAX_DECIMAL_EXPONENT = 21
_MIN_DECIMAL_EXPONENT = -6


def format_value(value: Value, options: FormatOptions | None = None) -> str:
    """Render ``value`` as JSON text.

    Args:
        value:   The document to render.
        options: Layout configuration.  Defaults to ``FormatOptions()``
                 (2-space indent, source key order, pretty).

    Returns:
        The JSON text.  The same (value, options) always yields the same text,
        and the text always encodes as UTF-8.
    """
    opts = options if options is not None else FormatOptions()
    return _render(sort_value_keys(value) if opts.sort_keys else value, opts, 0)


def _render(value: Value, opts: FormatOptions, level: int) -> str:
    if isinstance(value, JsonObject):
        colon = ":" if opts.compact else ": "
        members = [
            f"{_render_string(key)}{colon}{_render(child, opts, level + 1)}"
            for key, child in value.entries
        ]
        return _wrap("{", members, "}", opts, level)
    if isinstance(value, JsonArray):
        items = [_render(item, opts, level + 1) for item in value.items]
        return _wrap("[", items, "]", opts, level)
    return render_scalar(value)


def _wrap(opener: str, members: list[str], closer: str, opts: FormatOptions, level: int) -> str:
    if not members:
        return opener + closer
    if opts.compact:
        return opener + ",".join(members) + closer
    inner = "\n" + " " * (opts.indent_width * (level + 1))
    outer = "\n" + " " * (opts.indent_width * level)
    return opener + inner + ("," + inner).join(members) + outer + closer


def escape_lone_surrogates(text: str) -> str:
    """Replace unpaired UTF-16 surrogates in ``text`` with ``\\uXXXX`` escapes."""
    return _LONE_SURROGATE.sub(_surrogate_escape, text)


def _surrogate_escape(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def _render_string(text: str) -> str:
    return escape_lone_surrogates(json.dumps(text, ensure_ascii=False))


def render_number(number: float) -> str:
    """Shortest round-trip rendering of a double, laid out like ECMAScript.

    >>> render_number(1.0), render_number(1e21), render_number(1.5e-7)
    ('1', '1e+21', '1.5e-7')
    """
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value == 0.<digits> * 10**point
    point = exponent + len(digits)
    if len(digits) <= point <= _MAX_DECIMAL_EXPONENT:
        body = digits + "0" * (point - len(digits))
    elif 0 < point <= _MAX_DECIMAL_EXPONENT:
        body = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_DECIMAL_EXPONENT < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{point - 1:+d}"
    return sign + body


def sort_value_keys(value: Value) -> Value:
    """Return a copy of ``value`` with object keys sorted at every level."""
    if isinstance(value, JsonObject):
        return JsonObject(
            tuple((key, sort_value_keys(child)) for key, child in sorted(value.entries, key=_entry_key))
        )
    if isinstance(value, JsonArray):
        return JsonArray(tuple(sort_value_keys(item) for item in value.items))
    return value


def _entry_key(entry: tuple[str, Value]) -> str:
    return entry[0]


def format_text(text: str, options: FormatOptions | None = None) -> str:
    """Parse ``text`` and re-render it.

    Returns:
        The formatted document, or ``""`` when ``text`` holds no document.

    Raises:
        ParseError: If ``text`` is malformed.
    """
    result = parse(text)
    if result.is_empty:
        return ""
    return format_value(result.unwrap(), options)


def render_scalar(value: Value) -> str:
    """Literal rendering of a leaf: ``"quoted"``, ``12.5``, ``true``, ``null``.

    Raises:
        InvariantViolation: If ``value`` is a container or not a Value.
    """
    if isinstance(value, JsonNull):
        return "null"
    if isinstance(value, JsonBool):
        return "true" if value.value else "false"
    if isinstance(value, JsonNumber):
        return render_number(value.value)
    if isinstance(value, JsonString):
        return _render_string(value.value)
    raise InvariantViolation(f"render_scalar() needs a leaf, got {type(value).__name__}")


def copy_text(value: Value) -> str:
    """Text placed on the clipboard for a value.

    Strings are copied raw (without quotes); everything else is copied as
    2-space pretty JSON.
    """
    if isinstance(value, JsonString):
        return value.value
    return format_value(value, FormatOptions(indent_width=2))
