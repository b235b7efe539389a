"""Tree subpackage: the Value model and its addressing primitives.

Re-exports the public API for the tree module:
- Value and its variants (JsonNull, JsonBool, JsonNumber, JsonString,
  JsonArray, JsonObject), plus the ValueKind StrEnum
- Path: hashable root-to-node address with dotted/bracketed rendering
- ValueBuilder / from_python / to_python: conversion from and to plain data

The row materializer lives in ``jsonscope.tree.materializer``; it depends on
the formatter and is deliberately not imported here.
"""

from jsonscope.tree.builder import ValueBuilder, from_python, to_python
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
    ValueKind,
)
from jsonscope.tree.paths import Path

__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "Path",
    "Value",
    "ValueBuilder",
    "ValueKind",
    "from_python",
    "to_python",
]
