"""Exception hierarchy for jsonscope.

Two families live here:

- ``JsonScopeError`` and its subclasses are *recoverable*: malformed input
  text, a clipboard that refused a write, a file that could not be read.
  Callers catch these and show a notice.
- ``InvariantViolation`` (an ``AssertionError``) marks a programming error
  inside the core, e.g. a non-``Value`` object reaching the diff engine.
  The core never catches it.
"""

from __future__ import annotations

__all__ = [
    "ClipboardError",
    "DepthLimitError",
    "EmptyDocumentError",
    "FileIOError",
    "InvariantViolation",
    "JsonScopeError",
    "NumberRangeError",
    "ParseError",
]


class JsonScopeError(Exception):
    """Base class for all recoverable jsonscope errors."""


class ParseError(JsonScopeError, ValueError):
    """Malformed JSON text.

    Attributes:
        message:  Human-readable reason reported by the decoder.
        line:     1-based line of the failure, when the decoder reports one.
        column:   1-based column of the failure, when the decoder reports one.
        position: 0-based character offset of the failure, when known.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message}: line {self.line} column {self.column}"
        return self.message

    def __reduce__(self) -> tuple[type[ParseError], tuple[object, ...]]:
        return (type(self), (self.message, self.line, self.column, self.position))


class NumberRangeError(ParseError):
    """Grammatically valid number literal that does not fit in a 64-bit float."""


class EmptyDocumentError(JsonScopeError):
    """Raised by raising wrappers when the input holds no document at all."""


class ClipboardError(JsonScopeError):
    """The clipboard backend rejected a write, or there was nothing to copy."""


class FileIOError(JsonScopeError):
    """A document could not be read from or written to the local filesystem."""


class InvariantViolation(AssertionError):
    """A value broke an internal invariant of the core (programming error)."""


class DepthLimitError(InvariantViolation):
    """A value nests deeper than the configured recursion guard."""
