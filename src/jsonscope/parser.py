"""Parser/validator: raw text to a Value, or a structured parse failure.

``parse`` is safe to call on every keystroke: it holds no state, never
raises for string input, and reports three distinct outcomes:

- ``ok``      - the text held exactly one JSON document;
- ``empty``   - the text was empty or whitespace only ("nothing to show
                yet", deliberately *not* an error);
- ``invalid`` - the text was malformed; ``error`` carries the decoder's
                message and location.

Decoding is delegated to the standard library ``json`` module; the decoded
data is then converted into the Value model by ``ValueBuilder``.
Every number is read as an IEEE-754 double.  A literal beyond the double
range is reported as a ``NumberRangeError`` rather than a syntax error.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import StrEnum, auto

from jsonscope.config import ParseOptions
from jsonscope.errors import DepthLimitError, EmptyDocumentError, NumberRangeError, ParseError
from jsonscope.tree.builder import ValueBuilder
from jsonscope.tree.nodes import Value

__all__ = ["ParseResult", "ParseStatus", "loads", "parse", "validate"]

logger = logging.getLogger(__name__)

_BOM = "\ufeff"
_LITERAL_PREVIEW = 32


class ParseStatus(StrEnum):
    OK = auto()
    EMPTY = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a ``parse`` call.

    Attributes:
        status: Which of the three outcomes occurred.
        value:  The parsed document when ``status`` is ``ok``, else None.
        error:  The failure when ``status`` is ``invalid``, else None.
    """

    status: ParseStatus
    value: Value | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    @property
    def is_empty(self) -> bool:
        return self.status is ParseStatus.EMPTY

    @property
    def is_valid(self) -> bool:
        """Inline validity indicator: empty input is not flagged as invalid."""
        return self.status is not ParseStatus.INVALID

    def unwrap(self) -> Value:
        """Return the parsed value, raising for the other two outcomes.

        Raises:
            ParseError: If the text was malformed.
            EmptyDocumentError: If the text held no document.
        """
        if self.value is not None:
            return self.value
        if self.error is not None:
            raise self.error
        raise EmptyDocumentError("no JSON document in input")


def _reject_constant(name: str) -> None:
    # json accepts NaN / Infinity / -Infinity by default; RFC 8259 does not
    raise ValueError(f"Invalid JSON literal {name!r}")


def _parse_number(literal: str) -> float:
    # every JSON number is read as a double, integers included
    number = float(literal)
    if not math.isfinite(number):
        if len(literal) > _LITERAL_PREVIEW:
            literal = literal[:_LITERAL_PREVIEW] + "..."
        raise NumberRangeError(f"number {literal} is out of range for a 64-bit float")
    return number


def parse(text: str, options: ParseOptions | None = None) -> ParseResult:
    """Parse ``text`` into a Value without raising.

    Args:
        text:    Arbitrary text holding zero or one JSON document.
        options: Parser configuration.  Defaults to ``ParseOptions()``.

    Returns:
        A ``ParseResult``; inspect ``status`` to tell the outcomes apart.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    opts = options if options is not None else ParseOptions()

    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    if not text.strip():
        return ParseResult(status=ParseStatus.EMPTY)

    try:
        decoded = json.loads(
            text,
            parse_float=_parse_number,
            parse_int=_parse_number,
            parse_constant=_reject_constant,
        )
        value = ValueBuilder(max_depth=opts.max_depth).build(decoded)
    except json.JSONDecodeError as exc:
        error = ParseError(exc.msg, line=exc.lineno, column=exc.colno, position=exc.pos)
    except NumberRangeError as exc:
        error = exc
    except (RecursionError, DepthLimitError):
        error = ParseError(f"document nests deeper than {opts.max_depth} levels")
    except ValueError as exc:
        error = ParseError(str(exc))
    else:
        return ParseResult(status=ParseStatus.OK, value=value)

    logger.debug("JSON parse failed: %s", error)
    return ParseResult(status=ParseStatus.INVALID, error=error)


def loads(text: str, options: ParseOptions | None = None) -> Value:
    """Raising variant of ``parse``.

    Raises:
        ParseError: If ``text`` is malformed.
        EmptyDocumentError: If ``text`` is empty or whitespace only.
    """
    return parse(text, options).unwrap()


def validate(text: str, options: ParseOptions | None = None) -> ParseError | None:
    """Return the parse error for ``text``, or None when it is valid or empty."""
    return parse(text, options).error
