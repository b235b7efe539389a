"""Path: stable, hashable addresses of nodes inside a Value tree.

A Path is a root-to-node sequence of segments.  ``str`` segments address
object keys, ``int`` segments address array indices.  The empty path is the
document root.

Rendering follows the dotted/bracketed convention used by the viewer::

    Path(("a", 2, "b"))   ->  a[2].b
    Path((0, "x"))        ->  [0].x
    Path(())              ->  ""          (label(): "root")

Keys that would make the rendering ambiguous (empty keys, or keys containing
``.``, ``[``, ``]``, quotes, backslashes or whitespace) are written as a
bracketed JSON string, e.g. ``a["x.y"]``, so every path renders uniquely and
``Path.parse`` can read it back.  A lone top-level key named ``root`` is
quoted as well (``["root"]``) so it never collides with the root label.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

__all__ = ["ROOT_LABEL", "Path", "PathSegment"]

PathSegment = str | int

ROOT_LABEL = "root"

# A key that can be written bare after a dot
_PLAIN_KEY = re.compile(r'[^.\[\]"\\\s]+')

# Tokens of a rendered path: .key | key (at start) | [123] | ["quoted"]
_TOKEN = re.compile(
    r"""
    \[(?P<index>\d+)\]
    | \[(?P<quoted>"(?:[^"\\]|\\.)*")\]
    | \.?(?P<plain>[^.\[\]"\\\s]+)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable address of a node; usable as a set member or dict key."""

    segments: tuple[PathSegment, ...] = ()

    @classmethod
    def root(cls) -> Path:
        """The empty path, addressing the document root."""
        return cls(())

    @classmethod
    def parse(cls, text: str) -> Path:
        """Parse a rendered path back into a Path.

        ``""`` and ``"root"`` both denote the root.

        Raises:
            ValueError: If ``text`` is not a well-formed rendered path.
        """
        if text in ("", ROOT_LABEL):
            return cls.root()

        segments: list[PathSegment] = []
        pos = 0
        while pos < len(text):
            match = _TOKEN.match(text, pos)
            if match is None or (match.group("plain") is not None and pos > 0 and text[pos] != "."):
                msg = f"malformed path {text!r} at offset {pos}"
                raise ValueError(msg)
            if pos == 0 and text.startswith("."):
                msg = f"malformed path {text!r}: leading '.'"
                raise ValueError(msg)
            if match.group("index") is not None:
                segments.append(int(match.group("index")))
            elif match.group("quoted") is not None:
                segments.append(json.loads(match.group("quoted")))
            else:
                segments.append(match.group("plain"))
            pos = match.end()
        return cls(tuple(segments))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def child(self, segment: PathSegment) -> Path:
        """Return the path one level below this one."""
        return Path((*self.segments, segment))

    @property
    def parent(self) -> Path | None:
        """The enclosing path, or None for the root."""
        if not self.segments:
            return None
        return Path(self.segments[:-1])

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return not self.segments

    def ancestors(self) -> list[Path]:
        """Every proper ancestor, root first."""
        return [Path(self.segments[:i]) for i in range(len(self.segments))]

    def is_ancestor_of(self, other: Path) -> bool:
        """True when ``other`` lies strictly below this path."""
        n = len(self.segments)
        return len(other.segments) > n and other.segments[:n] == self.segments

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif _PLAIN_KEY.fullmatch(segment) and not (
                segment == ROOT_LABEL and len(self.segments) == 1
            ):
                parts.append(f".{segment}" if parts else segment)
            else:
                parts.append(f"[{json.dumps(segment, ensure_ascii=False)}]")
        return "".join(parts)

    def label(self) -> str:
        """Rendered path, with the root written as ``root`` instead of blank."""
        return str(self) or ROOT_LABEL

    def last_label(self) -> str:
        """Display label of the final segment: the key, ``[i]``, or ``root``."""
        if not self.segments:
            return ROOT_LABEL
        last = self.segments[-1]
        return f"[{last}]" if isinstance(last, int) else last
