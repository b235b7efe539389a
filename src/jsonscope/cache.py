"""ParseCache: LRU memo of parse results keyed by input text.

The UI re-parses on every keystroke and on every option change; most of
those calls see text that was already parsed.  ``ParseCache`` serves those
from memory.  Because ``parse`` is a pure function of its input and the
results are immutable, caching is an optimisation only and never changes
what a caller observes.

Each ``ParseCache`` instance maintains its own ``LRUCache`` - there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from jsonscope.cache import ParseCache

    cache = ParseCache(max_size=64)
    first = cache.parse('{"a": 1}')    # miss: parsed
    second = cache.parse('{"a": 1}')   # hit: same ParseResult object
    assert first is second
"""

from __future__ import annotations

from cachetools import LRUCache

from jsonscope.config import ParseOptions
from jsonscope.parser import ParseResult, parse

__all__ = ["ParseCache"]


class ParseCache:
    """LRU-backed caching front for ``parse``.

    Args:
        max_size: Maximum number of distinct texts to remember.  Defaults to
            128.  When exceeded, the least-recently-used entry is silently
            evicted.
        options: Parser configuration applied to every cached parse.
    """

    def __init__(self, max_size: int = 128, options: ParseOptions | None = None) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._options: ParseOptions = options if options is not None else ParseOptions()
        self._cache: LRUCache[str, ParseResult] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    @property
    def options(self) -> ParseOptions:
        return self._options

    # ------------------------------------------------------------------
    # Parser surface
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Return the parse result for ``text``, parsing only on a cache miss."""
        cached = self._cache.get(text)
        if cached is not None:
            self._hits += 1
            return cached
        self._misses += 1
        result = parse(text, self._options)
        self._cache[text] = result
        return result

    def clear(self) -> None:
        """Forget every cached result and reset the hit/miss counters."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
