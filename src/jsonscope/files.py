"""Local file interop: "upload" reads a document, "download" writes one.

Both are boundary operations that happen before or after the pure core
runs.  ``OSError`` and Unicode codec failures become ``FileIOError`` with
the cause chained.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jsonscope.errors import FileIOError

__all__ = ["DEFAULT_FILENAME", "read_document", "write_document"]

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "formatted.json"


def read_document(path: str | Path) -> str:
    """Return the full text of a local file.

    The file is decoded as UTF-8; a leading byte-order mark is dropped.

    Raises:
        FileIOError: If the file cannot be read or is not valid UTF-8.
    """
    source = Path(path)
    try:
        return source.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read %s: %s", source, exc)
        raise FileIOError(f"could not read {source}: {exc}") from exc


def write_document(
    text: str,
    directory: str | Path = ".",
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """Write ``text`` as a ``.json`` file and return the written path.

    Args:
        text:      The (formatted) document text.
        directory: Target directory; created when missing.
        filename:  File name; ``.json`` is appended when it has no suffix.

    Raises:
        FileIOError: If ``text`` is empty or cannot be saved as UTF-8.
    """
    if not text:
        raise FileIOError("nothing to save")
    name = filename if Path(filename).suffix else f"{filename}.json"
    target = Path(directory) / name
    try:
        # encode before touching the disk so a bad string leaves no file behind
        payload = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.warning("could not encode %s: %s", target, exc)
        raise FileIOError(f"could not write {target}: {exc}") from exc
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
    except OSError as exc:
        logger.warning("could not write %s: %s", target, exc)
        raise FileIOError(f"could not write {target}: {exc}") from exc
    logger.info("wrote %s (%d chars)", target, len(text))
    return target
