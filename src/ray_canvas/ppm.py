"""Plain-text PPM (``P3``) export.

Every canvas row becomes the flat, space-separated stream of its channel
integers. Rows longer than the line limit are wrapped at spaces so that no
number is ever cut and re-joining a row's lines with single spaces gives back
the same stream.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from .color import MAX_COLOR_VALUE, Color

if TYPE_CHECKING:
    from .canvas import Canvas

logger = logging.getLogger(__name__)

MAGIC = "P3"
DEFAULT_LINE_WIDTH = 70


def space_index(text: str, limit: int) -> Optional[int]:
    """Return the index of the space to split ``text`` at.

    The scan starts at ``limit`` and walks left until it reaches a space. When
    the first token alone is longer than ``limit`` there is nothing to the left;
    the first space after ``limit`` is used instead so the token stays whole.
    ``None`` means the text holds no space at all.
    """

    cursor = min(limit, len(text) - 1)
    while cursor >= 0 and text[cursor] != " ":
        cursor -= 1
    if cursor >= 0:
        return cursor
    found = text.find(" ", limit)
    return found if found != -1 else None


def split_line(text: str, limit: int) -> tuple[str, str]:
    """Split ``text`` once at a space so the left part fits in ``limit``.

    The space is dropped. Text that already fits comes back as ``(text, "")``.
    """

    if len(text) <= limit:
        return text, ""
    index = space_index(text, limit)
    if index is None:
        return text, ""
    return text[:index], text[index + 1 :]


def wrap_line(text: str, limit: int = DEFAULT_LINE_WIDTH) -> list[str]:
    """Split ``text`` repeatedly until every line fits in ``limit``."""

    if limit <= 0:
        raise ValueError("Line limit must be positive")

    lines: list[str] = []
    rest = text
    while True:
        head, rest = split_line(rest, limit)
        lines.append(head)
        if not rest.strip():
            return lines


def row_to_text(row: Iterable[Color]) -> str:
    return " ".join(color.to_ppm() for color in row)


def canvas_to_ppm(canvas: "Canvas", line_width: Optional[int] = None) -> str:
    """Render ``canvas`` as a complete PPM document ending in a newline."""

    limit = DEFAULT_LINE_WIDTH if line_width is None else line_width
    lines = [MAGIC, f"{canvas.width} {canvas.height}", str(MAX_COLOR_VALUE)]
    for row in canvas.rows():
        lines.extend(wrap_line(row_to_text(row), limit))

    logger.debug(
        "ppm.serialized",
        extra={"canvas_width": canvas.width, "canvas_height": canvas.height, "line_count": len(lines)},
    )
    return "\n".join(lines) + "\n"


def write_ppm(canvas: "Canvas", path: str | Path, line_width: Optional[int] = None) -> Path:
    """Write the PPM document for ``canvas`` to ``path`` and return the path."""

    target = Path(path)
    target.write_text(canvas_to_ppm(canvas, line_width=line_width), encoding="ascii")
    logger.info("ppm.written", extra={"path": str(target)})
    return target
