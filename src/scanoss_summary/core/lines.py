# lines.py
# SPDX-License-Identifier: MIT
"""Parsing of SCANOSS line ranges such as ``"1-321"`` or ``"42"``."""

from __future__ import annotations

import re

from .findings import TextLocation

__all__ = ["LineRangeError", "parse_line_range"]

_LINE_RE = re.compile(r"\+?\d+", re.ASCII)


class LineRangeError(ValueError):
    """Raised when a line range is not ``"start-end"`` or a single line number."""


def _to_line(part: str, line_range: str) -> int:
    if not _LINE_RE.fullmatch(part):
        raise LineRangeError(f"Invalid line number {part!r} in line range {line_range!r}")
    return int(part)


def parse_line_range(path: str, line_range: str) -> TextLocation:
    """Split ``line_range`` into a :class:`TextLocation` for ``path``.

    Args:
        path (str): File path or URL the range refers to.
        line_range (str): ``"start-end"`` or a single line number.

    Returns:
        TextLocation: Location spanning the range; a single line yields
        ``start_line == end_line``.

    Raises:
        LineRangeError: If the range has more than two parts or a part is
            not an integer.
    """
    parts = line_range.split("-")
    if len(parts) == 2:
        return TextLocation(path, _to_line(parts[0], line_range), _to_line(parts[1], line_range))
    if len(parts) == 1:
        return TextLocation(path, _to_line(parts[0], line_range))
    raise LineRangeError(f"Unsupported line range {line_range!r}")
