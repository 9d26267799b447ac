# copyrights.py
# SPDX-License-Identifier: MIT
"""Copyright findings from whole-file SCANOSS matches."""

from __future__ import annotations

from .findings import CopyrightFinding, TextLocation
from .records import MatchEntry

__all__ = ["extract_copyrights"]


def extract_copyrights(entry: MatchEntry) -> list[CopyrightFinding]:
    """Map each copyright statement of ``entry`` to a whole-file finding."""
    if entry.file is None:
        return []
    location = TextLocation.whole_file(entry.file)
    return [CopyrightFinding(statement=statement, location=location) for statement in entry.copyrights]
