# findings.py
# SPDX-License-Identifier: MIT
"""Normalized findings model produced from SCANOSS match entries.

Every type here is a frozen dataclass so that instances hash and compare by
value; the summary relies on that to deduplicate findings in sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

__all__ = [
    "UNKNOWN_LINE",
    "TextLocation",
    "LicenseFinding",
    "CopyrightFinding",
    "VcsType",
    "VcsInfo",
    "RepositoryProvenance",
    "Snippet",
    "SnippetFinding",
    "ScanSummary",
]

UNKNOWN_LINE = -1


@dataclass(frozen=True, slots=True)
class TextLocation:
    """
    A line range within a file.

    Attributes:
        path (str): File path or URL.
        start_line (int): First line, or :data:`UNKNOWN_LINE`.
        end_line (int | None): Last line; defaults to ``start_line`` so a
            location built from one line covers exactly that line.
    """
    path: str
    start_line: int
    end_line: int | None = None

    def __post_init__(self) -> None:
        if self.end_line is None:
            object.__setattr__(self, "end_line", self.start_line)

    @classmethod
    def whole_file(cls, path: str) -> "TextLocation":
        """Location for findings without line granularity."""
        return cls(path, UNKNOWN_LINE, UNKNOWN_LINE)

    @property
    def has_known_lines(self) -> bool:
        return self.start_line != UNKNOWN_LINE and self.end_line != UNKNOWN_LINE


@dataclass(frozen=True, slots=True)
class LicenseFinding:
    license: str
    location: TextLocation
    score: float | None = None


@dataclass(frozen=True, slots=True)
class CopyrightFinding:
    statement: str
    location: TextLocation


class VcsType:
    """Known version control system tags. ``UNKNOWN`` is the empty tag."""

    GIT = "Git"
    MERCURIAL = "Mercurial"
    SUBVERSION = "Subversion"
    UNKNOWN = ""


@dataclass(frozen=True, slots=True)
class VcsInfo:
    type: str
    url: str
    revision: str
    path: str = ""


@dataclass(frozen=True, slots=True)
class RepositoryProvenance:
    """
    Where matched reference code came from.

    SCANOSS does not report a resolved revision, so snippet provenances carry
    an empty ``vcs_info.revision``. Consumers must not treat such a
    provenance as reproducible; check :attr:`has_revision`.
    """
    vcs_info: VcsInfo
    resolved_revision: str

    @property
    def has_revision(self) -> bool:
        return bool(self.vcs_info.revision)


@dataclass(frozen=True, slots=True)
class Snippet:
    """
    A matched piece of reference source.

    Attributes:
        score (float): Match confidence, 0-100.
        location (TextLocation): Range in the reference source.
        provenance (RepositoryProvenance): Origin of the reference source.
        purl (str): Package identifier of the matched component.
        license (str): Combined license expression of the match.
    """
    score: float
    location: TextLocation
    provenance: RepositoryProvenance
    purl: str
    license: str


@dataclass(frozen=True, slots=True)
class SnippetFinding:
    source_location: TextLocation
    snippet: Snippet


@dataclass(frozen=True, slots=True)
class ScanSummary:
    """Terminal snapshot of one transformation run."""
    start_time: datetime
    end_time: datetime
    package_verification_code: str
    license_findings: frozenset[LicenseFinding] = frozenset()
    copyright_findings: frozenset[CopyrightFinding] = frozenset()
    snippet_findings: frozenset[SnippetFinding] = frozenset()
