# snippets.py
# SPDX-License-Identifier: MIT
"""Snippet findings from partial-content SCANOSS matches.

A snippet match may name several package identifiers. Each one becomes its
own :class:`Snippet`; all of them share the score, reference location,
provenance and combined license of the match.
"""

from __future__ import annotations

from collections.abc import Iterable

from .findings import RepositoryProvenance, Snippet, VcsInfo, VcsType
from .licenses import parse_number
from .lines import parse_line_range
from .log import get_logger
from .records import InvalidFieldError, MatchEntry, MissingFieldError, require_field
from .spdx import NOASSERTION, and_expressions, parse_license_expression, sorted_canonical_form

__all__ = [
    "combine_licenses",
    "snippet_provenance",
    "extract_snippets",
]

log = get_logger(__name__)

# SCANOSS exposes no resolved revision for matched sources.
_UNRESOLVED_REVISION = ""
_PROVENANCE_RESOLVED_REVISION = "."


def combine_licenses(names: Iterable[str]) -> str:
    """AND-combine license names into one canonical expression.

    Parsed expressions are deduplicated before combining and the result is
    rendered with sorted operands, so input order and repeats do not matter.
    Returns ``NOASSERTION`` for an empty input.

    Raises:
        LicenseExpressionError: If a name cannot be parsed.
    """
    expressions = list(dict.fromkeys(parse_license_expression(name) for name in names))
    if not expressions:
        return NOASSERTION

    combined = expressions[0]
    for expression in expressions[1:]:
        combined = and_expressions(combined, expression)
    return sorted_canonical_form(combined)


def snippet_provenance(url: str) -> RepositoryProvenance:
    """Best-effort provenance for a matched source URL (no revision known)."""
    vcs_info = VcsInfo(type=VcsType.UNKNOWN, url=url, revision=_UNRESOLVED_REVISION)
    return RepositoryProvenance(vcs_info=vcs_info, resolved_revision=_PROVENANCE_RESOLVED_REVISION)


def _snippet_score(matched: str) -> float:
    text = matched.rpartition("%")[0] if "%" in matched else matched
    try:
        return parse_number(text)
    except ValueError:
        raise InvalidFieldError(f"Snippet match score {matched!r} is not a finite number") from None


def extract_snippets(entry: MatchEntry) -> frozenset[Snippet]:
    """Fan out a snippet match into one :class:`Snippet` per package identifier.

    Raises:
        MissingFieldError: If ``matched``, ``file_url``, ``oss_lines``,
            ``url`` or ``purl`` is absent, or ``purl`` is empty.
        InvalidFieldError: If ``matched`` is not a finite number.
        LineRangeError: If ``oss_lines`` is malformed.
        LicenseExpressionError: If a license name cannot be parsed.
    """
    matched = require_field(entry, "matched")
    file_url = require_field(entry, "file_url")
    oss_lines = require_field(entry, "oss_lines")
    url = require_field(entry, "url")
    purls = require_field(entry, "purl")
    if not purls:
        raise MissingFieldError("purl", entry)

    score = _snippet_score(matched)
    location = parse_line_range(file_url, oss_lines)
    provenance = snippet_provenance(url)
    license = combine_licenses(entry.licenses)

    snippets = frozenset(
        Snippet(score=score, location=location, provenance=provenance, purl=purl, license=license)
        for purl in purls
    )
    log.debug("Snippet match in %s expanded to %d snippet(s)", entry.file, len(snippets))
    return snippets
