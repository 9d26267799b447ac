# licenses.py
# SPDX-License-Identifier: MIT
"""
License findings from whole-file SCANOSS matches.

Normalization of each reported license name, in order:

1. Names that do not parse as a license expression become ``NOASSERTION``.
2. Parseable names made only of SPDX ids or SPDX references are kept as-is.
3. Other parseable names are wrapped as ``LicenseRef-<tool>-<name>`` so the
   reported text survives.
4. The caller's detected-license mapping is applied last.

SCANOSS reports licenses per file, never per line, so every finding covers
the whole file.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from .findings import LicenseFinding, TextLocation
from .log import get_logger
from .records import MatchEntry
from .spdx import (
    NOASSERTION,
    LicenseExpressionError,
    apply_detected_license_mapping,
    is_valid_expression,
    license_ref,
    parse_license_expression,
)

__all__ = [
    "DEFAULT_LICENSE_REF_TOOL",
    "parse_number",
    "parse_score",
    "normalize_license",
    "extract_licenses",
]

log = get_logger(__name__)

DEFAULT_LICENSE_REF_TOOL = "scanoss"


# Plain decimal or exponent notation; no whitespace, underscores or
# non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> float:
    """Parse a finite decimal number strictly.

    Raises:
        ValueError: If ``text`` is not a plain decimal number or is not finite.
    """
    if not _NUMBER_RE.fullmatch(text):
        raise ValueError(f"Not a number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


def parse_score(matched: str | None) -> float | None:
    """Parse a matched percentage like ``"87%"``; None when absent or unusable."""
    if matched is None:
        return None
    try:
        return parse_number(matched.removesuffix("%"))
    except ValueError:
        log.debug("Ignoring unusable match score %r", matched)
        return None


def normalize_license(
    name: str,
    detected_license_mapping: Mapping[str, str] | None = None,
    *,
    tool: str = DEFAULT_LICENSE_REF_TOOL,
) -> str:
    """Return the normalized license string for one reported license name."""
    try:
        expression = parse_license_expression(name)
    except LicenseExpressionError:
        log.warning("License %r is not a valid expression; using %s", name, NOASSERTION)
        validated = NOASSERTION
    else:
        if is_valid_expression(expression):
            validated = name
        else:
            validated = license_ref(tool, name)
            log.debug("License %r is not an SPDX license; wrapped as %r", name, validated)
    return apply_detected_license_mapping(validated, detected_license_mapping)


def extract_licenses(
    entry: MatchEntry,
    detected_license_mapping: Mapping[str, str] | None = None,
    *,
    tool: str = DEFAULT_LICENSE_REF_TOOL,
) -> list[LicenseFinding]:
    """Build license findings for a whole-file match.

    Args:
        entry (MatchEntry): The match entry; entries without a file yield
            nothing.
        detected_license_mapping (Mapping[str, str] | None): Exact-string
            renames applied after validation.
        tool (str): Tag used when wrapping unknown licenses as references.

    Returns:
        list[LicenseFinding]: One finding per reported license name, all
        sharing the entry's score.
    """
    if entry.file is None:
        return []

    score = parse_score(entry.matched)
    location = TextLocation.whole_file(entry.file)
    return [
        LicenseFinding(
            license=normalize_license(name, detected_license_mapping, tool=tool),
            location=location,
            score=score,
        )
        for name in entry.licenses
    ]
