# summary.py
# SPDX-License-Identifier: MIT
"""Build a :class:`ScanSummary` from a raw SCANOSS scan result."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path

from .copyrights import extract_copyrights
from .findings import CopyrightFinding, LicenseFinding, ScanSummary, SnippetFinding
from .licenses import DEFAULT_LICENSE_REF_TOOL, extract_licenses
from .lines import parse_line_range
from .log import get_logger
from .records import IdentificationType, ScanResult, require_field
from .snippets import extract_snippets

__all__ = [
    "VerificationCodeFn",
    "generate_summary",
    "generate_summary_for_path",
]

log = get_logger(__name__)

VerificationCodeFn = Callable[[Path], str]


def generate_summary(
    start_time: datetime,
    end_time: datetime,
    verification_code: str,
    result: ScanResult,
    detected_license_mapping: Mapping[str, str] | None = None,
    *,
    license_ref_tool: str = DEFAULT_LICENSE_REF_TOOL,
) -> ScanSummary:
    """Collect license, copyright and snippet findings from ``result``.

    Use this variant when the result does not come from a local file tree and
    the verification code is already known.

    Args:
        start_time (datetime): Scan start, echoed into the summary.
        end_time (datetime): Scan end, echoed into the summary.
        verification_code (str): Package verification code, echoed as-is.
        result (ScanResult): Match entries keyed by component.
        detected_license_mapping (Mapping[str, str] | None): Exact-string
            license renames applied to file-level licenses.
        license_ref_tool (str): Tag for wrapping non-SPDX license names.

    Returns:
        ScanSummary: Deduplicated findings plus the supplied metadata.

    Raises:
        MissingFieldError: If a snippet entry lacks a required field.
        InvalidFieldError: If a snippet score is not a number.
        LineRangeError: If a snippet line range is malformed.
        LicenseExpressionError: If a snippet license cannot be parsed.
    """
    license_findings: set[LicenseFinding] = set()
    copyright_findings: set[CopyrightFinding] = set()
    snippet_findings: set[SnippetFinding] = set()
    n_entries = 0

    for entries in result.values():
        for entry in entries:
            n_entries += 1
            if entry.id is IdentificationType.FILE:
                license_findings.update(
                    extract_licenses(entry, detected_license_mapping, tool=license_ref_tool)
                )
                copyright_findings.update(extract_copyrights(entry))
            elif entry.id is IdentificationType.SNIPPET:
                file = require_field(entry, "file")
                lines = require_field(entry, "lines")
                source_location = parse_line_range(file, lines)
                for snippet in extract_snippets(entry):
                    snippet_findings.add(SnippetFinding(source_location, snippet))
            elif entry.id is IdentificationType.NONE:
                log.debug("No identification for %s", entry.file)
            else:  # pragma: no cover - IdentificationType is closed
                raise AssertionError(f"Unhandled identification type {entry.id!r}")

    log.info(
        "Summarized %d match entries: %d license, %d copyright, %d snippet findings",
        n_entries,
        len(license_findings),
        len(copyright_findings),
        len(snippet_findings),
    )
    return ScanSummary(
        start_time=start_time,
        end_time=end_time,
        package_verification_code=verification_code,
        license_findings=frozenset(license_findings),
        copyright_findings=frozenset(copyright_findings),
        snippet_findings=frozenset(snippet_findings),
    )


def generate_summary_for_path(
    start_time: datetime,
    end_time: datetime,
    scan_path: str | Path,
    result: ScanResult,
    detected_license_mapping: Mapping[str, str] | None = None,
    *,
    verification_code_fn: VerificationCodeFn,
    license_ref_tool: str = DEFAULT_LICENSE_REF_TOOL,
) -> ScanSummary:
    """Like :func:`generate_summary`, deriving the verification code from ``scan_path``.

    ``verification_code_fn`` receives the scanned directory; anything it
    raises propagates unchanged.
    """
    verification_code = verification_code_fn(Path(scan_path))
    return generate_summary(
        start_time,
        end_time,
        verification_code,
        result,
        detected_license_mapping,
        license_ref_tool=license_ref_tool,
    )
