# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`scanoss_summary`.

scanoss_summary turns raw SCANOSS scan results into a deduplicated
:class:`ScanSummary` of license, copyright and snippet findings.

Typical use:

- Convert the deserialized service response with :func:`parse_scan_result`.
- Call :func:`generate_summary` with a known verification code, or
  :func:`generate_summary_for_path` with a function that computes one for the
  scanned directory.
- Optionally load the detected-license mapping via
  :func:`load_config_from_path`.

Examples:
    >>> from datetime import datetime, timezone
    >>> from scanoss_summary import generate_summary, parse_scan_result
    >>> result = parse_scan_result({
    ...     "a.txt": [{"id": "file", "file": "a.txt", "matched": "100%",
    ...                "licenses": [{"name": "MIT"}]}],
    ... })
    >>> now = datetime.now(timezone.utc)
    >>> summary = generate_summary(now, now, "0123abcd", result, {})
    >>> sorted(f.license for f in summary.license_findings)
    ['MIT']
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("scanoss-summary")
except Exception:  # PackageNotFoundError or runtime env oddities
    __version__ = "0.0.0+unknown"

from .core.config import LoggingConfig, SummaryConfig, load_config_from_path
from .core.copyrights import extract_copyrights
from .core.findings import (
    UNKNOWN_LINE,
    CopyrightFinding,
    LicenseFinding,
    RepositoryProvenance,
    ScanSummary,
    Snippet,
    SnippetFinding,
    TextLocation,
    VcsInfo,
    VcsType,
)
from .core.licenses import extract_licenses, normalize_license, parse_score
from .core.lines import LineRangeError, parse_line_range
from .core.log import get_logger
from .core.records import (
    IdentificationType,
    InvalidFieldError,
    MatchEntry,
    MissingFieldError,
    ScanResult,
    ScanResultContractError,
    parse_scan_result,
)
from .core.snippets import combine_licenses, extract_snippets
from .core.spdx import LICENSE_REF_PREFIX, NOASSERTION, LicenseExpressionError
from .core.summary import generate_summary, generate_summary_for_path

PRIMARY_API = [
    "__version__",
    "generate_summary",
    "generate_summary_for_path",
    "parse_scan_result",
    "IdentificationType",
    "MatchEntry",
    "ScanResult",
    "ScanSummary",
    "TextLocation",
    "UNKNOWN_LINE",
    "LicenseFinding",
    "CopyrightFinding",
    "Snippet",
    "SnippetFinding",
    "RepositoryProvenance",
    "VcsInfo",
    "VcsType",
    "ScanResultContractError",
    "MissingFieldError",
    "InvalidFieldError",
    "LineRangeError",
    "LicenseExpressionError",
    "NOASSERTION",
    "LICENSE_REF_PREFIX",
    "SummaryConfig",
    "LoggingConfig",
    "load_config_from_path",
]

__all__ = list(PRIMARY_API)
