# records.py
# SPDX-License-Identifier: MIT
"""Typed view of the raw match records returned by the SCANOSS service.

The service client hands us a mapping from an opaque component key to a list
of per-file match entries. Entries are loosely typed on the wire: most fields
are optional and only meaningful for one identification kind. This module
keeps them that way (``None`` for absent fields) and offers
:func:`require_field` for the places where a field is mandatory.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .log import get_logger

__all__ = [
    "IdentificationType",
    "MatchEntry",
    "ScanResult",
    "ScanResultContractError",
    "MissingFieldError",
    "InvalidFieldError",
    "require_field",
    "parse_scan_result",
]

log = get_logger(__name__)


class ScanResultContractError(ValueError):
    """Raised when upstream match data violates the documented contract."""


class MissingFieldError(ScanResultContractError):
    """A field that is mandatory for the entry's identification kind is absent."""

    def __init__(self, field_name: str, entry: "MatchEntry | None" = None) -> None:
        self.field_name = field_name
        self.entry = entry
        where = f" (file={entry.file!r})" if entry is not None and entry.file else ""
        super().__init__(f"Required field {field_name!r} is missing from match entry{where}")


class InvalidFieldError(ScanResultContractError):
    """A mandatory field is present but cannot be interpreted."""


class IdentificationType(Enum):
    """How the service identified a file: not at all, as a whole, or partially."""

    NONE = "none"
    FILE = "file"
    SNIPPET = "snippet"

    @classmethod
    def parse(cls, value: str | "IdentificationType") -> "IdentificationType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown identification type {value!r}; expected one of "
                f"{sorted(member.value for member in cls)}"
            ) from None


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """
    One match record for a scanned file.

    Attributes:
        id (IdentificationType): Identification kind.
        file (str | None): Path of the scanned file.
        matched (str | None): Matched percentage, e.g. ``"87%"``.
        licenses (tuple[str, ...]): License names reported for the match.
        copyrights (tuple[str, ...]): Copyright statements reported for the match.
        file_url (str | None): URL of the matched reference file (snippets).
        lines (str | None): Matched line range in the scanned file (snippets).
        oss_lines (str | None): Matched line range in the reference file (snippets).
        url (str | None): URL of the matched reference source (snippets).
        purl (tuple[str, ...] | None): Package identifiers of the matched
            component (snippets).
    """
    id: IdentificationType
    file: str | None = None
    matched: str | None = None
    licenses: tuple[str, ...] = ()
    copyrights: tuple[str, ...] = ()
    file_url: str | None = None
    lines: str | None = None
    oss_lines: str | None = None
    url: str | None = None
    purl: tuple[str, ...] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MatchEntry":
        """Build an entry from one deserialized SCANOSS JSON object.

        License and copyright lists may hold either ``{"name": ...}`` objects
        (the service's shape) or bare strings. ``purl`` may be a list or a
        single string.
        """
        if "id" not in data:
            raise MissingFieldError("id")
        purl = data.get("purl")
        if isinstance(purl, str):
            purl = (purl,)
        elif purl is not None:
            purl = tuple(str(p) for p in purl)
        return cls(
            id=IdentificationType.parse(data["id"]),
            file=_opt_str(data.get("file")),
            matched=_opt_str(data.get("matched")),
            licenses=_names(data.get("licenses")),
            copyrights=_names(data.get("copyrights")),
            file_url=_opt_str(data.get("file_url")),
            lines=_opt_str(data.get("lines")),
            oss_lines=_opt_str(data.get("oss_lines")),
            url=_opt_str(data.get("url")),
            purl=purl,
        )


ScanResult = Mapping[str, Sequence[MatchEntry]]


def _opt_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _names(items: Iterable[Any] | None) -> tuple[str, ...]:
    if not items:
        return ()
    out: list[str] = []
    for item in items:
        if isinstance(item, Mapping):
            name = item.get("name")
            if name is None:
                continue
            out.append(str(name))
        else:
            out.append(str(item))
    return tuple(out)


def require_field(entry: MatchEntry, name: str) -> Any:
    """Return ``entry.<name>``, raising :class:`MissingFieldError` when absent."""
    value = getattr(entry, name)
    if value is None:
        raise MissingFieldError(name, entry)
    return value


def parse_scan_result(raw: Mapping[str, Iterable[Mapping[str, Any] | MatchEntry]]) -> dict[str, list[MatchEntry]]:
    """Convert a deserialized SCANOSS response into typed match entries.

    Values that are already :class:`MatchEntry` instances pass through.
    """
    result: dict[str, list[MatchEntry]] = {}
    for key, entries in raw.items():
        typed = [
            entry if isinstance(entry, MatchEntry) else MatchEntry.from_mapping(entry)
            for entry in entries
        ]
        result[key] = typed
    log.debug("Parsed %d match entries across %d keys", sum(len(v) for v in result.values()), len(result))
    return result
