import pytest

from scanoss_summary.core.findings import TextLocation, VcsType
from scanoss_summary.core.lines import LineRangeError
from scanoss_summary.core.records import (
    IdentificationType,
    InvalidFieldError,
    MatchEntry,
    MissingFieldError,
    ScanResultContractError,
)
from scanoss_summary.core.snippets import combine_licenses, extract_snippets, snippet_provenance
from scanoss_summary.core.spdx import NOASSERTION, LicenseExpressionError


def _snippet_entry(**overrides) -> MatchEntry:
    fields = dict(
        id=IdentificationType.SNIPPET,
        file="src/util.c",
        matched="45%",
        licenses=("MIT",),
        file_url="https://osskb.org/api/file_contents/abc123",
        lines="10-40",
        oss_lines="110-140",
        url="https://github.com/acme/util",
        purl=("pkg:github/acme/util", "pkg:npm/acme-util"),
    )
    fields.update(overrides)
    return MatchEntry(**fields)


def test_one_snippet_per_purl_sharing_everything_else():
    snippets = extract_snippets(_snippet_entry())

    assert len(snippets) == 2
    assert {s.purl for s in snippets} == {"pkg:github/acme/util", "pkg:npm/acme-util"}
    assert {(s.score, s.location, s.provenance, s.license) for s in snippets} == {
        (
            45.0,
            TextLocation("https://osskb.org/api/file_contents/abc123", 110, 140),
            snippet_provenance("https://github.com/acme/util"),
            "MIT",
        )
    }


def test_duplicate_purls_collapse():
    snippets = extract_snippets(_snippet_entry(purl=("pkg:npm/a", "pkg:npm/a")))

    assert len(snippets) == 1


def test_provenance_has_unknown_vcs_and_no_revision():
    provenance = snippet_provenance("https://github.com/acme/util")

    assert provenance.vcs_info.type == VcsType.UNKNOWN
    assert provenance.vcs_info.url == "https://github.com/acme/util"
    assert provenance.vcs_info.revision == ""
    assert provenance.has_revision is False


def test_licenses_are_combined_sorted_and_deduplicated():
    forward = extract_snippets(_snippet_entry(licenses=("MIT", "Apache-2.0", "MIT")))
    backward = extract_snippets(_snippet_entry(licenses=("Apache-2.0", "MIT")))

    assert {s.license for s in forward} == {"Apache-2.0 AND MIT"}
    assert forward == backward


def test_combine_licenses_keeps_alternatives():
    assert combine_licenses(["MIT", "MIT OR Apache-2.0"]) == "(Apache-2.0 OR MIT) AND MIT"


def test_combine_licenses_without_names_is_noassertion():
    assert combine_licenses([]) == NOASSERTION


def test_combine_licenses_single_name_is_unchanged():
    assert combine_licenses(["GPL-2.0-only"]) == "GPL-2.0-only"


def test_unparsable_snippet_license_raises():
    with pytest.raises(LicenseExpressionError):
        extract_snippets(_snippet_entry(licenses=("MIT AND OR Apache-2.0",)))


@pytest.mark.parametrize("field", ["matched", "file_url", "oss_lines", "url", "purl"])
def test_missing_required_field_is_contract_violation(field):
    with pytest.raises(MissingFieldError) as excinfo:
        extract_snippets(_snippet_entry(**{field: None}))

    assert excinfo.value.field_name == field


def test_empty_purl_list_is_contract_violation():
    with pytest.raises(MissingFieldError):
        extract_snippets(_snippet_entry(purl=()))


@pytest.mark.parametrize("matched", ["", "abc%", "nan%", "inf%", " 45%"])
def test_bad_snippet_score_is_fatal(matched):
    with pytest.raises(InvalidFieldError) as excinfo:
        extract_snippets(_snippet_entry(matched=matched))

    assert isinstance(excinfo.value, ScanResultContractError)


def test_malformed_reference_lines_raise_format_error():
    with pytest.raises(LineRangeError):
        extract_snippets(_snippet_entry(oss_lines="a-b"))


def test_single_reference_line():
    snippets = extract_snippets(_snippet_entry(oss_lines="7"))

    assert {(s.location.start_line, s.location.end_line) for s in snippets} == {(7, 7)}
