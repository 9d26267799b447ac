import pytest

from scanoss_summary.core.records import (
    IdentificationType,
    MatchEntry,
    MissingFieldError,
    parse_scan_result,
    require_field,
)


def test_from_mapping_reads_service_shape():
    entry = MatchEntry.from_mapping(
        {
            "id": "snippet",
            "file": "src/util.c",
            "matched": "45%",
            "licenses": [{"name": "MIT", "source": "component_declared"}, {"name": "Apache-2.0"}],
            "copyrights": [{"name": "Jane Doe"}],
            "file_url": "https://osskb.org/api/file_contents/abc123",
            "lines": "10-40",
            "oss_lines": "110-140",
            "url": "https://github.com/acme/util",
            "purl": ["pkg:github/acme/util"],
        }
    )

    assert entry.id is IdentificationType.SNIPPET
    assert entry.licenses == ("MIT", "Apache-2.0")
    assert entry.copyrights == ("Jane Doe",)
    assert entry.purl == ("pkg:github/acme/util",)
    assert entry.oss_lines == "110-140"


def test_from_mapping_defaults_optional_fields():
    entry = MatchEntry.from_mapping({"id": "FILE"})

    assert entry.id is IdentificationType.FILE
    assert entry.file is None
    assert entry.licenses == ()
    assert entry.purl is None


def test_from_mapping_accepts_single_purl_string():
    entry = MatchEntry.from_mapping({"id": "snippet", "purl": "pkg:npm/a"})

    assert entry.purl == ("pkg:npm/a",)


def test_unknown_identification_type_is_rejected():
    with pytest.raises(ValueError):
        MatchEntry.from_mapping({"id": "partial"})


def test_missing_id_is_contract_violation():
    with pytest.raises(MissingFieldError):
        MatchEntry.from_mapping({"file": "a.txt"})


def test_require_field_returns_value_or_raises():
    entry = MatchEntry(id=IdentificationType.SNIPPET, file="a.c")

    assert require_field(entry, "file") == "a.c"
    with pytest.raises(MissingFieldError) as excinfo:
        require_field(entry, "lines")
    assert "a.c" in str(excinfo.value)


def test_parse_scan_result_keeps_keys_and_typed_entries():
    typed = MatchEntry(id=IdentificationType.NONE)

    result = parse_scan_result({"a": [{"id": "file", "file": "a"}], "b": [typed]})

    assert set(result) == {"a", "b"}
    assert result["a"][0].file == "a"
    assert result["b"] == [typed]
