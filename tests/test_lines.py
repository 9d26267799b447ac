import pytest

from scanoss_summary.core.findings import TextLocation
from scanoss_summary.core.lines import LineRangeError, parse_line_range


def test_range_with_start_and_end():
    location = parse_line_range("src/main.c", "10-20")

    assert location == TextLocation("src/main.c", 10, 20)


def test_single_line_sets_start_and_end():
    location = parse_line_range("src/main.c", "5")

    assert location.start_line == 5
    assert location.end_line == 5
    assert location.has_known_lines


@pytest.mark.parametrize("line_range", ["abc", "1-x", "", "10-", "1_0-2_0", " 10-20", "\u0661\u0662", "1.5"])
def test_non_numeric_parts_fail(line_range):
    with pytest.raises(LineRangeError):
        parse_line_range("src/main.c", line_range)


def test_more_than_two_parts_fail_instead_of_truncating():
    with pytest.raises(LineRangeError):
        parse_line_range("src/main.c", "1-2-3")


def test_line_range_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_line_range("src/main.c", "abc")


def test_leading_plus_is_accepted():
    assert parse_line_range("src/main.c", "+3") == TextLocation("src/main.c", 3, 3)
