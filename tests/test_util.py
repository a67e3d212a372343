import pytest

from armazemsim.util import format_warehouse_name, parse_warehouse_name


@pytest.mark.parametrize(
    ("warehouse_id", "expected"),
    [(0, "000"), (1, "001"), (10, "010")],
)
def test_format_pads_to_three_digits(warehouse_id, expected):
    assert format_warehouse_name(warehouse_id) == expected


def test_format_keeps_wide_numbers_whole():
    assert format_warehouse_name(12345) == "12345"


@pytest.mark.parametrize("warehouse_id", [0, 1, 9, 42, 999, 1000])
def test_round_trip(warehouse_id):
    assert parse_warehouse_name(format_warehouse_name(warehouse_id)) == warehouse_id


def test_parse_ignores_leading_zeros_and_whitespace():
    assert parse_warehouse_name("  007") == 7


def test_parse_ignores_trailing_text():
    assert parse_warehouse_name("12abc") == 12


@pytest.mark.parametrize("name", ["", "abc", "   ", "-x"])
def test_parse_rejects_non_numeric(name):
    with pytest.raises(ValueError):
        parse_warehouse_name(name)