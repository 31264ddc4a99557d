import pytest

from util import *


def test_parse_length_units():
    assert parse_length("3.5in") == pytest.approx(252.0)
    assert parse_length("25.4mm") == pytest.approx(72.0)
    assert parse_length("1IN") == pytest.approx(72.0)


def test_parse_length_defaults_to_mm():
    assert parse_length("10") == pytest.approx(mm_to_point(10))


def test_parse_length_rejects_garbage():
    assert parse_length("abc") is None
    assert parse_length("12cm") is None
    assert parse_length(None) is None


def test_find_length_is_lenient():
    assert find_length("gap of 2in") == pytest.approx(144.0)
    assert find_length("none") is None


@pytest.mark.parametrize("value", [0.0, 1.0, 28.3464, 612.0, 1234.5])
def test_unit_conversion_round_trips(value):
    assert mm_to_point(point_to_mm(value)) == pytest.approx(value)
    assert inch_to_point(point_to_inch(value)) == pytest.approx(value)
