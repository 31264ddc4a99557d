import pytest
from pymupdf import paper_sizes

from page import *
from errors import *
from util import mm_to_point


@pytest.mark.parametrize("name", ["a4", "letter", "legal", "a3"])
def test_named_page_size_orientation(name):
    width, height = paper_sizes()[name]

    portrait = resolve_page_size(name.upper(), "portrait")
    assert (portrait.width_pt, portrait.height_pt) == (width, height)

    landscape = resolve_page_size(name, "landscape")
    assert (landscape.width_pt, landscape.height_pt) == (height, width)


def test_named_page_size_bad_orientation():
    with pytest.raises(InvalidOrientation):
        resolve_page_size("A4", "sideways")


def test_explicit_page_size():
    page = resolve_page_size("9inx12in", "portrait")
    assert page.width_pt == pytest.approx(648.0)
    assert page.height_pt == pytest.approx(864.0)


def test_explicit_page_size_defaults_to_mm_and_ignores_orientation():
    page = resolve_page_size("210X297", "landscape")
    assert page.width_pt == pytest.approx(mm_to_point(210))
    assert page.height_pt == pytest.approx(mm_to_point(297))


@pytest.mark.parametrize("size", ["bogus", "12in", "0x10", ""])
def test_bad_page_size(size):
    with pytest.raises(InvalidPageSize):
        resolve_page_size(size, "portrait")


def test_default_border():
    inset = resolve_insets(None, None)
    assert inset.border_pt == pytest.approx(mm_to_point(10))
    assert inset.left_border_pt == 0
    assert inset.bottom_border_pt == 0


def test_explicit_borders_replace_uniform_border():
    inset = resolve_insets("1in", "5mm")
    assert inset.border_pt == 0
    assert inset.left_border_pt == pytest.approx(72.0)
    assert inset.bottom_border_pt == pytest.approx(mm_to_point(5))


@pytest.mark.parametrize("left, bottom", [("5mm", None), (None, "5mm")])
def test_border_needs_both(left, bottom):
    with pytest.raises(InvalidBorderPairing):
        resolve_insets(left, bottom)


def test_bad_border():
    with pytest.raises(UnparseableDimension) as e:
        resolve_insets("5mm", "lots")
    assert e.value.field == "bottom_border"


def test_gaps():
    assert resolve_gaps(None, None) == Gap(0.0, 0.0)

    gap = resolve_gaps("0.5in", "2")
    assert gap.horizontal_pt == pytest.approx(36.0)
    assert gap.vertical_pt == pytest.approx(mm_to_point(2))


def test_gap_without_number_is_zero():
    assert resolve_gaps("none", "1in") == Gap(0.0, 72.0)


@pytest.mark.parametrize("h_gap, v_gap", [("5mm", None), (None, "5mm")])
def test_gap_needs_both(h_gap, v_gap):
    with pytest.raises(InvalidGapPairing):
        resolve_gaps(h_gap, v_gap)
