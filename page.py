import re
from dataclasses import dataclass

from util import *
from errors import *
from constants import *


@dataclass(frozen=True)
class PageSpec:
    width_pt: float
    height_pt: float


@dataclass(frozen=True)
class Inset:
    border_pt: float = 0.0
    left_border_pt: float = 0.0
    bottom_border_pt: float = 0.0


@dataclass(frozen=True)
class Gap:
    horizontal_pt: float = 0.0
    vertical_pt: float = 0.0


page_size_pattern = rf"{length_pattern}\s*x\s*{length_pattern}"


def resolve_page_size(page_size, orientation) -> PageSpec:
    """Turns a named paper size plus orientation, or an explicit
    `<w>[unit]x<h>[unit]`, into a page size in points.

    Named sizes are swapped for landscape. Explicit sizes are taken literally
    and the orientation is ignored for them.
    """
    if page_size is None:
        raise InvalidPageSize("page_size", "no page size given")

    name = page_size.strip().lower()
    if name in page_sizes:
        width_pt, height_pt = page_sizes[name]
        match (orientation or "").strip().lower():
            case "portrait":
                return PageSpec(float(width_pt), float(height_pt))
            case "landscape":
                return PageSpec(float(height_pt), float(width_pt))
            case _:
                raise InvalidOrientation(
                    "orientation", f"Bad orientation: {orientation}"
                )

    matches = re.fullmatch(page_size_pattern, name)
    if matches is None:
        raise InvalidPageSize("page_size", f"Bad page size: {page_size}")

    width_pt = to_point(float(matches[1]), matches[2])
    height_pt = to_point(float(matches[3]), matches[4])
    if width_pt <= 0 or height_pt <= 0:
        raise InvalidPageSize("page_size", f"Bad page size: {page_size}")

    return PageSpec(width_pt, height_pt)


def resolve_insets(left_border, bottom_border, default_border=default_border) -> Inset:
    if left_border is None and bottom_border is None:
        border_pt = parse_length(default_border)
        if border_pt is None:
            raise UnparseableDimension(
                "border", f"Bad default border: {default_border}"
            )
        return Inset(border_pt=border_pt)

    if left_border is None or bottom_border is None:
        raise InvalidBorderPairing(
            "left_border/bottom_border",
            "Must specify either both left and bottom border or neither",
        )

    left_border_pt = parse_length(left_border)
    if left_border_pt is None:
        raise UnparseableDimension("left_border", f"Bad left border: {left_border}")
    bottom_border_pt = parse_length(bottom_border)
    if bottom_border_pt is None:
        raise UnparseableDimension(
            "bottom_border", f"Bad bottom border: {bottom_border}"
        )

    return Inset(left_border_pt=left_border_pt, bottom_border_pt=bottom_border_pt)


def resolve_gaps(h_gap, v_gap) -> Gap:
    if h_gap is None and v_gap is None:
        return Gap()

    if h_gap is None or v_gap is None:
        raise InvalidGapPairing(
            "h_gap/v_gap", "Must specify either both horizontal and vertical gap or neither"
        )

    # A gap without any number in it counts as no gap
    return Gap(find_length(h_gap) or 0.0, find_length(v_gap) or 0.0)
