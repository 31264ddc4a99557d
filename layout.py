import math
from dataclasses import dataclass, field
from typing import List, Optional

from util import parse_length
from errors import *
from constants import deck_size
from page import PageSpec, Inset, Gap


@dataclass(frozen=True)
class GridSpec:
    rows: int
    cols: int
    card_width_pt: float
    card_height_pt: float

    @property
    def cards_per_page(self):
        return self.rows * self.cols


@dataclass(frozen=True)
class Placement:
    card_id: int
    x_pt: float
    y_pt: float
    page_index: int


@dataclass
class PlacementPlan:
    placements: List[Placement] = field(default_factory=list)
    # indices into `placements` after which a new page starts
    page_breaks: List[int] = field(default_factory=list)
    page_count: int = 0


def parse_card_dimension(text, name) -> Optional[float]:
    if text is None:
        return None

    value = parse_length(text)
    if value is None:
        raise UnparseableDimension(name, f"Bad card {name}: {text}")
    if value <= 0:
        raise GridDoesNotFit(name, f"Card {name} must be positive: {text}")
    return value


def solve_grid(
    page: PageSpec,
    inset: Inset,
    gap: Gap,
    ratio: float,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    card_width_pt: Optional[float] = None,
    card_height_pt: Optional[float] = None,
    print_fn=None,
) -> GridSpec:
    """Derives rows, columns and card size from exactly one driver.

    The counts and card sizes are floored first and then rows/columns are
    dropped until the grid fits inside the borders. Gaps are only taken into
    account when a card width or height drives the grid.
    """
    print_fn = print_fn if print_fn is not None else lambda *args: args

    drivers = [rows, cols, card_width_pt, card_height_pt]
    if sum(d is not None for d in drivers) != 1:
        raise ConflictingGridDrivers(
            "rows/cols/width/height",
            "Must specify exactly one of rows, cols, width or height",
        )

    if card_width_pt is not None:
        usable_width = page.width_pt - 2 * inset.border_pt - inset.left_border_pt
        cols = math.floor(usable_width / (card_width_pt + gap.horizontal_pt))
    elif card_height_pt is not None:
        usable_height = page.height_pt - 2 * inset.border_pt - inset.bottom_border_pt
        rows = math.floor(usable_height / (card_height_pt + gap.vertical_pt))

    if rows is None:
        _check_count("cols", cols)
        rows = math.floor(cols * ratio)
    elif cols is None:
        _check_count("rows", rows)
        cols = math.floor(rows / ratio)
    _check_count("rows", rows)
    _check_count("cols", cols)

    if card_height_pt is None:
        card_height_pt = math.floor(page.height_pt / rows)
    if card_width_pt is None:
        card_width_pt = math.floor(card_height_pt * ratio)

    print_fn(f"rows: {rows}, cols: {cols} before fitting")

    max_height = page.height_pt - 2 * (inset.bottom_border_pt + inset.border_pt)
    while card_height_pt * rows > max_height:
        rows = rows - 1
        _check_count("rows", rows)

    max_width = page.width_pt - 2 * (inset.left_border_pt + inset.border_pt)
    while card_width_pt * cols > max_width:
        cols = cols - 1
        _check_count("cols", cols)

    return GridSpec(rows, cols, card_width_pt, card_height_pt)


def _check_count(name, count):
    if count < 1:
        raise GridDoesNotFit(name, f"Cards do not fit on the page ({name}: {count})")


def deck_sequence(dups, cards=deck_size):
    if dups < 1:
        raise UnparseableDimension("dups", f"Bad number of duplicates: {dups}")

    # each card is repeated `dups` times before the next one starts
    return [card for card in range(1, cards + 1) for _ in range(dups)]


def plan_placements(grid: GridSpec, inset: Inset, gap: Gap, deck) -> PlacementPlan:
    cards_per_page = grid.cards_per_page
    plan = PlacementPlan()

    card_on_page = -1
    for i, card in enumerate(deck):
        card_on_page = i % cards_per_page
        r, c = divmod(card_on_page, grid.cols)

        x = c * grid.card_width_pt + inset.border_pt + inset.left_border_pt
        x = x + c * gap.horizontal_pt
        # anchors the top edge of the card, row 0 sits one card height up
        y = (r + 1) * grid.card_height_pt + inset.border_pt + inset.bottom_border_pt
        y = y + r * gap.vertical_pt

        plan.placements.append(Placement(card, x, y, i // cards_per_page))

        if card_on_page == cards_per_page - 1:
            plan.page_breaks.append(i)
            card_on_page = -1

    plan.page_count = len(plan.page_breaks) + 1

    # a full last page leaves an empty one behind
    if card_on_page == -1 and plan.page_breaks:
        plan.page_breaks.pop()
        plan.page_count = plan.page_count - 1

    return plan
