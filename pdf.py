import os

from reportlab.pdfgen import canvas
from reportlab.pdfbase.pdfdoc import PDFError

from util import point_to_mm
from page import *
from layout import *
from image import check_deck_images, make_image_name, card_aspect_ratio
from errors import MissingRequiredField, InvalidCardImage, OutputNotWritable


class Document:
    """Collects image placements page by page and writes them with reportlab.

    Nothing touches the disk before `save`, pages can still be dropped until
    then. A fresh document holds one blank page.
    """

    def __init__(self, width_pt, height_pt):
        self.size = (width_pt, height_pt)
        self.pages = [[]]

    @property
    def page_count(self):
        return len(self.pages)

    def place_image(self, path, x, y, w, h):
        self.pages[-1].append((path, x, y, w, h))

    def new_page(self):
        self.pages.append([])

    def delete_page(self, index):
        del self.pages[index]

    def save(self, pdf_path):
        out_dir = os.path.dirname(pdf_path)
        if out_dir and not os.path.exists(out_dir):
            try:
                os.makedirs(out_dir)
            except OSError as e:
                raise OutputNotWritable(
                    "dir", f"Cannot create output directory {out_dir}: {e.strerror}"
                ) from e

        pages = canvas.Canvas(pdf_path, pagesize=self.size)
        for page_images in self.pages:
            for img, x, y, w, h in page_images:
                # placements anchor the top edge, reportlab draws from the bottom
                try:
                    pages.drawImage(img, x, y - h, w, h)
                except (OSError, PDFError) as e:
                    raise InvalidCardImage("tarot", f"Cannot read card image {img}") from e
            pages.showPage()

        try:
            pages.save()
        except OSError as e:
            raise OutputNotWritable(
                "file", f"Cannot write {pdf_path}: {e.strerror}"
            ) from e
        return pdf_path


def output_path(config, grid):
    if config.file is not None:
        return os.path.join(config.dir, config.file)
    return os.path.join(
        config.dir, f"{config.deck}-{grid.rows}x{grid.cols}-{config.dups}.pdf"
    )


def render(doc, plan, grid, deck, deck_root="", print_fn=None):
    print_fn = print_fn if print_fn is not None else lambda *args: args

    # clean out spurious pages and start a fresh one
    while doc.page_count > 0:
        doc.delete_page(0)
    doc.new_page()

    page_breaks = set(plan.page_breaks)
    for i, placement in enumerate(plan.placements):
        img = make_image_name(deck, placement.card_id, deck_root)
        doc.place_image(
            img, placement.x_pt, placement.y_pt, grid.card_width_pt, grid.card_height_pt
        )
        if i in page_breaks:
            doc.new_page()

    print_fn(f"Rendered {len(plan.placements)} cards on {doc.page_count} pages")
    return doc


def generate(config, print_fn=None):
    print_fn = print_fn if print_fn is not None else lambda *args: args

    if not config.deck:
        raise MissingRequiredField("tarot", "Tarot deck required")

    page = resolve_page_size(config.page_size, config.orientation)
    print_fn(
        f"page size: {page.width_pt}pt x {page.height_pt}pt "
        f"({point_to_mm(page.width_pt):.1f}mm x {point_to_mm(page.height_pt):.1f}mm)"
    )

    inset = resolve_insets(
        config.left_border, config.bottom_border, config.default_border
    )
    gap = resolve_gaps(config.h_gap, config.v_gap)
    card_width_pt = parse_card_dimension(config.width, "width")
    card_height_pt = parse_card_dimension(config.height, "height")
    deck = deck_sequence(config.dups)

    check_deck_images(config.deck, config.deck_root)
    ratio = card_aspect_ratio(
        make_image_name(config.deck, 1, config.deck_root), print_fn
    )

    grid = solve_grid(
        page,
        inset,
        gap,
        ratio,
        rows=config.rows,
        cols=config.cols,
        card_width_pt=card_width_pt,
        card_height_pt=card_height_pt,
        print_fn=print_fn,
    )
    print_fn(f"rows: {grid.rows}, cols: {grid.cols}")
    print_fn(f"card size: {grid.card_width_pt}pt x {grid.card_height_pt}pt")
    print_fn(f"{config.dups} copies of each card")
    print_fn(f"Cards per page: {grid.cards_per_page}")

    plan = plan_placements(grid, inset, gap, deck)

    doc = Document(page.width_pt, page.height_pt)
    render(doc, plan, grid, config.deck, config.deck_root, print_fn)

    pdf_path = output_path(config, grid)
    print_fn(f"Writing to {pdf_path}")
    doc.save(pdf_path)

    return pdf_path, grid
