import os

from pymupdf import paper_sizes

cwd = os.getcwd()

version = "0.1.0"

# Intrinsic (width, height) in points, portrait, keyed by lowercase name
page_sizes = paper_sizes()

deck_size = 78

default_page_size = "LETTER"
default_orientation = "portrait"
default_border = "10mm"

points_per_inch = 72
mm_per_inch = 25.4
