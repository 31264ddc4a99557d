import os

from PIL import Image as PIL_Image

from errors import MissingCardImage, InvalidCardImage
from constants import deck_size


def image_dir(deck, deck_root=""):
    return os.path.join(deck_root, f"{deck}_images")


def make_image_name(deck, card_number, deck_root=""):
    return os.path.join(image_dir(deck, deck_root), "%s-%04d.jpg" % (deck, card_number))


def check_deck_images(deck, deck_root="", cards=deck_size):
    # Only checks for presence, the renderer opens the files
    for card_number in range(1, cards + 1):
        img_path = make_image_name(deck, card_number, deck_root)
        if not os.path.isfile(img_path):
            raise MissingCardImage("tarot", f"Card image not found: {img_path}")


def read_image_size(path):
    with PIL_Image.open(path) as img:
        return img.size


def card_aspect_ratio(path, print_fn=None):
    print_fn = print_fn if print_fn is not None else lambda *args: args

    try:
        w, h = read_image_size(path)
    except OSError as e:
        raise InvalidCardImage("tarot", f"Cannot read card image {path}") from e

    ratio = float(w) / float(h)
    print_fn(f"Card width: {w}, Card height: {h}, Ratio: {ratio}")
    return ratio
