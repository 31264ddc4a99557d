import pytest
from PIL import Image as PIL_Image

from image import make_image_name


@pytest.fixture
def deck_root(tmp_path):
    """A complete 78 card deck named `test`, each card 20x40 pixels."""
    root = tmp_path / "decks"
    (root / "test_images").mkdir(parents=True)
    for card_number in range(1, 79):
        color = (card_number * 3, 255 - card_number * 3, card_number * 50 % 256)
        img = PIL_Image.new("RGB", (20, 40), color)
        img.save(make_image_name("test", card_number, str(root)))
    return root
