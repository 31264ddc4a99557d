import re

from constants import points_per_inch, mm_per_inch


length_pattern = r"(\d+(?:\.\d+)?)\s*(in|mm)?"


def mm_to_inch(mm):
    return mm / mm_per_inch


def mm_to_point(mm):
    return inch_to_point(mm_to_inch(mm))


def inch_to_mm(inch):
    return inch * mm_per_inch


def inch_to_point(inch):
    return inch * points_per_inch


def point_to_inch(point):
    return point / points_per_inch


def point_to_mm(point):
    return inch_to_mm(point_to_inch(point))


def to_point(value, unit):
    return inch_to_point(value) if unit == "in" else mm_to_point(value)


def parse_length(text):
    """Parses `<number>[.<number>][in|mm]` into points, `mm` if no unit is given.

    Returns `None` when the string does not hold a length.
    """
    if text is None:
        return None

    matches = re.fullmatch(length_pattern, text.strip().lower())
    if matches is None:
        return None

    return to_point(float(matches[1]), matches[2])


def find_length(text):
    # Lenient variant, picks up the first length anywhere in the string
    if text is None:
        return None

    matches = re.search(length_pattern, text.lower())
    if matches is None:
        return None

    return to_point(float(matches[1]), matches[2])
