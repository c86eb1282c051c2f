"""TriangleView utils."""
from string import hexdigits
from typing import List

from kivy.utils import get_color_from_hex


def to_rgba(color) -> List[float]:
    """Convert a color to a Kivy (r, g, b, a) list of floats between 0 and 1.

    Accepts an int packed as 0xAARRGGBB, a hex string in rrggbb or rrggbbaa
    format (the leading # is optional) or a sequence of 3 or 4 floats.

    Kivy's ColorProperty has no ARGB int form, and get_color_from_hex does
    not validate its input, so hex strings are checked here before they are
    converted.
    """
    if isinstance(color, bool):
        raise ValueError("Invalid color: {}".format(color))

    if isinstance(color, int):
        if not 0 <= color <= 0xffffffff:
            raise ValueError("Color int {:#x} is not a 32 bit ARGB value".format(color))

        return [((color >> 16) & 0xff) / 255.0,
                ((color >> 8) & 0xff) / 255.0,
                (color & 0xff) / 255.0,
                ((color >> 24) & 0xff) / 255.0]

    if isinstance(color, str):
        hex_str = color.strip().lstrip('#')
        if len(hex_str) not in (6, 8) or not all(x in hexdigits for x in hex_str):
            raise ValueError('Invalid color string "{}"'.format(color))

        return get_color_from_hex('#' + hex_str)

    try:
        values = [float(x) for x in color]
    except (TypeError, ValueError):
        raise ValueError("Invalid color: {}".format(color)) from None

    if len(values) == 3:
        values.append(1.0)

    if len(values) != 4 or not all(0.0 <= x <= 1.0 for x in values):
        raise ValueError("Invalid color: {}. Color lists need 3 or 4 values between 0 and 1".format(
            color))

    return values


def to_window_points(points, x, y, height) -> list:
    """Translate top-left origin local points to a flat list of Kivy window
    coordinates for a box whose bottom-left corner is at (x, y)."""
    flat = []
    for point_x, point_y in points:
        flat.extend((x + point_x, y + height - point_y))

    return flat
