"""Triangle outline calculation."""
from typing import Tuple

from triangleview.core.direction import Direction

Point = Tuple[float, float]
TrianglePoints = Tuple[Point, Point, Point]


def triangle_points(direction: Direction, width, height) -> TrianglePoints:
    """Return the three corners of the triangle filling a width x height box.

    Points are in the box's local coordinates with the origin at the top-left
    corner and y growing downwards. The first two points are the base corners,
    the third one is the apex. Midpoints are floored, so integer dimensions
    give integer points.
    """
    if not isinstance(direction, Direction):
        raise ValueError("Invalid direction \"{}\", expected a Direction".format(direction))

    if width < 0 or height < 0:
        raise ValueError("Triangle bounds can not be negative (width={}, height={})".format(
            width, height))

    if direction is Direction.left:
        return (width, 0), (width, height), (0, height // 2)
    if direction is Direction.up:
        return (0, height), (width, height), (width // 2, 0)
    if direction is Direction.right:
        return (0, 0), (0, height), (width, height // 2)

    return (0, 0), (width, 0), (width // 2, height)
