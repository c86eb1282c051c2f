"""Direction, color and cached outline of a triangle."""
import logging
from typing import Optional, Tuple

from kivy.event import EventDispatcher
from kivy.graphics import Triangle as KivyTriangle
from kivy.graphics.context_instructions import Color
from kivy.properties import AliasProperty, ColorProperty

from triangleview.core.config import process_config
from triangleview.core.direction import Direction
from triangleview.core.geometry import TrianglePoints, triangle_points
from triangleview.core.utils import to_rgba, to_window_points


class TriangleShape(EventDispatcher):

    """A filled triangle which fills a width x height box.

    The triangle's base lies on one edge of the box and its apex sits in the
    middle of the opposite edge, on the side named by :attr:`direction`.

    The outline is calculated the first time the shape is rendered and kept
    until the direction changes. Changing the color or the size of the box
    does not drop it, call :meth:`invalidate_geometry` for that.
    """

    def __init__(self, config: Optional[dict] = None, **kwargs) -> None:
        self._triangle_points = None    # type: Optional[TrianglePoints]
        self._direction = Direction.left
        self.log = logging.getLogger(type(self).__name__)

        self.config = process_config(config)

        super().__init__(**kwargs)

        self._direction = self.config['direction']
        self.color = self.config['color']

    def set_color(self, color) -> bool:
        """Set the fill color of the triangle.

        Returns True if the color changed. The triangle outline is kept.
        """
        color = to_rgba(color)
        if list(self.color) == color:
            return False

        self.color = color
        return True

    def set_direction(self, direction) -> bool:
        """Set the direction of the triangle.

        Returns True if the direction changed, in which case the outline is
        recalculated on the next render.
        """
        direction = Direction.from_attribute(direction)
        if direction is self.direction:
            return False

        self.direction = direction
        return True

    def invalidate_geometry(self) -> None:
        """Drop the cached outline."""
        self._triangle_points = None

    def get_triangle_points(self, width, height) -> TrianglePoints:
        """Return the cached outline, calculating it for width x height if
        there is none."""
        if self._triangle_points is None:
            self._triangle_points = triangle_points(self.direction, width, height)
            self.log.debug("Calculated %s triangle for %sx%s: %s", self.direction.name,
                           width, height, self._triangle_points)

        return self._triangle_points

    def get_origin(self) -> Tuple[float, float]:
        """Return the window position of the box's bottom-left corner."""
        return 0, 0

    def render(self, canvas, width, height) -> TrianglePoints:
        """Draw the triangle on a canvas and return its outline.

        Args:
            canvas: Kivy canvas to draw on. The canvas is cleared first. Pass
                None to only get the outline.
            width: Width of the box the triangle is calculated for.
            height: Height of the box the triangle is calculated for.

        Returns the three (x, y) corners in local coordinates with the origin
        at the top-left corner.
        """
        points = self.get_triangle_points(width, height)

        if canvas is not None:
            x, y = self.get_origin()
            canvas.clear()

            with canvas:
                Color(*self.color)
                KivyTriangle(points=to_window_points(points, x, y, height))

        return points

    #
    # Properties
    #

    def _get_direction(self) -> Direction:
        return self._direction

    def _set_direction(self, value) -> bool:
        # decoded before storing, so a bad value leaves the old direction
        direction = Direction.from_attribute(value)
        if direction is self._direction:
            return False

        self._direction = direction
        self.log.debug("Direction changed to %s", direction.name)
        self.invalidate_geometry()
        return True

    direction = AliasProperty(_get_direction, _set_direction)
    '''The :class:`~triangleview.core.direction.Direction` the triangle points
    to. Ints and direction names are decoded when assigned, invalid values
    raise ValueError.

    :attr:`direction` is an :class:`~kivy.properties.AliasProperty` and
    defaults to Direction.left.
    '''

    color = ColorProperty([0x75 / 255.0, 0x75 / 255.0, 0x75 / 255.0, 1.0])
    '''The fill color of the triangle, in the (r, g, b, a) format.

    :attr:`color` is a :class:`~kivy.properties.ColorProperty` and
    defaults to opaque gray.
    '''
