"""Widget showing a filled triangle pointing left, up, right or down."""
from typing import Optional, Tuple

from kivy.uix.widget import Widget

from triangleview.core.shape import TriangleShape


class TriangleView(TriangleShape, Widget):

    """Widget showing a triangle which fills the widget.

    The widget redraws itself when its color, direction, position or size
    changes. A resize keeps the cached outline, so a host that resizes the
    widget calls :meth:`invalidate_geometry` when the triangle should follow
    the new size.
    """

    def __init__(self, config: Optional[dict] = None, **kwargs) -> None:
        super().__init__(config=config, **kwargs)

        # Bind to all properties that when changed need to force
        # the widget to be redrawn
        self.bind(color=self._draw_widget,
                  parent=self._draw_widget,
                  pos=self._draw_widget,
                  size=self._draw_widget)

        self._draw_widget()

    def __repr__(self) -> str:  # pragma: no cover
        return '<TriangleView direction={} id={}>'.format(self.direction.name, id(self))

    def invalidate_geometry(self) -> None:
        """Drop the cached outline and redraw the widget."""
        super().invalidate_geometry()
        self._draw_widget()

    def get_origin(self) -> Tuple[float, float]:
        return self.x, self.y

    def _draw_widget(self, *args) -> None:
        """Establish the drawing instructions for the widget."""
        del args

        if self.canvas is None:
            return

        self.render(self.canvas, self.width, self.height)
