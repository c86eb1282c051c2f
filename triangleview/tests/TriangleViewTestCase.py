import os
import sys
import unittest
import unittest.mock

verbose = sys.argv and "-v" in sys.argv

if not verbose:
    os.environ['KIVY_NO_FILELOG'] = '1'
    os.environ['KIVY_NO_CONSOLELOG'] = '1'

os.environ['KIVY_NO_ARGS'] = '1'

from kivy.graphics import Triangle as KivyTriangle
from kivy.graphics.context_instructions import Color

from triangleview.core import geometry
from triangleview.widgets.triangle import TriangleView

# Kivy widgets open a window when they are created
has_display = sys.platform in ('win32', 'darwin') or bool(
    os.environ.get('DISPLAY') or os.environ.get('WAYLAND_DISPLAY'))

GRAY = [0x75 / 255, 0x75 / 255, 0x75 / 255, 1.0]
BLUE = [0, 0, 1.0, 1.0]
RED = [1.0, 0, 0, 1.0]


class TriangleViewTestCase(unittest.TestCase):

    widget_class = TriangleView

    def create_widget(self, direction=None, color=None, **kwargs):
        config = dict()
        if direction is not None:
            config['direction'] = direction
        if color is not None:
            config['color'] = color

        return self.widget_class(config=config, **kwargs)

    @staticmethod
    def count_calculations():
        """Patch the outline calculation with a mock which counts calls."""
        return unittest.mock.patch('triangleview.core.shape.triangle_points',
                                   wraps=geometry.triangle_points)

    @staticmethod
    def get_instructions(canvas, cls):
        return [x for x in canvas.children if isinstance(x, cls)]

    def assertColor(self, expected, actual):
        self.assertEqual(4, len(actual))
        for e, a in zip(expected, actual):
            self.assertAlmostEqual(e, a)

    def assertDrawn(self, canvas, points, rgba):
        colors = self.get_instructions(canvas, Color)
        triangles = self.get_instructions(canvas, KivyTriangle)

        self.assertEqual(1, len(colors))
        self.assertEqual(1, len(triangles))
        self.assertColor(rgba, colors[0].rgba)
        self.assertEqual(points, list(triangles[0].points))
