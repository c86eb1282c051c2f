import os
import unittest

os.environ['KIVY_NO_FILELOG'] = '1'
os.environ['KIVY_NO_CONSOLELOG'] = '1'

from triangleview.core.utils import to_rgba, to_window_points


class TestUtils(unittest.TestCase):

    def assertColor(self, expected, actual):
        self.assertEqual(4, len(actual))
        for e, a in zip(expected, actual):
            self.assertAlmostEqual(e, a)

    def test_argb_int(self):
        self.assertColor([0, 0, 1.0, 1.0], to_rgba(0xff0000ff))
        self.assertColor([1.0, 0, 0, 1.0], to_rgba(0xffff0000))
        self.assertColor([0x75 / 255, 0x75 / 255, 0x75 / 255, 1.0], to_rgba(0xff757575))
        self.assertColor([0, 1.0, 0, 0], to_rgba(0x0000ff00))

    def test_hex_string(self):
        self.assertColor([1.0, 0, 0, 1.0], to_rgba('ff0000'))
        self.assertColor([1.0, 0, 0, 1.0], to_rgba('#ff0000'))
        self.assertColor([0, 0, 1.0, 0.0], to_rgba('#0000ff00'))

    def test_list(self):
        self.assertColor([0.5, 0.25, 0, 1.0], to_rgba([0.5, 0.25, 0]))
        self.assertColor([0.5, 0.25, 0, 0.5], to_rgba((0.5, 0.25, 0, 0.5)))

    def test_invalid_colors(self):
        for color in (-1, 0x100000000, True, 'red', '#12345', '#gggggg', [1, 2, 3],
                      [0.5], [0, 0, 0, 0, 0], None, 1.5):
            with self.assertRaises(ValueError, msg=repr(color)):
                to_rgba(color)

    def test_to_window_points(self):
        # y is flipped, the top-left corner of a 100x50 box at (10, 20) is (10, 70)
        self.assertEqual([10, 70, 10, 20, 110, 45],
                         to_window_points(((0, 0), (0, 50), (100, 25)), 10, 20, 50))
