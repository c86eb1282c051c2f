"""A Kivy widget that draws a filled, directional triangle."""
from triangleview._version import __version__, version
