"""Shows TriangleView widgets in a Kivy window."""

import argparse
import logging
import os
import sys
from string import hexdigits

from triangleview._version import version

# Note, Kivy imports are done deeper in this file so the Kivy logging can be
# turned off before Kivy is imported


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the demo command."""
    parser = argparse.ArgumentParser(description='Shows TriangleView widgets')

    parser.add_argument("-d",
                        action="store", dest="direction", default=None,
                        metavar='direction',
                        help="Only show the triangle pointing in this direction "
                             "(left, up, right or down). Default shows all four")

    parser.add_argument("-c",
                        action="store", dest="color", default='ff757575',
                        metavar='color',
                        help="Fill color as ARGB hex, e.g. ff0000ff for opaque blue. RGB hex "
                             "without alpha, e.g. 0000ff, is opaque. "
                             "Default is ff757575")

    parser.add_argument("-l",
                        action="store", dest="logfile", default=None,
                        metavar='file_name',
                        help="The name (and path) of the log file. Default logs "
                             "to the console only")

    parser.add_argument("-v",
                        action="store_const", dest="loglevel", const=logging.DEBUG,
                        default=logging.INFO, help="Enables verbose logging")

    parser.add_argument("--version",
                        action="version", version=version)

    return parser


def parse_argb(value: str) -> int:
    """Return the ARGB int for an aarrggbb or rrggbb hex string, rrggbb is
    opaque."""
    hex_str = value.strip().lstrip('#')
    if len(hex_str) == 6:
        hex_str = 'ff' + hex_str

    if len(hex_str) != 8 or not all(x in hexdigits for x in hex_str):
        raise ValueError('Invalid color "{}", expected aarrggbb or rrggbb hex'.format(value))

    return int(hex_str, 16)


class Command:

    """Run the demo app."""

    def __init__(self, args=None):
        args = build_parser().parse_args(args)

        # undo all of Kivy's built-in logging so we can do it our way
        os.environ['KIVY_NO_FILELOG'] = '1'
        os.environ['KIVY_NO_CONSOLELOG'] = '1'
        os.environ['KIVY_NO_ARGS'] = '1'

        logging.basicConfig(level=args.loglevel,
                            format='%(asctime)s : %(levelname)s : %(name)s : %(message)s',
                            filename=args.logfile,
                            filemode='w')
        self.log = logging.getLogger('TriangleViewDemo')

        # pylint: disable-msg=import-outside-toplevel
        from triangleview.core.direction import Direction
        from triangleview.core.utils import to_rgba

        if args.direction:
            directions = [Direction.from_attribute(args.direction)]
        else:
            directions = list(Direction)

        color = parse_argb(args.color)
        to_rgba(color)

        self.log.info("%s starting with directions %s and color %#010x", version,
                      ', '.join(x.name for x in directions), color)

        self.app = self._create_app(directions, color)

    @staticmethod
    def _create_app(directions, color):
        # pylint: disable-msg=import-outside-toplevel
        from kivy.app import App
        from kivy.uix.gridlayout import GridLayout
        from triangleview.widgets.triangle import TriangleView

        class TriangleDemoApp(App):

            title = version

            def build(self):
                layout = GridLayout(cols=min(len(directions), 2), padding=20, spacing=20)

                for direction in directions:
                    widget = TriangleView(config=dict(direction=direction, color=color))
                    # the widget keeps its outline on resize, the layout is
                    # the host here so it asks for a new one
                    widget.bind(size=lambda instance, size: instance.invalidate_geometry())
                    layout.add_widget(widget)

                return layout

        return TriangleDemoApp()

    def run(self):
        """Run the app until its window is closed."""
        try:
            self.app.run()
            self.log.info("Demo run loop ended.")
        except Exception as e:
            self.log.exception("Demo: An exception occurred - %s: %s", type(e).__name__, e)
            raise


def main(args=None):
    """Entry point of the triangleview-demo command."""
    try:
        command = Command(args)
    except ValueError as e:
        sys.exit("triangleview-demo: {}".format(e))

    command.run()


if __name__ == '__main__':
    main()
