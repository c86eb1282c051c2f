"""Validation of the attributes a TriangleView is created with."""
import logging
from typing import Optional

from triangleview.core.direction import Direction
from triangleview.core.utils import to_rgba

DEFAULT_DIRECTION = Direction.left
DEFAULT_COLOR = 0xff757575

# host attribute names which are accepted for the config keys
ALIASES = {
    'tr_direction': 'direction',
    'tr_color': 'color',
}

log = logging.getLogger('TriangleViewConfig')


def process_config(config: Optional[dict] = None) -> dict:
    """Return a validated config dict with ``direction`` and ``color`` keys.

    Missing settings get their defaults, values are converted to a
    :class:`Direction` and a Kivy (r, g, b, a) list.

    Raises:
        ValueError: on unknown settings or invalid values.
    """
    settings = dict(direction=DEFAULT_DIRECTION, color=DEFAULT_COLOR)

    for key, value in (config or dict()).items():
        name = ALIASES.get(key, key)
        if name not in settings:
            raise ValueError('Invalid TriangleView setting "{}". Valid settings are: {}'.format(
                key, ', '.join(sorted(list(settings) + list(ALIASES)))))

        settings[name] = value

    processed = dict(direction=Direction.from_attribute(settings['direction']),
                     color=to_rgba(settings['color']))

    log.debug("Processed config %s -> %s", config, processed)

    return processed
