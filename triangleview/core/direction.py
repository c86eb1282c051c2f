"""Triangle directions."""
from enum import Enum, unique


@unique
class Direction(Enum):
    """Enumerated class containing the directions a triangle can point to."""
    left = 0    # Base on the right edge, apex on the left edge
    up = 1      # Base on the bottom edge, apex on the top edge
    right = 2   # Base on the left edge, apex on the right edge
    down = 3    # Base on the top edge, apex on the bottom edge

    @classmethod
    def from_attribute(cls, value) -> "Direction":
        """Return the direction for a host supplied attribute value.

        Integers outside of the known range fall through to ``down``, strings
        are matched against the member names (case insensitive).
        """
        if isinstance(value, Direction):
            return value

        # bool is an int subclass but never a meaningful direction
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                return cls.down

        if isinstance(value, str):
            try:
                return cls[value.strip().lower()]
            except KeyError:
                raise ValueError('Invalid direction "{}". Valid directions are: {}'.format(
                    value, ', '.join(x.name for x in cls))) from None

        raise ValueError('Invalid direction "{}" of type {}'.format(value, type(value).__name__))
