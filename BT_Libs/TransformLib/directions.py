"""
Direction enumerations shared by the transformations.

Angles follow the screen convention used throughout the library:
0 degrees points east (due right) and angles grow counter-clockwise.
"""

from enum import IntEnum


class Compass(IntEnum):
    """Eight compass directions, in 45 degree steps counter-clockwise from east."""
    EAST = 0
    NORTHEAST = 1
    NORTH = 2
    NORTHWEST = 3
    WEST = 4
    SOUTHWEST = 5
    SOUTH = 6
    SOUTHEAST = 7

    @property
    def angle(self) -> float:
        """Angle in degrees (EAST = 0, NORTH = 90)."""
        return 45.0 * int(self)


class FlipDirection(IntEnum):
    """Axis (or axes) to mirror an image across."""
    HORIZONTAL = 0
    VERTICAL = 1
    BOTH = 2
