"""
Colour values and colour resource lookup for Bitmap Transforms.

Colours are packed 32-bit ARGB integers (0xAARRGGBB), the same layout the
host image pipeline hands around. Builders accept either a packed value or a
colour resource id resolved through a ColourResources collaborator owned by
the host application.

Type Aliases:
    RgbaColour: A tuple of 4 integers representing RGBA color values (0-255)
"""

from typing import Any, Mapping, Optional, Protocol, Tuple

from BT_Libs.constants import COLOUR_MASK
from BT_Libs.TransformLib.errors import InvalidArgument

RgbaColour = Tuple[int, int, int, int]


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack four 0-255 channels into a 0xAARRGGBB colour."""
    channels = [max(0, min(255, int(c))) for c in (alpha, red, green, blue)]
    return (channels[0] << 24) | (channels[1] << 16) | (channels[2] << 8) | channels[3]


def to_rgba(colour: int) -> RgbaColour:
    """Unpack a 0xAARRGGBB colour into an (R, G, B, A) tuple."""
    colour &= COLOUR_MASK
    return (
        (colour >> 16) & 0xFF,
        (colour >> 8) & 0xFF,
        colour & 0xFF,
        (colour >> 24) & 0xFF,
    )


def from_rgba(rgba: Tuple[int, ...]) -> int:
    """Pack an (R, G, B) or (R, G, B, A) tuple into a 0xAARRGGBB colour."""
    if len(rgba) == 3:
        red, green, blue = rgba
        alpha = 255
    elif len(rgba) == 4:
        red, green, blue, alpha = rgba
    else:
        raise InvalidArgument(f"Colour tuple must have 3 or 4 channels, got {len(rgba)}")
    return argb(alpha, red, green, blue)


def normalize_colour(value: Any) -> int:
    """
    Coerce a colour value to an unsigned 0xAARRGGBB integer.

    Args:
        value: Packed int (signed 32-bit values are accepted) or RGB/RGBA tuple

    Returns:
        Unsigned packed colour

    Raises:
        InvalidArgument: If the value is not a colour
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid colour: {value!r}")
    if isinstance(value, int):
        return value & COLOUR_MASK
    if isinstance(value, (tuple, list)):
        return from_rgba(tuple(value))
    raise InvalidArgument(f"Invalid colour: {value!r}")


class ColourResources(Protocol):
    """Resource lookup collaborator that resolves colour resource ids."""

    def get_colour(self, res_id: int) -> int:
        ...


class MappingColourResources:
    """ColourResources backed by a plain ``{res_id: colour}`` mapping."""

    def __init__(self, colours: Mapping[int, Any]):
        self._colours = dict(colours)

    def get_colour(self, res_id: int) -> int:
        try:
            return normalize_colour(self._colours[res_id])
        except KeyError:
            raise InvalidArgument(f"Unknown colour resource: {res_id}") from None


def resolve_colour_res(
    res_id: int,
    resources: Optional[ColourResources],
) -> int:
    """
    Resolve a colour resource id through the given collaborator.

    Raises:
        InvalidArgument: If no collaborator is available or the id is unknown
    """
    if resources is None:
        raise InvalidArgument(
            f"Cannot resolve colour resource {res_id}: no colour resources given"
        )
    return normalize_colour(resources.get_colour(res_id))
