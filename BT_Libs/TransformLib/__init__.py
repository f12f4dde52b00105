"""
TransformLib - Bitmap transformations

This module provides the seven bitmap transformations, the abstract
transformation interface they share, and the colour, compositing and
fingerprint helpers they are built on.
"""

from BT_Libs.TransformLib.errors import InvalidArgument
from BT_Libs.TransformLib.base import BitmapTransformation, transform, fingerprint
from BT_Libs.TransformLib.colours import (
    RgbaColour,
    ColourResources,
    MappingColourResources,
    argb,
    to_rgba,
    from_rgba,
    normalize_colour,
)
from BT_Libs.TransformLib.compositing import BlendMode
from BT_Libs.TransformLib.directions import Compass, FlipDirection
from BT_Libs.TransformLib.ellipse import Ellipse, EllipseBuilder
from BT_Libs.TransformLib.flip import Flip
from BT_Libs.TransformLib.gaussian_blur import GaussianBlur
from BT_Libs.TransformLib.mosaic import Mosaic, MosaicBuilder
from BT_Libs.TransformLib.padding import Padding, PaddingBuilder
from BT_Libs.TransformLib.shadow import Shadow, ShadowBuilder
from BT_Libs.TransformLib.tint import Tint, TintBuilder

__all__ = [
    "InvalidArgument",
    "BitmapTransformation",
    "transform",
    "fingerprint",
    "RgbaColour",
    "ColourResources",
    "MappingColourResources",
    "argb",
    "to_rgba",
    "from_rgba",
    "normalize_colour",
    "BlendMode",
    "Compass",
    "FlipDirection",
    "Ellipse",
    "EllipseBuilder",
    "Flip",
    "GaussianBlur",
    "Mosaic",
    "MosaicBuilder",
    "Padding",
    "PaddingBuilder",
    "Shadow",
    "ShadowBuilder",
    "Tint",
    "TintBuilder",
]
