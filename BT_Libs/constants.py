"""
Constants and configuration values for Bitmap Transforms.

This module centralizes all constant values, magic numbers, and
default settings used throughout the transformations.
"""

# Colours (packed 0xAARRGGBB)
TRANSPARENT = 0x00000000
HALF_BLACK = 0x80000000
WHITE = 0xFFFFFFFF
COLOUR_MASK = 0xFFFFFFFF

# Blur limits
MAX_BLUR_RADIUS = 25.0
BLUR_SIGMA_SCALE = 0.4
BLUR_SIGMA_OFFSET = 0.6

# Ellipse mask rasterization
ELLIPSE_SUPERSAMPLE = 4
# Largest supersampled mask, in pixels (one byte each); bigger sources sample less
ELLIPSE_MASK_MAX_PIXELS = 16_000_000
# Distance between polygon vertices of a rotated ellipse, in mask pixels
ELLIPSE_VERTEX_SPACING = 2.0
ELLIPSE_MAX_VERTICES = 65536

# Mosaic sentinel for an axis that has not been set
UNSET_PIXELS = -1

# Pixel buffer mode
BUFFER_MODE = "RGBA"
PREMULTIPLIED_MODE = "RGBa"

# Fingerprint identifiers
ID_PREFIX = "bt_libs.transforms."
ID_ELLIPSE = ID_PREFIX + "Ellipse"
ID_FLIP = ID_PREFIX + "Flip"
ID_GAUSSIAN_BLUR = ID_PREFIX + "GaussianBlur"
ID_MOSAIC = ID_PREFIX + "Mosaic"
ID_PADDING = ID_PREFIX + "Padding"
ID_SHADOW = ID_PREFIX + "Shadow"
ID_TINT = ID_PREFIX + "Tint"
ID_MULTI = ID_PREFIX + "MultiTransformation"

# Registry type names
TYPE_ELLIPSE = "Ellipse"
TYPE_FLIP = "Flip"
TYPE_GAUSSIAN_BLUR = "Gaussian Blur"
TYPE_MOSAIC = "Mosaic"
TYPE_PADDING = "Padding"
TYPE_SHADOW = "Shadow"
TYPE_TINT = "Tint"
TYPE_CHAIN = "Chain"

# Node field names
FIELD_NODE_ID = "id"
FIELD_NODE_TYPE = "type"
FIELD_TRANSFORM_TYPE = "transform_type"
FIELD_PARAMS = "params"
NODE_TYPE_TRANSFORM = "Transform"
