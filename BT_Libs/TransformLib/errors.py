"""Error types raised by the bitmap transformations."""


class InvalidArgument(ValueError):
    """An enumerated parameter (direction, mode, resource) is outside its defined set."""
