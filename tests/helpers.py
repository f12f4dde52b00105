"""Image builders shared by the test modules."""

import numpy as np
from PIL import Image


def make_noise_image(width: int = 64, height: int = 48, seed: int = 7) -> Image.Image:
    """Deterministic random RGBA image with varying alpha."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


def make_square_image(size: int = 20, square: int = 4, colour=(255, 255, 255, 255)) -> Image.Image:
    """Transparent image with an opaque square centred in it."""
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    start = (size - square) // 2
    image.paste(Image.new("RGBA", (square, square), colour), (start, start))
    return image


def pixels(image: Image.Image) -> np.ndarray:
    """Pixel array of an image as int32, for arithmetic comparisons."""
    return np.asarray(image, dtype=np.int32)
