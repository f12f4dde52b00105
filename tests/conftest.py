"""
Pytest configuration and shared fixtures for Bitmap Transforms tests.

This module provides shared test images and colour fixtures used across
multiple test modules.
"""

import pytest
from PIL import Image

from helpers import make_noise_image


@pytest.fixture
def noise_image():
    """
    Provide a deterministic 64x48 RGBA noise image.

    Returns:
        PIL Image in RGBA mode
    """
    return make_noise_image()


@pytest.fixture
def opaque_image():
    """Provide a 100x100 opaque, solid green RGBA image."""
    return Image.new("RGBA", (100, 100), (10, 200, 30, 255))


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 128),  # Half-transparent gray
    ]
