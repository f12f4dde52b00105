"""
PipelineLib - Transformation dispatch

This module handles how transformations are looked up by name and chained,
the parts a host image pipeline needs to drive them.
"""

from BT_Libs.PipelineLib.transform_registry import (
    TransformRegistry,
    get_default_registry,
    register_default_transforms,
)
from BT_Libs.PipelineLib.multi_transformation import (
    MultiTransformation,
    apply_transformations,
)

__all__ = [
    "TransformRegistry",
    "get_default_registry",
    "register_default_transforms",
    "MultiTransformation",
    "apply_transformations",
]
