"""
Transform Node for Bitmap Transforms Pipelines.

Wraps the bitmap transformations for use in node-dict pipelines. A node
names a registered transformation type and carries its parameters; executing
the node builds the immutable transformation and applies it to the input
image.

Example:
    Creating a transform node:

    >>> from PIL import Image
    >>> from BT_Libs.NodesLib.transform_node import create_transform_node
    >>>
    >>> node = create_transform_node(
    ...     "mosaic-1",
    ...     "Mosaic",
    ...     factor=8,
    ... )
    >>> image = Image.open("photo.png")
    >>> result = execute_transform_node(node, [image])
"""

from typing import Any, Dict, List

from BT_Libs.constants import (
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    FIELD_PARAMS,
    FIELD_TRANSFORM_TYPE,
    NODE_TYPE_TRANSFORM,
)
from BT_Libs.PipelineLib.transform_registry import get_default_registry
from BT_Libs.TransformLib.base import BitmapTransformation
from BT_Libs.TransformLib.errors import InvalidArgument


def build_node_transform(node: Dict[str, Any]) -> BitmapTransformation:
    """
    Build the transformation described by a node dict.

    Raises:
        InvalidArgument: If the transform type is unknown or a parameter is invalid
    """
    transform_type = node.get(FIELD_TRANSFORM_TYPE, "")
    params = node.get(FIELD_PARAMS, {})
    return get_default_registry().build(transform_type, params)


def execute_transform_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Execute transform node in pipeline.

    Node dict should contain:
        - 'transform_type': Registered transform type (e.g., 'Ellipse', 'Tint')
        - 'params': Transformation parameters (see each class's fields)

    Inputs:
        - [0]: Image to transform (PIL Image)

    Returns:
        Transformed PIL Image (RGBA)

    Raises:
        ValueError: If no input is given
        InvalidArgument: If the transform type or an enum parameter is invalid
        TypeError: If input is not a PIL Image
    """
    if not inputs or len(inputs) < 1:
        raise ValueError("TransformNode requires image input")

    image = inputs[0]
    node_id = node.get(FIELD_NODE_ID, "?")

    try:
        transform = build_node_transform(node)
        return transform.transform(image)
    except TypeError as e:
        raise TypeError(f"Transform node '{node_id}' error: {str(e)}") from e
    except ValueError as e:
        raise InvalidArgument(f"Transform node '{node_id}' error: {str(e)}") from e


def create_transform_node(
    node_id: str,
    transform_type: str,
    **params: Any,
) -> Dict[str, Any]:
    """
    Create transform node for graph.

    Args:
        node_id: Unique node identifier
        transform_type: Registered transform type
        **params: Transformation parameters

    Returns:
        Node dict for graph

    Parameters by Type:

        **Ellipse:** x_diameter, y_diameter, angle, is_fraction, is_circle, colour
        **Flip:** direction ('HORIZONTAL', 'VERTICAL', 'BOTH')
        **Gaussian Blur:** radius
        **Mosaic:** x_pixels, y_pixels, factor
        **Padding:** left, right, top, bottom, colour
        **Shadow:** blur_radius, elevation, angle, colour
        **Tint:** mode (BlendMode name), colour

    Examples:
        >>> node1 = create_transform_node("flip-1", "Flip", direction="BOTH")
        >>> node2 = create_transform_node("tint-1", "Tint", mode="MULTIPLY", colour=0xFF704214)
    """
    return {
        FIELD_NODE_ID: node_id,
        FIELD_NODE_TYPE: NODE_TYPE_TRANSFORM,
        FIELD_TRANSFORM_TYPE: transform_type,
        FIELD_PARAMS: dict(params),
    }


def node_from_transform(node_id: str, transform: BitmapTransformation) -> Dict[str, Any]:
    """Create a node dict that rebuilds an existing transformation."""
    transform_type = get_default_registry().type_of(transform)
    return create_transform_node(node_id, transform_type, **transform.to_dict())
