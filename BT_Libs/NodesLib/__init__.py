"""
Bitmap Transforms Nodes Library.

This module contains the node adapter that runs bitmap transformations
inside node-dict pipelines.

Modules:
    transform_node: Transform node that builds and applies a registered transformation
"""

from BT_Libs.NodesLib.transform_node import (
    build_node_transform,
    execute_transform_node,
    create_transform_node,
    node_from_transform,
)

__all__ = [
    "build_node_transform",
    "execute_transform_node",
    "create_transform_node",
    "node_from_transform",
]
