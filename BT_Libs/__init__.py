"""
BT_Libs - Bitmap Transforms Library Modules

This package contains image post-processing filters that plug into an
image loading pipeline, organized into specialized sub-packages:

- TransformLib: The seven bitmap transformations and their shared core
- PipelineLib: Transformation registry and chained transformations
- NodesLib: Node-graph adapters for running transformations in pipelines
"""

__version__ = "0.1.0"
