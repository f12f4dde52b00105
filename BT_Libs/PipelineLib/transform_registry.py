"""
Transformation Registry.

Maps the type names used in node graphs and parameter files ("Ellipse",
"Tint", ...) to transformation classes, so a host can rebuild a
transformation from a plain parameter dict and name an existing one.

Classes:
    TransformRegistry: Type name <-> transformation class map

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_transforms: Register all built-in transformations
"""

from typing import Any, Dict, List, Optional, Type
import logging

from BT_Libs.TransformLib.base import BitmapTransformation
from BT_Libs.TransformLib.errors import InvalidArgument

logger = logging.getLogger(__name__)


class TransformRegistry:
    """
    Registry of transformation classes by type name.

    Example:
        >>> registry = TransformRegistry()
        >>> registry.register("Tint", Tint)
        >>> tint = registry.build("Tint", {"mode": "MULTIPLY", "colour": 0xFF336699})
        >>> registry.type_of(tint)
        'Tint'
    """

    def __init__(self):
        self._transforms: Dict[str, Type[BitmapTransformation]] = {}

    def register(self, transform_type: str, transform_cls: Type[BitmapTransformation]) -> None:
        """
        Register a transformation class under a type name.

        Raises:
            ValueError: If transform_type is blank or the class is not a transformation
            RuntimeError: If transform_type is already taken
        """
        transform_type = str(transform_type).strip()

        if not transform_type:
            raise ValueError("transform_type cannot be empty")

        if not (isinstance(transform_cls, type) and issubclass(transform_cls, BitmapTransformation)):
            raise ValueError(f"Expected BitmapTransformation subclass, got {transform_cls!r}")

        if transform_type in self._transforms:
            raise RuntimeError(f"Transform type '{transform_type}' is already registered")

        self._transforms[transform_type] = transform_cls
        logger.debug(f"Registered transform type: {transform_type}")

    def get_transform_class(self, transform_type: str) -> Type[BitmapTransformation]:
        """
        Raises:
            InvalidArgument: If transform_type is not registered
        """
        transform_type = str(transform_type).strip()

        try:
            return self._transforms[transform_type]
        except KeyError:
            available = ", ".join(self.list_transform_types())
            raise InvalidArgument(
                f"Unknown transform type '{transform_type}' (known: {available})"
            ) from None

    def build(
        self,
        transform_type: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> BitmapTransformation:
        """
        Build a transformation from a parameter dictionary.

        Args:
            transform_type: Registered transformation type
            params: Field values, as produced by ``to_dict()``

        Returns:
            The immutable transformation

        Raises:
            InvalidArgument: If the type is unknown or an enum value is invalid
        """
        transform_cls = self.get_transform_class(transform_type)
        return transform_cls.from_dict(dict(params or {}))

    def type_of(self, transform: BitmapTransformation) -> str:
        """
        Registered type name of a transformation instance.

        Raises:
            InvalidArgument: If its class is not registered
        """
        for transform_type, transform_cls in self._transforms.items():
            if type(transform) is transform_cls:
                return transform_type
        raise InvalidArgument(f"Transform class not registered: {type(transform).__name__}")

    def list_transform_types(self) -> List[str]:
        return sorted(self._transforms)


# Global singleton registry
_default_registry: Optional[TransformRegistry] = None


def get_default_registry() -> TransformRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in
    transformations.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = TransformRegistry()
        register_default_transforms(_default_registry)

    return _default_registry


def register_default_transforms(registry: TransformRegistry) -> None:
    """Register the seven built-in transformations and the chain type."""
    from BT_Libs import constants
    from BT_Libs.PipelineLib.multi_transformation import MultiTransformation
    from BT_Libs.TransformLib import (
        Ellipse,
        Flip,
        GaussianBlur,
        Mosaic,
        Padding,
        Shadow,
        Tint,
    )

    registry.register(constants.TYPE_ELLIPSE, Ellipse)
    registry.register(constants.TYPE_FLIP, Flip)
    registry.register(constants.TYPE_GAUSSIAN_BLUR, GaussianBlur)
    registry.register(constants.TYPE_MOSAIC, Mosaic)
    registry.register(constants.TYPE_PADDING, Padding)
    registry.register(constants.TYPE_SHADOW, Shadow)
    registry.register(constants.TYPE_TINT, Tint)
    registry.register(constants.TYPE_CHAIN, MultiTransformation)

    logger.info(f"Registered {len(registry.list_transform_types())} default transforms")
