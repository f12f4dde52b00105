"""
Chained Transformations.

MultiTransformation applies several transformations in order and is itself a
BitmapTransformation, so a chain can be cached, compared and nested like any
single filter. Its fingerprint is the concatenation of its members'
fingerprints, each prefixed with its length.

Example:
    >>> avatar = MultiTransformation.of(
    ...     Ellipse.builder().set_circle_size_fraction(0.9).build(),
    ...     Padding.uniform(12),
    ...     Shadow.builder().set_blur_radius(6).set_elevation(4).build(),
    ... )
    >>> result = avatar.transform(img)
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Tuple

from BT_Libs.constants import FIELD_PARAMS, FIELD_TRANSFORM_TYPE, ID_MULTI
from BT_Libs.TransformLib.base import BitmapTransformation, ensure_image
from BT_Libs.TransformLib.fingerprint import FingerprintWriter

logger = logging.getLogger(__name__)


def apply_transformations(image: Any, transforms: Iterable[BitmapTransformation]) -> Any:
    """
    Apply transformations one after another.

    Args:
        image: Source PIL Image (never modified)
        transforms: Transformations in application order

    Returns:
        New RGBA PIL Image
    """
    result = ensure_image(image)
    for index, transform in enumerate(transforms):
        logger.debug(f"Chain step {index}: {type(transform).__name__}")
        result = transform.transform(result)
    return result


@dataclass(frozen=True, eq=False)
class MultiTransformation(BitmapTransformation):
    """Ordered chain of transformations.

    Attributes:
        transforms: Transformations in application order
    """
    transforms: Tuple[BitmapTransformation, ...] = ()

    ID: ClassVar[str] = ID_MULTI

    def __post_init__(self):
        transforms = tuple(self.transforms)
        for transform in transforms:
            if not isinstance(transform, BitmapTransformation):
                raise TypeError(f"Expected BitmapTransformation, got {type(transform)}")
        object.__setattr__(self, "transforms", transforms)

    @classmethod
    def of(cls, *transforms: BitmapTransformation) -> "MultiTransformation":
        return cls(transforms)

    def transform(self, image: Any) -> Any:
        return apply_transformations(image, self.transforms)

    def write_fields(self, writer: FingerprintWriter) -> None:
        writer.put_int(len(self.transforms))
        for transform in self.transforms:
            member = transform.fingerprint()
            writer.put_int(len(member)).put_bytes(member)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, naming each member by its registered type."""
        from BT_Libs.PipelineLib.transform_registry import get_default_registry

        registry = get_default_registry()
        steps: List[Dict[str, Any]] = [
            {
                FIELD_TRANSFORM_TYPE: registry.type_of(transform),
                FIELD_PARAMS: transform.to_dict(),
            }
            for transform in self.transforms
        ]
        return {"transforms": steps}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MultiTransformation":
        from BT_Libs.PipelineLib.transform_registry import get_default_registry

        registry = get_default_registry()
        return cls(tuple(
            registry.build(step[FIELD_TRANSFORM_TYPE], step.get(FIELD_PARAMS, {}))
            for step in data.get("transforms", [])
        ))
