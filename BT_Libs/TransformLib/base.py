"""
Bitmap Transformation Base Class.

Every filter is an immutable dataclass deriving from BitmapTransformation.
A transformation turns a source image into a new image of the same size and
describes itself with a canonical fingerprint that doubles as its cache key.
Equality and hashing are defined over that fingerprint.

Functions:
    transform: Apply a transformation to an image
    fingerprint: Canonical bytes of a transformation
    ensure_image: Validate and convert a pixel buffer to RGBA
    coerce_enum: Resolve an enum member from a member, name, or value
    round_half_up: Round to nearest, halves away from negative infinity
"""

import dataclasses
import hashlib
import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, Type, TypeVar

from BT_Libs.constants import BUFFER_MODE
from BT_Libs.TransformLib.errors import InvalidArgument
from BT_Libs.TransformLib.fingerprint import FingerprintWriter

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
T = TypeVar("T", bound="BitmapTransformation")


def ensure_image(image: Any) -> Any:
    """
    Validate a pixel buffer and return an RGBA copy of it.

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "convert") or not hasattr(image, "size"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    if image.mode == BUFFER_MODE:
        return image.copy()
    return image.convert(BUFFER_MODE)


def coerce_enum(enum_cls: Type[E], value: Any) -> E:
    """
    Resolve ``value`` to a member of ``enum_cls``.

    Accepts a member, a member name (case-insensitive) or an integer member
    value. Booleans, floats and other types are rejected.

    Raises:
        InvalidArgument: If value names no member of the enum
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    valid = ", ".join(member.name for member in enum_cls)
    raise InvalidArgument(f"Invalid {enum_cls.__name__}: {value!r}. Valid values: {valid}")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class BitmapTransformation(ABC):
    """
    Abstract base for all bitmap transformations.

    Subclasses are frozen dataclasses declared with ``eq=False`` so that the
    fingerprint-based ``__eq__`` and ``__hash__`` below stay in effect.

    Class Attributes:
        ID: Identifier written at the start of the fingerprint
        ENUM_FIELDS: Field name -> Enum class, for dict round-trips
    """

    ID: ClassVar[str] = ""
    ENUM_FIELDS: ClassVar[Dict[str, Type[Enum]]] = {}

    @abstractmethod
    def transform(self, image: Any) -> Any:
        """
        Apply the transformation.

        Args:
            image: Source PIL Image (never modified)

        Returns:
            New RGBA PIL Image of the same size
        """

    @abstractmethod
    def write_fields(self, writer: FingerprintWriter) -> None:
        """Write every configuration field to the fingerprint, in fixed order."""

    def fingerprint(self) -> bytes:
        writer = FingerprintWriter(self.ID)
        self.write_fields(writer)
        return writer.to_bytes()

    def update_disk_cache_key(self, digest: Any) -> None:
        """Feed the fingerprint into a hashlib-style digest."""
        digest.update(self.fingerprint())

    def cache_key(self) -> str:
        """SHA-256 hex digest of the fingerprint."""
        digest = hashlib.sha256()
        self.update_disk_cache_key(digest)
        return digest.hexdigest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmapTransformation):
            return NotImplemented
        return type(self) is type(other) and self.fingerprint() == other.fingerprint()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.fingerprint()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (enum fields are stored by name)."""
        data: Dict[str, Any] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            data[field.name] = value.name if isinstance(value, Enum) else value
        return data

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create from dictionary, ignoring unknown keys."""
        names = {field.name for field in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in names}
        for name, enum_cls in cls.ENUM_FIELDS.items():
            if name in filtered:
                filtered[name] = coerce_enum(enum_cls, filtered[name])
        return cls(**filtered)


def transform(image: Any, config: BitmapTransformation) -> Any:
    """Apply ``config`` to ``image`` and return the new image."""
    logger.debug(f"Applying {type(config).__name__} to {getattr(image, 'size', None)} image")
    return config.transform(image)


def fingerprint(config: BitmapTransformation) -> bytes:
    """Canonical fingerprint bytes of ``config``."""
    return config.fingerprint()
