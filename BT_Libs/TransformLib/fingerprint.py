"""
Canonical binary encoding of transformation parameters.

Every transformation writes its identifier followed by its fields, in a fixed
order, with fixed-width big-endian encodings. The resulting bytes are used as
the disk cache key and as the basis of equality and hashing, so the three can
never disagree.

Transformations narrow their fields with ``to_float32`` and ``to_int32`` when
constructed, so the stored values are exactly the values encoded here.

Example:
    >>> writer = FingerprintWriter("bt_libs.transforms.Padding")
    >>> writer.put_int(10).put_colour(0x80000000)
    >>> key = writer.to_bytes()
"""

import math
import struct
from typing import List

FLOAT32_MAX = 3.4028234663852886e38
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def to_float32(value: float) -> float:
    """Round a float to the nearest float32 (out-of-range values saturate to infinity)."""
    value = float(value)
    if not math.isnan(value) and abs(value) > FLOAT32_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack(">f", struct.pack(">f", value))[0]


def to_int32(value: int) -> int:
    """Clamp an int to the signed int32 range."""
    return max(INT32_MIN, min(INT32_MAX, int(value)))


class FingerprintWriter:
    """Accumulates the canonical byte encoding of one transformation."""

    def __init__(self, identifier: str):
        self._parts: List[bytes] = [identifier.encode("utf-8")]

    def put_float(self, value: float) -> "FingerprintWriter":
        """Append an IEEE-754 float32 (out-of-range values saturate to infinity)."""
        self._parts.append(struct.pack(">f", to_float32(value)))
        return self

    def put_int(self, value: int) -> "FingerprintWriter":
        """Append a signed int32, saturating at the int32 range."""
        self._parts.append(struct.pack(">i", to_int32(value)))
        return self

    def put_colour(self, colour: int) -> "FingerprintWriter":
        """Append a packed 0xAARRGGBB colour as uint32."""
        self._parts.append(struct.pack(">I", int(colour) & 0xFFFFFFFF))
        return self

    def put_bool(self, value: bool) -> "FingerprintWriter":
        """Append a boolean as a 2-byte 't' or 'f' character."""
        self._parts.append(struct.pack(">H", ord("t" if value else "f")))
        return self

    def put_bytes(self, data: bytes) -> "FingerprintWriter":
        """Append raw bytes (used when nesting fingerprints)."""
        self._parts.append(bytes(data))
        return self

    def to_bytes(self) -> bytes:
        return b"".join(self._parts)
