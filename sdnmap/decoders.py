"""Decoders for the textual payloads sent by the SDN controller."""

from __future__ import annotations

import math
import re
import struct

__all__ = [
    "decode_path",
    "decode_paths",
    "decode_islands",
    "decode_metric",
    "decode_pair_transition",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FLOAT32_MAX = 3.4028234663852886e38

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|nan)",
    re.IGNORECASE,
)


def _to_int(text: str) -> int:
    """Parse a 32-bit decimal integer; anything unparsable yields 0."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _to_double(text: str) -> float:
    """Parse a floating point number; anything unparsable yields 0.0."""
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    value = float(stripped)
    if math.isinf(value) and "inf" not in stripped.lower():
        return 0.0
    return value


def _to_float32(value: float) -> float:
    """Round a double to single precision."""
    if math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def _decode_int_list(text: str) -> list[int]:
    return [_to_int(item) for item in text.split(",")]


def decode_path(text: str) -> list[int]:
    """Decode a path such as ``1,2,3,6,5,4`` into switch numbers."""
    return _decode_int_list(text)


def decode_paths(text: str) -> list[list[int]]:
    """Decode paths such as ``1,2,3;6,5,4;9,11,16``."""
    return [_decode_int_list(part) for part in text.split(";")]


def decode_islands(text: str) -> list[list[int]]:
    """Decode islands such as ``1,2,3;4,5,6;7,8``."""
    return [_decode_int_list(part) for part in text.split(";")]


def decode_metric(text: str) -> list[float]:
    """Decode comma separated metric values as single precision numbers."""
    return [_to_float32(_to_double(item)) for item in text.split(",")]


def decode_pair_transition(text: str) -> float:
    """Decode a single pair transition value."""
    return _to_double(text)