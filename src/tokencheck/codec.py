"""Hex color parsing and formatting.

Only the 6-digit ``#RRGGBB`` form is recognised (the leading ``#`` is
optional). Shorthand ``#RGB`` input is rejected rather than expanded.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "Color",
    "InvalidColorFormat",
    "decode",
    "encode",
    "BLACK",
    "WHITE",
]

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

_HEX_ERR = "Color must be a #RRGGBB hex string: {value!r}"


class InvalidColorFormat(ValueError):
    """Raised when a value cannot be parsed as a 6-digit hex color."""


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidColorFormat(f"Channel {name} must be an int in 0..255, got {value!r}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        return decode(value)

    def __str__(self) -> str:
        return self.hex


def decode(value: str) -> Color:
    """Parse ``#RRGGBB`` / ``RRGGBB`` (case-insensitive) into a Color.

    Raises InvalidColorFormat on anything else.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(_HEX_ERR.format(value=value))
    match = HEX_PATTERN.match(value)
    if match is None:
        raise InvalidColorFormat(_HEX_ERR.format(value=value))
    r, g, b = (int(group, 16) for group in match.groups())
    return Color(r, g, b)


def _clamp_channel(value: float) -> int:
    # Ties round up
    return int(math.floor(min(255.0, max(0.0, value)) + 0.5))


def encode(r: float, g: float, b: float) -> str:
    """Format channels as uppercase ``#RRGGBB``.

    Channels are clamped to 0..255 and rounded, so interpolated values
    outside the byte range are safe to pass.
    """
    return "#{:02X}{:02X}{:02X}".format(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
