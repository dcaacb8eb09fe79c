"""WCAG 2.1 relative luminance.

The transfer-function constants below are the published WCAG 2.1 values and
are intentionally not configurable.
"""

from __future__ import annotations

from typing import Tuple, Union

from .codec import Color, decode

__all__ = [
    "SRGB_LINEAR_BREAKPOINT",
    "SRGB_LINEAR_DIVISOR",
    "SRGB_GAMMA_OFFSET",
    "SRGB_GAMMA_SCALE",
    "SRGB_GAMMA_EXPONENT",
    "LUMINANCE_WEIGHTS",
    "ColorLike",
    "as_color",
    "linear_channel",
    "relative_luminance",
]

SRGB_LINEAR_BREAKPOINT = 0.03928
SRGB_LINEAR_DIVISOR = 12.92
SRGB_GAMMA_OFFSET = 0.055
SRGB_GAMMA_SCALE = 1.055
SRGB_GAMMA_EXPONENT = 2.4
# Rec. 709 coefficients used by WCAG
LUMINANCE_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

ColorLike = Union[Color, str]


def as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return decode(value)


def linear_channel(channel: int) -> float:
    c = channel / 255.0
    if c <= SRGB_LINEAR_BREAKPOINT:
        return c / SRGB_LINEAR_DIVISOR
    return ((c + SRGB_GAMMA_OFFSET) / SRGB_GAMMA_SCALE) ** SRGB_GAMMA_EXPONENT


def relative_luminance(color: ColorLike) -> float:
    c = as_color(color)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * linear_channel(c.r) + wg * linear_channel(c.g) + wb * linear_channel(c.b)
