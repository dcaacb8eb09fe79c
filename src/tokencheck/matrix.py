"""Pairwise contrast for a whole palette.

Vectorised form of the WCAG luminance and contrast formulas, using the same
constants as `tokencheck.luminance`. Useful for finding every usable
foreground/background combination in a token palette at once.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

import numpy as np

from .luminance import (
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA_EXPONENT,
    SRGB_GAMMA_OFFSET,
    SRGB_GAMMA_SCALE,
    SRGB_LINEAR_BREAKPOINT,
    SRGB_LINEAR_DIVISOR,
    ColorLike,
    as_color,
)

__all__ = ["luminance_vector", "contrast_matrix", "passing_pairs"]


def luminance_vector(colors: Sequence[ColorLike]) -> np.ndarray:
    """Return relative luminance for each color as a 1-D float array."""
    rgb = np.array([as_color(c).rgb for c in colors], dtype=float).reshape(-1, 3) / 255.0
    linear = np.where(
        rgb <= SRGB_LINEAR_BREAKPOINT,
        rgb / SRGB_LINEAR_DIVISOR,
        ((rgb + SRGB_GAMMA_OFFSET) / SRGB_GAMMA_SCALE) ** SRGB_GAMMA_EXPONENT,
    )
    return linear @ np.array(LUMINANCE_WEIGHTS)


def contrast_matrix(colors: Sequence[ColorLike]) -> np.ndarray:
    """N x N symmetric matrix of contrast ratios (diagonal is 1.0)."""
    lum = luminance_vector(colors)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)


def passing_pairs(
    named_colors: Mapping[str, ColorLike], threshold: float
) -> List[Tuple[str, str, float]]:
    """Unordered name pairs whose ratio reaches `threshold`.

    Sorted by ratio descending, then by names.
    """
    names = list(named_colors.keys())
    if len(names) < 2:
        return []
    ratios = contrast_matrix([named_colors[n] for n in names])
    rows, cols = np.triu_indices(len(names), k=1)
    hits = [
        (names[i], names[j], float(ratios[i, j]))
        for i, j in zip(rows, cols)
        if ratios[i, j] >= threshold
    ]
    hits.sort(key=lambda t: (-t[2], t[0], t[1]))
    return hits
