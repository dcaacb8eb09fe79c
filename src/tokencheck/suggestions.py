"""Suggestion search for colors that reach a target contrast ratio.

Given a fixed reference color, sweep it toward white and toward black and keep
the first candidate in each direction that reaches the target. Pure black and
pure white are then checked directly. The sweep is coarse on purpose: factors
advance by `SEARCH_STEP`, and each pass stops at its first hit, so results are
the first passing color at that granularity rather than the closest possible.

Result order is: lightened, darkened, black, white (minus failures and
duplicates), truncated to `MAX_SUGGESTIONS`.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from .codec import BLACK, WHITE, Color, decode, encode
from .contrast import contrast_ratio
from .luminance import ColorLike, as_color
from .settings import (
    CHANNEL_STEP,
    DEFAULT_TARGET_RATIO,
    MAX_SUGGESTIONS,
    SEARCH_MAX_FACTOR,
    SEARCH_STEP,
)

_log = logging.getLogger(__name__)

__all__ = ["find_compliant_variants", "suggest_for_pair"]

SuggestionSet = Tuple[Color, ...]


def _pair_ratio(base: Color, candidate: Color, adjust_foreground: bool) -> float:
    if adjust_foreground:
        return contrast_ratio(candidate, base)
    return contrast_ratio(base, candidate)


def _sweep(
    base: Color,
    target_ratio: float,
    adjust_foreground: bool,
    step: int,
    shift: Callable[[int, float], float],
) -> Color | None:
    for factor in range(1, SEARCH_MAX_FACTOR + 1, step):
        delta = factor * CHANNEL_STEP
        candidate = decode(encode(shift(base.r, delta), shift(base.g, delta), shift(base.b, delta)))
        if _pair_ratio(base, candidate, adjust_foreground) >= target_ratio:
            _log.debug("sweep hit base=%s factor=%d candidate=%s", base.hex, factor, candidate.hex)
            return candidate
    return None


def find_compliant_variants(
    base: ColorLike,
    target_ratio: float,
    adjust_foreground: bool = True,
    *,
    step: int = SEARCH_STEP,
) -> SuggestionSet:
    """Return up to four colors that reach `target_ratio` against `base`.

    Parameters
    ----------
    base : Color | str
        Reference color that stays fixed.
    target_ratio : float
        Minimum contrast ratio each suggestion must reach.
    adjust_foreground : bool
        When True candidates play the foreground role (``(candidate, base)``),
        otherwise the background role (``(base, candidate)``).
    step : int
        Factor increment for both sweeps; smaller values give finer results.

    Returns
    -------
    tuple[Color, ...]
        Possibly empty; callers must handle the no-suggestion case.
    """
    if step < 1:
        raise ValueError("step must be >= 1")
    base_color = as_color(base)
    found: List[Color] = []

    lightened = _sweep(base_color, target_ratio, adjust_foreground, step, lambda c, d: c + d)
    if lightened is not None and lightened not in found:
        found.append(lightened)
    darkened = _sweep(base_color, target_ratio, adjust_foreground, step, lambda c, d: c - d)
    if darkened is not None and darkened not in found:
        found.append(darkened)

    for extreme in (BLACK, WHITE):
        if _pair_ratio(base_color, extreme, adjust_foreground) >= target_ratio and extreme not in found:
            found.append(extreme)

    result = tuple(found[:MAX_SUGGESTIONS])
    if not result:
        _log.info("no suggestions for base=%s target=%.2f", base_color.hex, target_ratio)
    return result


def suggest_for_pair(
    foreground: ColorLike,
    background: ColorLike,
    target_ratio: float = DEFAULT_TARGET_RATIO,
) -> SuggestionSet:
    """Suggest replacement foregrounds for a pair that misses `target_ratio`.

    Returns an empty tuple when the pair already passes.
    """
    if contrast_ratio(foreground, background) >= target_ratio:
        return ()
    return find_compliant_variants(background, target_ratio, adjust_foreground=True)
