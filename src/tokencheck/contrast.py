"""Contrast utilities for validating design token accessibility.

Implements WCAG 2.1 contrast ratio calculations and compliance tiers.

Public API:
- contrast_ratio(a, b) -> float
- classify(ratio) -> ComplianceReport
- check_pair(foreground, background) -> ComplianceReport
- meets(ratio, level="AA", text_size="normal") -> bool

Colors may be given as `Color` instances or `#RRGGBB` strings; strings that do
not parse raise `InvalidColorFormat`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Mapping

from .luminance import ColorLike, relative_luminance

__all__ = [
    "THRESHOLDS",
    "ComplianceReport",
    "contrast_ratio",
    "classify",
    "overall_rating",
    "check_pair",
    "required_ratio",
    "meets",
    "is_large_text",
    "format_ratio",
]

WcagLevel = Literal["AA", "AAA"]
TextSize = Literal["normal", "large"]

# Inclusive minimum ratios per WCAG 2.1 tier
THRESHOLDS: Mapping[str, float] = {
    "normal_text_aa": 4.5,
    "normal_text_aaa": 7.0,
    "large_text_aa": 3.0,
    "large_text_aaa": 4.5,
    "ui_components_aa": 3.0,
}

_LEVEL_TIERS: Mapping[tuple[str, str], str] = {
    ("AA", "normal"): "normal_text_aa",
    ("AAA", "normal"): "normal_text_aaa",
    ("AA", "large"): "large_text_aa",
    ("AAA", "large"): "large_text_aaa",
}

# Large text per WCAG: 18pt (24px) or 14pt (~18.66px) bold
LARGE_TEXT_PX = 24.0
LARGE_BOLD_TEXT_PX = 18.66
BOLD_WEIGHT = 700
_LEADING_INT = re.compile(r"\s*(\d+)")


@dataclass(frozen=True)
class ComplianceReport:
    ratio: float
    normal_text_aa: bool
    normal_text_aaa: bool
    large_text_aa: bool
    large_text_aaa: bool
    ui_components_aa: bool

    @property
    def rating(self) -> str:
        return overall_rating(self)

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["rating"] = self.rating
        return data


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def classify(ratio: float) -> ComplianceReport:
    return ComplianceReport(
        ratio=ratio,
        normal_text_aa=ratio >= THRESHOLDS["normal_text_aa"],
        normal_text_aaa=ratio >= THRESHOLDS["normal_text_aaa"],
        large_text_aa=ratio >= THRESHOLDS["large_text_aa"],
        large_text_aaa=ratio >= THRESHOLDS["large_text_aaa"],
        ui_components_aa=ratio >= THRESHOLDS["ui_components_aa"],
    )


def overall_rating(report: ComplianceReport) -> str:
    """Collapse a report into a single label.

    Priority is fixed: AAA, then AA, then "AA Large", else "Fail".
    """
    if report.normal_text_aaa:
        return "AAA"
    if report.normal_text_aa:
        return "AA"
    if report.large_text_aa:
        return "AA Large"
    return "Fail"


def check_pair(foreground: ColorLike, background: ColorLike) -> ComplianceReport:
    return classify(contrast_ratio(foreground, background))


def required_ratio(level: WcagLevel = "AA", text_size: TextSize = "normal") -> float:
    tier = _LEVEL_TIERS.get((level, text_size))
    if tier is None:
        raise ValueError(f"Unknown WCAG level/text size combination: {level}/{text_size}")
    return THRESHOLDS[tier]


def meets(ratio: float, level: WcagLevel = "AA", text_size: TextSize = "normal") -> bool:
    return ratio >= required_ratio(level, text_size)


def is_large_text(font_size_px: float, font_weight: int | str = 400) -> bool:
    """Return True when text qualifies as "large" under WCAG.

    String weights (e.g. from CSS) use their leading digits ("700px" is 700),
    falling back to 400 when there are none.
    """
    if isinstance(font_weight, str):
        match = _LEADING_INT.match(font_weight)
        weight = int(match.group(1)) if match else 400
    else:
        weight = font_weight
    if font_size_px >= LARGE_TEXT_PX:
        return True
    return font_size_px >= LARGE_BOLD_TEXT_PX and weight >= BOLD_WEIGHT


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"
