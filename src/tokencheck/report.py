"""Plain-text and JSON-ready contrast reports for a single color pair."""

from __future__ import annotations

from typing import Any, Dict

from .contrast import THRESHOLDS, check_pair, format_ratio
from .luminance import ColorLike, as_color, relative_luminance
from .suggestions import suggest_for_pair

__all__ = ["build_report", "report_dict"]

_CRITERIA = (
    ("Normal Text AA", "normal_text_aa"),
    ("Normal Text AAA", "normal_text_aaa"),
    ("Large Text AA", "large_text_aa"),
    ("Large Text AAA", "large_text_aaa"),
    ("UI Components", "ui_components_aa"),
)


def _threshold_label(value: float) -> str:
    return f"{value:g}:1"


def build_report(foreground: ColorLike, background: ColorLike) -> str:
    fg = as_color(foreground)
    bg = as_color(background)
    report = check_pair(fg, bg)
    lines = [
        "WCAG Contrast Report",
        "=" * 40,
        "",
        "Colors:",
        f"  Foreground: {fg.hex} (L: {relative_luminance(fg):.4f})",
        f"  Background: {bg.hex} (L: {relative_luminance(bg):.4f})",
        "",
        f"Contrast Ratio: {format_ratio(report.ratio)}",
        "",
        "WCAG 2.1 Compliance:",
    ]
    for title, attr in _CRITERIA:
        status = "PASS" if getattr(report, attr) else "FAIL"
        lines.append(f"  {title} ({_threshold_label(THRESHOLDS[attr])}): {status}")
    lines.append("")
    lines.append(f"Overall Rating: {report.rating}")
    return "\n".join(lines) + "\n"


def report_dict(foreground: ColorLike, background: ColorLike) -> Dict[str, Any]:
    fg = as_color(foreground)
    bg = as_color(background)
    report = check_pair(fg, bg)
    suggestions = () if report.normal_text_aa else suggest_for_pair(fg, bg)
    return {
        "foreground": fg.hex,
        "background": bg.hex,
        "foreground_luminance": round(relative_luminance(fg), 4),
        "background_luminance": round(relative_luminance(bg), 4),
        "ratio": round(report.ratio, 2),
        "compliance": report.as_dict(),
        "suggestions": [c.hex for c in suggestions],
    }
