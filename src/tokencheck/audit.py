"""Palette contrast audit.

Validates foreground/background token pairs declared in a palette (or passed
explicitly) and attaches corrective suggestions to failing pairs.

Exports:
 - validate_contrast(tokens, pairs, threshold=4.5) -> list[str]
 - PairResult dataclass (label, paths, resolved colors, report, suggestions, error)
 - AuditReport dataclass (results, summary dict)
 - audit_pairs(tokens, pairs=None, target_ratio=4.5, on_invalid="error")

The `pairs` parameter uses tuples of (foreground_path, background_path, label)
where each path is dot-separated referencing color tokens (e.g. "text.primary").

Invalid colors are an engine error. Substituting black for them is a display
policy a caller can opt into with ``on_invalid="black"``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Tuple

from .codec import BLACK, Color, InvalidColorFormat, decode
from .contrast import ComplianceReport, classify, contrast_ratio
from .loader import DesignTokens
from .settings import DEFAULT_TARGET_RATIO
from .suggestions import suggest_for_pair

_log = logging.getLogger(__name__)

__all__ = [
    "validate_contrast",
    "PairResult",
    "AuditReport",
    "audit_pairs",
]

InvalidPolicy = Literal["error", "black"]


@dataclass(frozen=True)
class PairResult:
    label: str
    fg_path: str
    bg_path: str
    foreground: Color | None = None
    background: Color | None = None
    report: ComplianceReport | None = None
    passed: bool = False
    suggestions: Tuple[Color, ...] = ()
    error: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "foreground": self.foreground.hex if self.foreground else None,
            "background": self.background.hex if self.background else None,
            "fg_path": self.fg_path,
            "bg_path": self.bg_path,
            "passed": self.passed,
            "report": self.report.as_dict() if self.report else None,
            "suggestions": [c.hex for c in self.suggestions],
            "error": self.error,
        }


@dataclass(frozen=True)
class AuditReport:
    results: List[PairResult]
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def failing(self) -> List[PairResult]:
        return [r for r in self.results if r.error is None and not r.passed]

    @property
    def errors(self) -> List[PairResult]:
        return [r for r in self.results if r.error is not None]


def validate_contrast(
    tokens: DesignTokens, pairs: Iterable[Tuple[str, str, str]], threshold: float = 4.5
) -> List[str]:
    """Validate a collection of foreground/background token pairs.

    Parameters
    ----------
    tokens : DesignTokens
        Loaded tokens instance.
    pairs : Iterable[Tuple[str,str,str]]
        Each tuple is (foreground_token_path, background_token_path, label)
    threshold : float
        Minimum acceptable contrast ratio.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    failures: List[str] = []
    for fg_path, bg_path, label in pairs:
        try:
            fg = tokens.resolve(fg_path)
            bg = tokens.resolve(bg_path)
            ratio = contrast_ratio(fg, bg)
        except (KeyError, TypeError, InvalidColorFormat) as exc:
            failures.append(f"[resolve-error] {label}: {exc}")
            continue
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    return failures


def _resolve(tokens: DesignTokens, path: str, on_invalid: InvalidPolicy) -> Color:
    value = tokens.resolve(path)
    try:
        return decode(value)
    except InvalidColorFormat:
        if on_invalid == "black":
            _log.warning("invalid color %r at %s treated as black", value, path)
            return BLACK
        raise


def audit_pairs(
    tokens: DesignTokens,
    pairs: Iterable[Tuple[str, str, str]] | None = None,
    *,
    target_ratio: float = DEFAULT_TARGET_RATIO,
    on_invalid: InvalidPolicy = "error",
) -> AuditReport:
    if on_invalid not in ("error", "black"):
        raise ValueError(f"on_invalid must be 'error' or 'black', got {on_invalid!r}")
    pair_list = list(pairs) if pairs is not None else tokens.contrast_pairs()
    results: List[PairResult] = []
    for fg_path, bg_path, label in pair_list:
        try:
            fg = _resolve(tokens, fg_path, on_invalid)
            bg = _resolve(tokens, bg_path, on_invalid)
        except (KeyError, TypeError, InvalidColorFormat) as exc:
            _log.info("unresolvable pair %s: %s", label, exc)
            results.append(PairResult(label, fg_path, bg_path, error=str(exc)))
            continue
        report = classify(contrast_ratio(fg, bg))
        passed = report.ratio >= target_ratio
        suggestions = () if passed else suggest_for_pair(fg, bg, target_ratio)
        results.append(
            PairResult(
                label,
                fg_path,
                bg_path,
                foreground=fg,
                background=bg,
                report=report,
                passed=passed,
                suggestions=suggestions,
            )
        )
    total = len(results)
    errors = sum(1 for r in results if r.error is not None)
    failing = sum(1 for r in results if r.error is None and not r.passed)
    summary = {
        "total": total,
        "failing": failing,
        "errors": errors,
        "pass_rate": 0.0 if total == 0 else round((total - failing - errors) / total, 3),
        "target_ratio": target_ratio,
    }
    _log.debug("audit summary %s", summary)
    return AuditReport(results=results, summary=summary)
