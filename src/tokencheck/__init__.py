"""Design token accessibility validation.

WCAG 2.1 contrast math for hex colors: parsing, relative luminance, contrast
ratio, compliance tiers, and a bounded search for corrective colors. Token
palette loading and auditing build on top of that core.
"""

from .codec import Color, InvalidColorFormat, decode, encode, BLACK, WHITE  # noqa: F401
from .luminance import relative_luminance  # noqa: F401
from .contrast import (  # noqa: F401
    ComplianceReport,
    THRESHOLDS,
    contrast_ratio,
    classify,
    overall_rating,
    check_pair,
    required_ratio,
    meets,
    is_large_text,
    format_ratio,
)
from .suggestions import find_compliant_variants, suggest_for_pair  # noqa: F401
from .loader import load_tokens, DesignTokens, TokenValidationError  # noqa: F401
from .audit import validate_contrast, audit_pairs, AuditReport, PairResult  # noqa: F401
from .presets import PresetPair, PRESET_PAIRS, list_presets, get_preset  # noqa: F401
from .report import build_report, report_dict  # noqa: F401

__all__ = [
    "Color",
    "InvalidColorFormat",
    "decode",
    "encode",
    "BLACK",
    "WHITE",
    "relative_luminance",
    "ComplianceReport",
    "THRESHOLDS",
    "contrast_ratio",
    "classify",
    "overall_rating",
    "check_pair",
    "required_ratio",
    "meets",
    "is_large_text",
    "format_ratio",
    "find_compliant_variants",
    "suggest_for_pair",
    "load_tokens",
    "DesignTokens",
    "TokenValidationError",
    "validate_contrast",
    "audit_pairs",
    "AuditReport",
    "PairResult",
    "PresetPair",
    "PRESET_PAIRS",
    "list_presets",
    "get_preset",
    "build_report",
    "report_dict",
]
