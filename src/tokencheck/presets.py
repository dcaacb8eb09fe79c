"""Reference foreground/background pairs for quick checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

__all__ = ["PresetPair", "PRESET_PAIRS", "list_presets", "get_preset"]


@dataclass(frozen=True)
class PresetPair:
    name: str
    foreground: str
    background: str


PRESET_PAIRS: tuple[PresetPair, ...] = (
    PresetPair("Black on White", "#000000", "#FFFFFF"),
    PresetPair("White on Black", "#FFFFFF", "#000000"),
    PresetPair("Gray 800 on Gray 100", "#1F2937", "#F3F4F6"),
    PresetPair("Blue 500 on White", "#3B82F6", "#FFFFFF"),
    PresetPair("White on Blue 500", "#FFFFFF", "#3B82F6"),
    PresetPair("Red 500 on White", "#EF4444", "#FFFFFF"),
    PresetPair("Green 500 on White", "#22C55E", "#FFFFFF"),
    PresetPair("Indigo 500 on Indigo 50", "#6366F1", "#EEF2FF"),
)


def list_presets() -> List[PresetPair]:
    return list(PRESET_PAIRS)


def get_preset(name: str) -> PresetPair:
    for preset in PRESET_PAIRS:
        if preset.name == name:
            return preset
    raise KeyError(f"Unknown preset pair: {name}")
