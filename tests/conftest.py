import json
from pathlib import Path

import pytest


@pytest.fixture
def write_tokens(tmp_path: Path):
    """Write a token mapping to a temporary JSON file and return its path."""

    def _write(data, name: str = "tokens.json") -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(data), encoding="utf-8")
        return p

    return _write


@pytest.fixture
def small_palette():
    return {
        "color": {
            "background": {"base": "#FFFFFF"},
            "text": {"primary": "#111111", "faint": "#DDDDDD"},
        },
        "contrastPairs": [
            {"foreground": "text.primary", "background": "background.base", "label": "Body"},
            {"foreground": "text.faint", "background": "background.base", "label": "Faint"},
        ],
    }
