"""Design token loading utilities.

Responsibilities:
- Load a color token palette from JSON into a typed structure.
- Validate structure and every color leaf up front.
- Expose the palette's declared foreground/background pairs for auditing.

Usage:
    from tokencheck import load_tokens
    tokens = load_tokens()
    tokens.color("text", "primary")
"""

from __future__ import annotations

import json
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .codec import InvalidColorFormat, decode
from .settings import TOKEN_FILE_ENV

_log = logging.getLogger(__name__)

_TOKEN_FILE = Path(__file__).parent / "tokens.json"


class TokenValidationError(RuntimeError):
    """Raised when required token fields are missing or malformed."""


@dataclass
class DesignTokens:
    raw: Mapping[str, Any]

    def color(self, *path: str, default: str | None = None) -> str:
        node: Any = self.raw.get("color", {})
        for p in path:
            if not isinstance(node, Mapping) or p not in node:
                if default is not None:
                    return default
                raise KeyError(f"Missing color token path: {'.'.join(path)}")
            node = node[p]
        if not isinstance(node, str):
            raise TypeError(f"Color token at {'.'.join(path)} must be a string")
        return node

    def resolve(self, dotted: str) -> str:
        return self.color(*dotted.split("."))

    def flatten_colors(self) -> Dict[str, str]:
        """Flatten color leaves to ``{"group.key": "#RRGGBB"}``."""
        result: Dict[str, str] = {}

        def _walk(node: Any, prefix: str) -> None:
            for k, v in node.items():
                key = f"{prefix}.{k}" if prefix else k
                if isinstance(v, Mapping):
                    _walk(v, key)
                elif isinstance(v, str):
                    result[key] = v

        _walk(self.raw.get("color", {}), "")
        return result

    def contrast_pairs(self) -> List[Tuple[str, str, str]]:
        return [
            (entry["foreground"], entry["background"], entry["label"])
            for entry in self.raw.get("contrastPairs", [])
        ]


def load_tokens(path: str | Path | None = None) -> DesignTokens:
    """Load design tokens from JSON.

    Parameters
    ----------
    path: optional explicit path override. Falls back to the
        ``TOKENCHECK_TOKEN_FILE`` environment variable, then the packaged palette.
    """
    env_path = os.environ.get(TOKEN_FILE_ENV)
    token_path = Path(path) if path else Path(env_path) if env_path else _TOKEN_FILE
    if not token_path.exists():
        raise FileNotFoundError(f"Design token file not found: {token_path}")
    with token_path.open("r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as exc:
            raise TokenValidationError(f"Token file is not valid JSON: {token_path}: {exc}") from exc
    _validate_tokens(data)
    tokens = DesignTokens(raw=data)
    _log.debug(
        "loaded %d color tokens and %d pairs from %s",
        len(tokens.flatten_colors()),
        len(tokens.contrast_pairs()),
        token_path,
    )
    return tokens


def _validate_tokens(data: Mapping[str, Any]) -> None:
    if not isinstance(data, Mapping):
        raise TokenValidationError("Token file must contain a JSON object")
    if "color" not in data:
        raise TokenValidationError("Missing top-level token group: color")
    if not isinstance(data["color"], Mapping):
        raise TokenValidationError("color group must be a mapping")
    for key, value in DesignTokens(raw=data).flatten_colors().items():
        try:
            decode(value)
        except InvalidColorFormat as exc:
            raise TokenValidationError(f"color.{key}: {exc}") from exc
    pairs = data.get("contrastPairs", [])
    if not isinstance(pairs, list):
        raise TokenValidationError("contrastPairs must be a list")
    for i, entry in enumerate(pairs):
        if not isinstance(entry, Mapping) or not all(
            isinstance(entry.get(k), str) for k in ("foreground", "background", "label")
        ):
            raise TokenValidationError(
                f"contrastPairs[{i}] must have string foreground, background and label"
            )


__all__ = ["DesignTokens", "load_tokens", "TokenValidationError"]
