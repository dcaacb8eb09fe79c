"""Contrast check CLI.

Runs the WCAG contrast engine from the command line.

Subcommands:
 - check FG BG          ratio, compliance tiers and overall rating for a pair
 - suggest BASE         colors that reach a target ratio against BASE
 - audit                validate the contrast pairs declared in a token file
 - presets              evaluate the built-in reference pairs

Emits human-readable text or JSON (via `--json`). Exit code 0 when everything
passes, 1 when a pair fails (or no suggestion exists), 2 on invalid input.

Example:
  tokencheck check "#1f2937" "#f3f4f6" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from tokencheck import (
    InvalidColorFormat,
    TokenValidationError,
    audit_pairs,
    build_report,
    decode,
    find_compliant_variants,
    format_ratio,
    list_presets,
    load_tokens,
    report_dict,
    check_pair,
)
from tokencheck.matrix import passing_pairs
from tokencheck.settings import DEFAULT_TARGET_RATIO, LOG_LEVEL, SEARCH_STEP

EXIT_OK = 0
EXIT_FAIL = 1
EXIT_INVALID = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="tokencheck", description="WCAG 2.1 contrast checks")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    sub = p.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check a foreground/background pair")
    check.add_argument("foreground")
    check.add_argument("background")

    suggest = sub.add_parser("suggest", help="Suggest colors reaching a target ratio")
    suggest.add_argument("base", help="Reference color that stays fixed")
    suggest.add_argument("--target", type=float, default=DEFAULT_TARGET_RATIO)
    suggest.add_argument(
        "--adjust",
        choices=("foreground", "background"),
        default="foreground",
        help="Role the suggested color plays",
    )
    suggest.add_argument("--step", type=int, default=SEARCH_STEP, help="Search factor increment")

    audit = sub.add_parser("audit", help="Audit contrast pairs declared in a token file")
    audit.add_argument("--tokens", help="Token JSON file (defaults to the packaged palette)")
    audit.add_argument("--target", type=float, default=DEFAULT_TARGET_RATIO)
    audit.add_argument(
        "--matrix", action="store_true", help="Also list every palette pair reaching the target"
    )

    sub.add_parser("presets", help="Evaluate the built-in reference pairs")
    return p.parse_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def _run_check(args: argparse.Namespace) -> int:
    data = report_dict(args.foreground, args.background)
    if args.json:
        _emit(data)
    else:
        print(build_report(args.foreground, args.background), end="")
        if data["suggestions"]:
            print("\nSuggested foregrounds: " + ", ".join(data["suggestions"]))
    return EXIT_OK if data["compliance"]["normal_text_aa"] else EXIT_FAIL


def _run_suggest(args: argparse.Namespace) -> int:
    base = decode(args.base)
    found = find_compliant_variants(
        base, args.target, adjust_foreground=args.adjust == "foreground", step=args.step
    )
    if args.json:
        _emit(
            {
                "base": base.hex,
                "target": args.target,
                "adjust": args.adjust,
                "suggestions": [c.hex for c in found],
            }
        )
    elif found:
        print(f"Suggestions for {base.hex} (target {args.target}:1, adjust {args.adjust}):")
        for color in found:
            print(f"  {color.hex}")
    else:
        print(f"No color reaches {args.target}:1 against {base.hex}")
    return EXIT_OK if found else EXIT_FAIL


def _run_audit(args: argparse.Namespace) -> int:
    tokens = load_tokens(args.tokens)
    report = audit_pairs(tokens, target_ratio=args.target)
    payload: Dict[str, Any] = {
        "summary": report.summary,
        "pairs": [r.as_dict() for r in report.results],
    }
    if args.matrix:
        payload["matrix"] = [
            {"a": a, "b": b, "ratio": round(ratio, 2)}
            for a, b, ratio in passing_pairs(tokens.flatten_colors(), args.target)
        ]
    if args.json:
        _emit(payload)
    else:
        print(f"Contrast audit (target {args.target}:1):")
        for r in report.results:
            if r.error is not None:
                print(f"  [error] {r.label}: {r.error}")
                continue
            status = "PASS" if r.passed else "FAIL"
            line = f"  [{status}] {r.label}: {format_ratio(r.report.ratio)} ({r.report.rating})"
            if r.suggestions:
                line += " -> try " + ", ".join(c.hex for c in r.suggestions)
            print(line)
        for entry in payload.get("matrix", []):
            print(f"  [usable] {entry['a']} / {entry['b']}: {entry['ratio']:.2f}:1")
        s = report.summary
        print(
            f"  total={s['total']} failing={s['failing']} "
            f"errors={s['errors']} pass_rate={s['pass_rate']}"
        )
    return EXIT_OK if not (report.failing or report.errors) else EXIT_FAIL


def _run_presets(args: argparse.Namespace) -> int:
    rows = []
    for preset in list_presets():
        report = check_pair(preset.foreground, preset.background)
        rows.append(
            {
                "name": preset.name,
                "foreground": preset.foreground,
                "background": preset.background,
                "ratio": round(report.ratio, 2),
                "rating": report.rating,
            }
        )
    if args.json:
        _emit({"presets": rows})
    else:
        for row in rows:
            print(f"  {row['name']}: {row['ratio']:.2f}:1 {row['rating']}")
    return EXIT_OK


_COMMANDS = {
    "check": _run_check,
    "suggest": _run_suggest,
    "audit": _run_audit,
    "presets": _run_presets,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.log_level)
    try:
        return _COMMANDS[args.command](args)
    except InvalidColorFormat as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except (FileNotFoundError, TokenValidationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
