"""Tests for the contrast check CLI."""

from __future__ import annotations

import json

from cli import contrast_check


def test_check_json_pass(capsys):
    code = contrast_check.main(["--json", "check", "#1f2937", "#f3f4f6"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["compliance"]["rating"] == "AAA"
    assert payload["suggestions"] == []


def test_check_text_fail_lists_suggestions(capsys):
    code = contrast_check.main(["check", "#ffffff", "#3b82f6"])
    out = capsys.readouterr().out
    assert code == 1
    assert "Overall Rating: AA Large" in out
    assert "Suggested foregrounds:" in out


def test_invalid_color_exit_code(capsys):
    code = contrast_check.main(["check", "#12345", "#ffffff"])
    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_suggest_json(capsys):
    code = contrast_check.main(["--json", "suggest", "#3b82f6", "--target", "4.5"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["base"] == "#3B82F6"
    assert payload["suggestions"][-1] == "#000000"


def test_suggest_none_found(capsys):
    code = contrast_check.main(["suggest", "#777777", "--target", "21"])
    assert code == 1
    assert "No color reaches" in capsys.readouterr().out


def test_suggest_bad_step(capsys):
    assert contrast_check.main(["suggest", "#777777", "--step", "0"]) == 2


def test_audit_json(capsys, write_tokens, small_palette):
    path = write_tokens(small_palette)
    code = contrast_check.main(["--json", "audit", "--tokens", str(path), "--matrix"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["summary"]["failing"] == 1
    assert [p["label"] for p in payload["pairs"]] == ["Body", "Faint"]
    assert payload["matrix"][0]["ratio"] >= 4.5


def test_audit_missing_file(capsys, tmp_path):
    assert contrast_check.main(["audit", "--tokens", str(tmp_path / "none.json")]) == 2


def test_presets_text(capsys):
    assert contrast_check.main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "Black on White: 21.00:1 AAA" in out


def test_audit_unresolvable_pair_exits_nonzero(capsys, write_tokens, small_palette):
    small_palette["contrastPairs"] = [
        {"foreground": "text.nope", "background": "background.base", "label": "Broken"},
    ]
    path = write_tokens(small_palette)
    code = contrast_check.main(["--json", "audit", "--tokens", str(path)])
    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["summary"]["failing"] == 0
    assert payload["summary"]["errors"] == 1
