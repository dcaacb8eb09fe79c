import pytest

from tokencheck import get_preset, list_presets
from tokencheck.contrast import check_pair
from tokencheck.report import build_report, report_dict


def test_build_report_lines():
    text = build_report("#1f2937", "#ffffff")
    assert text.startswith("WCAG Contrast Report\n")
    assert "Foreground: #1F2937" in text
    assert "Background: #FFFFFF (L: 1.0000)" in text
    assert "Normal Text AAA (7:1): PASS" in text
    assert "Large Text AA (3:1): PASS" in text
    assert text.rstrip().endswith("Overall Rating: AAA")


def test_build_report_failures():
    text = build_report("#ffffff", "#3b82f6")
    assert "Normal Text AA (4.5:1): FAIL" in text
    assert "UI Components (3:1): PASS" in text
    assert "Overall Rating: AA Large" in text


def test_report_dict_suggestions_only_when_failing():
    assert report_dict("#000000", "#ffffff")["suggestions"] == []
    data = report_dict("#ffffff", "#3b82f6")
    assert data["suggestions"]
    assert data["compliance"]["normal_text_aa"] is False


def test_presets():
    presets = list_presets()
    assert len(presets) == 8
    assert check_pair(presets[0].foreground, presets[0].background).rating == "AAA"
    assert get_preset("White on Blue 500").background == "#3B82F6"
    with pytest.raises(KeyError):
        get_preset("Nope")
