import pytest

from tokencheck import load_tokens, DesignTokens
from tokencheck.audit import audit_pairs
from tokencheck.codec import BLACK
from tokencheck.contrast import contrast_ratio


def test_audit_default_palette():
    report = audit_pairs(load_tokens())
    failing = {r.label for r in report.failing}
    assert "Muted text on base background" in failing
    assert "Label on accent button" in failing
    assert "Primary text on base background" not in failing
    assert report.summary["total"] == 7
    assert report.summary["failing"] == len(report.failing)
    assert report.summary["errors"] == 0


def test_failing_pairs_get_passing_suggestions():
    report = audit_pairs(load_tokens())
    for r in report.failing:
        assert r.suggestions, r.label
        for color in r.suggestions:
            assert contrast_ratio(color, r.background) >= 4.5
    for r in report.results:
        if r.passed:
            assert r.suggestions == ()


def test_explicit_pairs_and_target(write_tokens, small_palette):
    tokens = load_tokens(write_tokens(small_palette))
    report = audit_pairs(tokens, [("text.faint", "background.base", "Faint")], target_ratio=1.0)
    assert report.summary == {
        "total": 1, "failing": 0, "errors": 0, "pass_rate": 1.0, "target_ratio": 1.0,
    }


def test_unknown_path_recorded_as_error(write_tokens, small_palette):
    tokens = load_tokens(write_tokens(small_palette))
    report = audit_pairs(tokens, [("text.nope", "background.base", "Broken")])
    (result,) = report.results
    assert result.error and "text.nope" in result.error
    assert not result.passed
    assert report.errors == [result]
    assert report.failing == []
    assert report.summary["failing"] == 0
    assert report.summary["errors"] == 1
    assert report.summary["pass_rate"] == 0.0


def test_invalid_color_policy():
    tokens = DesignTokens(raw={"color": {"text": {"bad": "oops"}, "bg": {"base": "#FFFFFF"}}})
    pairs = [("text.bad", "bg.base", "Bad")]
    strict = audit_pairs(tokens, pairs)
    assert strict.results[0].error is not None
    lenient = audit_pairs(tokens, pairs, on_invalid="black")
    assert lenient.results[0].foreground == BLACK
    assert lenient.results[0].passed
    with pytest.raises(ValueError):
        audit_pairs(tokens, pairs, on_invalid="white")  # type: ignore[arg-type]


def test_pair_result_as_dict():
    report = audit_pairs(load_tokens())
    data = report.results[0].as_dict()
    assert data["foreground"] == "#1F2937"
    assert data["report"]["rating"] == "AAA"
    assert data["error"] is None
