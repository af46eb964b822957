"""Tests for pre-validation before optimization."""

from skript_analyzer.issue import Severity
from skript_analyzer.validator import format_issues, pre_validate


class TestPreValidate:

    def test_missing_colon_blocks(self):
        result = pre_validate("a.sk", 'if player has permission "x"\n    send "ok"')
        assert result.is_skript
        assert not result.valid
        assert [(i.line, i.severity) for i in result.issues] == [(1, Severity.CRITICAL)]

    def test_semicolon_alone_does_not_block(self):
        result = pre_validate("a.sk", 'on join:\n    send "hi" to player;')
        assert result.valid
        assert len(result.issues) == 1

    def test_non_skript_always_passes(self):
        result = pre_validate("app.js", "const x = 1;")
        assert not result.is_skript
        assert result.valid
        assert result.issues == []

    def test_clean_file(self, sample_skript):
        result = pre_validate("shop.sk", sample_skript)
        assert result.valid
        assert result.issues == []


class TestFormatIssues:

    def test_no_issues(self):
        assert format_issues([]) == "No issues found"

    def test_one_line_per_issue(self):
        issues = pre_validate("a.sk", "if {_a} is 1\n    let x = 2").issues
        assert format_issues(issues) == (
            "Line 1 [CRITICAL]: Missing colon at end of condition\n"
            "Line 2 [CRITICAL]: JavaScript variable declaration in Skript file"
        )
