"""Tests for the per-file scan and the batch coordinator."""

from skript_analyzer.issue import Severity
from skript_analyzer.main_checker import SkriptScanner
from skript_analyzer.results import ScanOptions

from conftest import HEAL_COMMAND


class TestScanFile:

    def test_sample_file(self, scanner, sample_skript):
        result = scanner.scan_file("shop.sk", sample_skript)
        assert [(i.line, i.severity) for i in result.issues] == [
            (25, Severity.MEDIUM),
            (26, Severity.MEDIUM),
        ]
        assert result.stats.lines == 27
        assert result.stats.comments == 1
        assert result.stats.non_empty == 22
        assert result.stats.complexity == 5
        assert result.stats.size == len(sample_skript.encode("utf-8"))
        assert "{_cooldown}" in result.dependencies.variables

    def test_empty_file(self, scanner):
        result = scanner.scan_file("empty.sk", "")
        assert result.issues == ()
        assert result.features == ()
        assert result.stats.lines == 0
        assert result.stats.size == 0

    def test_comment_only_file(self, scanner):
        result = scanner.scan_file("notes.sk", "# a\n# b")
        assert result.issues == ()
        assert result.features == ()
        assert result.stats.lines == 2
        assert result.stats.comments == 2
        assert result.stats.complexity == 0

    def test_non_skript_file_keeps_factual_stats(self, scanner):
        content = "const x = 1;\nconsole.log(x);"
        result = scanner.scan_file("app.js", content)
        assert result.issues == ()
        assert result.features == ()
        assert result.dependencies.variables == ()
        assert result.stats.lines == 2
        assert result.stats.complexity == 0

    def test_line_issues_sorted_then_file_issues(self):
        content = "\n".join(f"command /c{n}:\n    trigger:\n        stop" for n in range(21))
        issues = SkriptScanner().scan_file("many.sk", content).issues
        lines = [i.line for i in issues[:-1]]
        assert lines == sorted(lines)
        assert issues[-1].message == "Many commands without reusable functions"

    def test_scan_is_idempotent(self, scanner, sample_skript):
        assert scanner.scan_file("a.sk", sample_skript) == scanner.scan_file("a.sk", sample_skript)

    def test_options_toggle_issues_and_features(self, scanner):
        result = scanner.scan_file("heal.sk", HEAL_COMMAND, ScanOptions(issues=False, features=False))
        assert result.issues == ()
        assert result.features == ()
        assert result.stats.lines == 3


class TestScanFiles:

    def test_runs_are_independent(self, scanner):
        files = {"heal.sk": HEAL_COMMAND}
        first = scanner.scan_files(files)
        second = scanner.scan_files(files)
        assert first.stats.total_commands == second.stats.total_commands == 1
        assert first.suggestions == second.suggestions

    def test_failing_file_does_not_stop_the_run(self, scanner, monkeypatch):
        original = scanner.scan_file

        def flaky(file_name, content, options=None):
            if file_name == "bad.sk":
                raise RuntimeError("boom")
            return original(file_name, content, options)

        monkeypatch.setattr(scanner, "scan_file", flaky)
        run = scanner.scan_files({"a.sk": HEAL_COMMAND, "bad.sk": "x", "c.sk": HEAL_COMMAND})

        assert [r.file_name for r in run.results] == ["a.sk", "c.sk"]
        assert run.stats.files == 2
        assert len(run.failures) == 1
        assert run.failures[0].file_name == "bad.sk"
        assert run.failures[0].error == "RuntimeError: boom"

    def test_cancellation(self, scanner):
        calls = []

        def should_cancel():
            calls.append(1)
            return len(calls) > 1

        run = scanner.scan_files({"a.sk": HEAL_COMMAND, "b.sk": HEAL_COMMAND}, should_cancel=should_cancel)
        assert run.cancelled
        assert [r.file_name for r in run.results] == ["a.sk"]

    def test_suggestions_can_be_skipped(self, scanner):
        run = scanner.scan_files({"heal.sk": HEAL_COMMAND}, ScanOptions(suggestions=False))
        assert run.suggestions is None
        assert not run.cancelled


class TestOtherLanguages:

    def test_javascript_is_not_checked(self, scanner):
        content = "function add(a, b) {\n  if (a > b) {\n    return a;\n  }\n  return b;\n}\n"
        result = scanner.scan_file("util.js", content)
        assert result.issues == ()
        assert result.features == ()

    def test_python_is_not_checked(self, scanner):
        content = "def pick(x):\n    if x:\n        return 1\n    return 2\n"
        result = scanner.scan_file("pick.py", content)
        assert result.issues == ()
        assert result.stats.complexity == 0
