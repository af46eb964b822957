"""Tests for project-level aggregation."""

from skript_analyzer.aggregator import ProjectAggregator
from skript_analyzer.feature import Category
from skript_analyzer.issue import Severity

from conftest import HEAL_COMMAND


class TestProjectAggregator:

    def test_fold_sums_per_file_results(self, scanner, sample_skript):
        aggregator = ProjectAggregator()
        aggregator.fold(scanner.scan_file("heal.sk", HEAL_COMMAND))
        stats = aggregator.fold(scanner.scan_file("shop.sk", sample_skript))

        assert stats.files == 2
        assert stats.total_lines == 3 + 27
        assert stats.total_commands == 2
        assert stats.total_events == 2
        assert stats.total_functions == 1
        assert stats.category_counts[Category.CONFIGURATION] == 4
        assert stats.category_counts[Category.INTEGRATIONS] == 3
        assert stats.issue_counts[Severity.HIGH] == 1
        assert stats.issue_counts[Severity.MEDIUM] == 2
        assert stats.total_issues == 3

    def test_variables_are_a_set_across_files(self, scanner):
        aggregator = ProjectAggregator()
        aggregator.fold(scanner.scan_file("a.sk", "set {_x} to 1"))
        stats = aggregator.fold(scanner.scan_file("b.sk", "set {_x} to 2\nset {_y} to 3"))
        assert stats.variables == {"{_x}", "{_y}"}

    def test_every_category_and_severity_is_present(self):
        stats = ProjectAggregator().stats
        assert set(stats.category_counts) == set(Category)
        assert set(stats.issue_counts) == set(Severity)
        assert stats.total_issues == 0

    def test_reset(self, scanner):
        aggregator = ProjectAggregator()
        aggregator.fold(scanner.scan_file("heal.sk", HEAL_COMMAND))
        aggregator.reset()
        assert aggregator.stats.files == 0
        assert aggregator.stats.total_commands == 0
