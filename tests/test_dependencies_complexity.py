"""Tests for dependency scanning and complexity scoring."""

from skript_analyzer.complexity import calculate_complexity
from skript_analyzer.dependencies import detect_dependencies
from skript_analyzer.utils import split_lines


class TestDependencies:

    def test_distinct_variables_in_first_seen_order(self):
        content = "set {b} to 1\nset {a} to 2\nadd 1 to {b}\nadd 1 to {a}"
        assert detect_dependencies(content).variables == ("{b}", "{a}")

    def test_libraries(self):
        content = "# needs skquery\nimport:\n    reqn things\non join:\n    skquery stuff"
        assert detect_dependencies(content).libraries == ("skQuery", "skript-reflect")

    def test_nothing_found(self):
        deps = detect_dependencies("on join:\n    stop")
        assert deps.variables == ()
        assert deps.libraries == ()


class TestComplexity:

    def test_weights(self):
        content = "function f():\n    if {_a} is 1:\n        loop 3 times:\n            stop\n    else if {_a} is 2:\n        while true:\n            stop"
        # function 1, two conditionals 2, two iterations 4
        assert calculate_complexity(split_lines(content)) == 7

    def test_comments_are_ignored(self):
        assert calculate_complexity(["# if this", "# loop that"]) == 0

    def test_loop_keyword_mid_line_does_not_count(self):
        assert calculate_complexity(['send "loop it" to player']) == 0

    def test_sample_file(self, sample_skript):
        assert calculate_complexity(split_lines(sample_skript)) == 5

    def test_empty(self):
        assert calculate_complexity([]) == 0
