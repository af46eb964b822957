"""
Syntax checks: missing condition colons and syntax borrowed from other languages.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import position_inside_string_literal

_JS_DECLARATION = re.compile(r"\b(?:var|let|const)\s+\w")
_JS_FUNCTION = re.compile(r"=>|\bfunction\(")


class SyntaxChecker(BaseChecker):
    """Flags lines that are not valid Skript surface syntax."""

    def _run_checks(self):
        self._check_condition_colons()
        self._check_js_declarations()
        self._check_js_functions()
        self._check_semicolons()

    def _check_condition_colons(self):
        """`if` / `else if` must open a block with a trailing colon."""
        for line in self._code_lines():
            s = line.stripped
            if (s.startswith("if ") or s.startswith("else if ")) and not s.endswith(":"):
                self._add_issue(
                    Severity.CRITICAL, line.number,
                    "Missing colon at end of condition",
                    line.text,
                    line.text.rstrip() + ":",
                    "SYNTAX",
                )

    def _check_js_declarations(self):
        for line in self._code_lines():
            m = _JS_DECLARATION.search(line.stripped)
            if m and not position_inside_string_literal(line.stripped, m.start()):
                self._add_issue(
                    Severity.CRITICAL, line.number,
                    "JavaScript variable declaration in Skript file",
                    line.text,
                    "Use: set {variable} to value",
                    "SYNTAX",
                )

    def _check_js_functions(self):
        for line in self._code_lines():
            m = _JS_FUNCTION.search(line.stripped)
            if m and not position_inside_string_literal(line.stripped, m.start()):
                self._add_issue(
                    Severity.HIGH, line.number,
                    "JavaScript function syntax in Skript file",
                    line.text,
                    "Use: function name(param: type):",
                    "SYNTAX",
                )

    def _check_semicolons(self):
        """Skript statements end at the newline; only `execute` may carry one."""
        for line in self._code_lines():
            s = line.stripped
            if s.endswith(";") and not s.startswith("execute"):
                self._add_issue(
                    Severity.MEDIUM, line.number,
                    "Unnecessary semicolon in Skript",
                    line.text,
                    re.sub(r";\s*$", "", line.text),
                    "SYNTAX",
                )
