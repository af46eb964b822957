"""
File-level checks, run once per file after the line rules.
"""

from typing import Optional

from ..checker_base import BaseChecker
from ..issue import Severity
from ..patterns import COMMAND_DECLARATION, FUNCTION_DECLARATION
from ..thresholds import DEFAULT_THRESHOLDS, Thresholds


class FileChecker(BaseChecker):
    """Size and structure checks over the whole file."""

    def __init__(self, thresholds: Optional[Thresholds] = None):
        super().__init__()
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    def _run_checks(self):
        if not self.lines:
            return
        self._check_file_size()
        self._check_commands_without_functions()

    def _check_file_size(self):
        size = len(self.content.encode("utf-8"))
        limit = self.thresholds.max_file_size
        if size > limit:
            self._add_issue(
                Severity.HIGH, 1,
                f"File too large (>{limit // 1000}KB), consider splitting",
                "",
                "Split into multiple files by feature",
                "STRUCTURE",
            )

    def _check_commands_without_functions(self):
        commands = sum(1 for line in self._code_lines() if COMMAND_DECLARATION.match(line.text))
        has_function = any(FUNCTION_DECLARATION.match(line.text) for line in self._code_lines())
        if commands > self.thresholds.many_commands_per_file and not has_function:
            self._add_issue(
                Severity.MEDIUM, 1,
                "Many commands without reusable functions",
                "",
                "Create functions for common logic",
                "STRUCTURE",
            )
