"""
Base checker class for Skript issue rules.
"""

from typing import List

from .issue import Issue, Severity
from .utils import ClassifiedLine


class BaseChecker:
    """Base class for all checkers."""

    def __init__(self):
        self.issues: List[Issue] = []
        self.file_name: str = ""
        self.lines: List[ClassifiedLine] = []
        self.content: str = ""

    def check(self, file_name: str, lines: List[ClassifiedLine], content: str) -> List[Issue]:
        """Run checks on the given file."""
        self.file_name = file_name
        self.lines = lines
        self.content = content
        self.issues = []
        self._run_checks()
        return self.issues

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _code_lines(self):
        """Non-blank, non-comment lines."""
        return (line for line in self.lines if line.is_code)

    def _raw_lines(self) -> List[str]:
        return [line.text for line in self.lines]

    def _add_issue(
        self,
        severity: Severity,
        line_num: int,
        message: str,
        code: str,
        fix: str,
        category: str,
    ):
        """Add an issue to the list."""
        self.issues.append(Issue(severity, line_num, message, code, fix, category))
