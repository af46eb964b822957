"""
Pre-validation of a single file before it is sent for AI optimization.
"""

from dataclasses import dataclass, field
from typing import List

from .checkers import SyntaxChecker
from .issue import Issue, Severity
from .utils import classify_lines, is_skript

BLOCKING = (Severity.CRITICAL, Severity.HIGH)


@dataclass(frozen=True)
class PreValidation:
    is_skript: bool
    valid: bool
    issues: List[Issue] = field(default_factory=list)


def pre_validate(file_name: str, content: str) -> PreValidation:
    """Syntax-only check; non-Skript files always pass."""
    if not is_skript(file_name, content):
        return PreValidation(is_skript=False, valid=True)
    issues = SyntaxChecker().check(file_name, classify_lines(content), content)
    issues.sort(key=lambda issue: issue.line)
    valid = not any(issue.severity in BLOCKING for issue in issues)
    return PreValidation(is_skript=True, valid=valid, issues=issues)


def format_issues(issues: List[Issue]) -> str:
    if not issues:
        return "No issues found"
    return "\n".join(
        f"Line {issue.line} [{issue.severity.value.upper()}]: {issue.message}" for issue in issues
    )
