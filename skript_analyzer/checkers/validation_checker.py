"""
Input validation checks around parsing and loops.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import window

VALIDATION_WINDOW = 10

_RISKY = re.compile(r"\b(?:parse|parsed|loop)\b")
_GUARD = re.compile(r"\b(?:if|else)\b")


class ValidationChecker(BaseChecker):
    """Parsing and looping with no condition nearby is likely to fail at runtime."""

    def _run_checks(self):
        raw = self._raw_lines()
        for i, line in enumerate(self.lines):
            if not line.is_code or not _RISKY.search(line.stripped):
                continue
            if any(_GUARD.search(l) for l in window(raw, i, VALIDATION_WINDOW)):
                continue
            self._add_issue(
                Severity.MEDIUM, line.number,
                "Potential error without validation",
                line.text,
                "Add validation checks",
                "VALIDATION",
            )
