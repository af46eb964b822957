"""
Command security checks.
"""

from ..checker_base import BaseChecker
from ..issue import Severity
from ..patterns import COMMAND_DECLARATION, PERMISSION_MARKER
from ..utils import window

PERMISSION_WINDOW = 5


class CommandChecker(BaseChecker):
    """Flags commands that anyone on the server can run."""

    def _run_checks(self):
        raw = self._raw_lines()
        for i, line in enumerate(self.lines):
            if not line.is_code or not COMMAND_DECLARATION.match(line.text):
                continue
            if any(PERMISSION_MARKER in l for l in window(raw, i, PERMISSION_WINDOW)):
                continue
            self._add_issue(
                Severity.HIGH, line.number,
                "Command without permission check",
                line.text,
                "Add: permission: your.plugin.command",
                "SECURITY",
            )
