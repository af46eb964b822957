"""
Variable scope checks.
"""

from ..checker_base import BaseChecker
from ..issue import Severity
from ..patterns import VARIABLE_REFERENCE


class VariableChecker(BaseChecker):
    """Warns about plain global variables that other scripts may overwrite."""

    def _run_checks(self):
        for line in self._code_lines():
            for m in VARIABLE_REFERENCE.finditer(line.stripped):
                var = m.group(0)
                if "_" in var or "@" in var or "::" in var:
                    continue
                self._add_issue(
                    Severity.LOW, line.number,
                    f"Global variable {var} might cause conflicts",
                    line.text,
                    f"Consider using {{_{var[1:-1]}}} for local scope",
                    "VARIABLES",
                )
