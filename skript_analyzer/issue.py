"""
Issue data models for the Skript analyzer.
"""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Issue and suggestion priority levels, worst first."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """0 for critical up to 3 for low."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}


@dataclass(frozen=True)
class Issue:
    """A flagged pattern in a Skript file."""
    severity: Severity
    line: int
    message: str
    code: str
    fix: str
    category: str
