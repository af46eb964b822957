"""
Cross-file totals for one scan run.
"""

from dataclasses import dataclass, field
from typing import Dict, Set

from .feature import Category
from .issue import Severity
from .results import ScanResult


def _empty_category_counts() -> Dict[Category, int]:
    return {category: 0 for category in Category}


def _empty_severity_counts() -> Dict[Severity, int]:
    return {severity: 0 for severity in Severity}


@dataclass
class ProjectStats:
    """Totals folded across every file of a run."""
    files: int = 0
    total_lines: int = 0
    category_counts: Dict[Category, int] = field(default_factory=_empty_category_counts)
    issue_counts: Dict[Severity, int] = field(default_factory=_empty_severity_counts)
    variables: Set[str] = field(default_factory=set)
    libraries: Set[str] = field(default_factory=set)

    @property
    def total_commands(self) -> int:
        return self.category_counts[Category.COMMANDS]

    @property
    def total_events(self) -> int:
        return self.category_counts[Category.EVENTS]

    @property
    def total_functions(self) -> int:
        return self.category_counts[Category.FUNCTIONS]

    @property
    def total_issues(self) -> int:
        return sum(self.issue_counts.values())


class ProjectAggregator:
    """Accumulates ScanResults into ProjectStats. Only ever grows until reset."""

    def __init__(self):
        self.stats = ProjectStats()

    def reset(self) -> None:
        self.stats = ProjectStats()

    def fold(self, result: ScanResult) -> ProjectStats:
        stats = self.stats
        stats.files += 1
        stats.total_lines += result.stats.lines
        for feature in result.features:
            stats.category_counts[feature.category] += 1
        for issue in result.issues:
            stats.issue_counts[issue.severity] += 1
        stats.variables.update(result.dependencies.variables)
        stats.libraries.update(result.dependencies.libraries)
        return stats
