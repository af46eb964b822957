"""
Per-file and per-run result models.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .feature import Feature
from .issue import Issue, Severity


@dataclass(frozen=True)
class SourceFile:
    """An uploaded file's name and decoded text."""
    name: str
    text: str

    @property
    def size(self) -> int:
        return len(self.text.encode("utf-8"))


@dataclass(frozen=True)
class FileStats:
    """Line counts, byte size and complexity of one file."""
    lines: int = 0
    non_empty: int = 0
    comments: int = 0
    size: int = 0
    complexity: int = 0


@dataclass(frozen=True)
class Dependencies:
    """Distinct variable references and recognized addon libraries."""
    variables: Tuple[str, ...] = ()
    libraries: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScanResult:
    """Everything the analyzer found in one file."""
    file_name: str
    issues: Tuple[Issue, ...] = ()
    features: Tuple[Feature, ...] = ()
    stats: FileStats = field(default_factory=FileStats)
    dependencies: Dependencies = field(default_factory=Dependencies)


@dataclass(frozen=True)
class Suggestion:
    """A recommended next step for the scanned project."""
    title: str
    icon: str
    priority: Severity
    description: str
    reason: str
    example: str
    impact: str


@dataclass(frozen=True)
class ScanOptions:
    """Which parts of the analysis to compute for a run."""
    issues: bool = True
    features: bool = True
    suggestions: bool = True


@dataclass(frozen=True)
class FileFailure:
    """A file whose analysis raised; the rest of the run continued."""
    file_name: str
    error: str
