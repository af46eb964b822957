"""
Main scanner class that coordinates all checkers and extractors for a run.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

from .aggregator import ProjectAggregator, ProjectStats
from .checkers import (
    CommandChecker, FileChecker, SyntaxChecker, ValidationChecker, VariableChecker,
)
from .complexity import calculate_complexity
from .dependencies import detect_dependencies
from .feature import Feature
from .feature_extractor import FeatureExtractor
from .issue import Issue
from .results import (
    Dependencies, FileFailure, FileStats, ScanOptions, ScanResult, Suggestion,
)
from .suggestions import generate_suggestions
from .thresholds import DEFAULT_THRESHOLDS, Thresholds
from .utils import ClassifiedLine, classify_lines, is_skript

logger = logging.getLogger(__name__)


@dataclass
class ScanRun:
    """Outcome of scanning a batch of files."""
    results: List[ScanResult] = field(default_factory=list)
    stats: ProjectStats = field(default_factory=ProjectStats)
    suggestions: Optional[List[Suggestion]] = None
    failures: List[FileFailure] = field(default_factory=list)
    cancelled: bool = False


class SkriptScanner:
    """Main scanner for Skript files."""

    def __init__(self, thresholds: Optional[Thresholds] = None):
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

        # Line rules run in this order; file rules run after them
        self.line_checkers = [
            SyntaxChecker(),
            VariableChecker(),
            CommandChecker(),
            ValidationChecker(),
        ]
        self.file_checkers = [
            FileChecker(self.thresholds),
        ]

    def detect_issues(self, file_name: str, content: str,
                      lines: Optional[List[ClassifiedLine]] = None) -> List[Issue]:
        """Issues in source-line order, then file-level issues."""
        if not is_skript(file_name, content):
            return []
        lines = classify_lines(content) if lines is None else lines

        line_issues: List[Issue] = []
        for checker in self.line_checkers:
            line_issues.extend(checker.check(file_name, lines, content))
        # Stable: rules keep their order on a shared line
        line_issues.sort(key=lambda issue: issue.line)

        for checker in self.file_checkers:
            line_issues.extend(checker.check(file_name, lines, content))
        return line_issues

    def detect_features(self, file_name: str, content: str,
                        lines: Optional[List[ClassifiedLine]] = None) -> List[Feature]:
        if not is_skript(file_name, content):
            return []
        lines = classify_lines(content) if lines is None else lines
        return FeatureExtractor().extract(lines)

    def analyze_file_stats(self, file_name: str, content: str,
                           lines: Optional[List[ClassifiedLine]] = None) -> FileStats:
        lines = classify_lines(content) if lines is None else lines
        complexity = 0
        if is_skript(file_name, content):
            complexity = calculate_complexity(line.text for line in lines)
        return FileStats(
            lines=len(lines),
            non_empty=sum(1 for line in lines if not line.is_blank),
            comments=sum(1 for line in lines if line.is_comment),
            size=len(content.encode("utf-8")),
            complexity=complexity,
        )

    def detect_dependencies(self, file_name: str, content: str) -> Dependencies:
        if not is_skript(file_name, content):
            return Dependencies()
        return detect_dependencies(content)

    def scan_file(self, file_name: str, content: str,
                  options: Optional[ScanOptions] = None) -> ScanResult:
        """Analyze one file."""
        options = options or ScanOptions()
        lines = classify_lines(content)
        return ScanResult(
            file_name=file_name,
            issues=tuple(self.detect_issues(file_name, content, lines)) if options.issues else (),
            features=tuple(self.detect_features(file_name, content, lines)) if options.features else (),
            stats=self.analyze_file_stats(file_name, content, lines),
            dependencies=self.detect_dependencies(file_name, content),
        )

    def scan_files(
        self,
        files: Mapping[str, str],
        options: Optional[ScanOptions] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> ScanRun:
        """Scan a batch of files, then fold stats and build suggestions.

        A file that fails to analyze is recorded in ``failures`` and the rest
        of the batch continues. ``should_cancel`` is polled before each file.
        """
        options = options or ScanOptions()
        aggregator = ProjectAggregator()
        run = ScanRun(stats=aggregator.stats)

        for file_name, content in files.items():
            if should_cancel is not None and should_cancel():
                logger.info("Scan cancelled after %d of %d file(s)", len(run.results), len(files))
                run.cancelled = True
                break
            try:
                result = self.scan_file(file_name, content, options)
            except Exception as e:
                logger.exception("Failed to analyze %s", file_name)
                run.failures.append(FileFailure(file_name, f"{type(e).__name__}: {e}"))
                continue
            run.results.append(result)
            aggregator.fold(result)

        if options.suggestions:
            run.suggestions = generate_suggestions(aggregator.stats, run.results, self.thresholds)
        logger.debug(
            "Scanned %d file(s): %d lines, %d issue(s), %d failure(s)",
            len(run.results), run.stats.total_lines, run.stats.total_issues, len(run.failures),
        )
        return run
