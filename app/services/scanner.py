"""Scanner service: wraps skript_analyzer and maps results to API models."""

from dataclasses import asdict

from deps import Dict, List, Optional

from skript_analyzer.feature import Feature, feature_icon
from skript_analyzer.issue import Issue
from skript_analyzer.main_checker import ScanRun, SkriptScanner
from skript_analyzer.results import ScanOptions, ScanResult, Suggestion
from skript_analyzer.validator import format_issues, pre_validate
from skript_analyzer.utils import detect_language

from ..config import get_thresholds
from ..schemas import (
    DependenciesOut,
    FeatureOut,
    FileFailureOut,
    FileResult,
    FileStatsOut,
    IssueOut,
    ProjectStatsOut,
    ScanResponse,
    SuggestionOut,
    ValidateResponse,
)


def _issue_to_out(i: Issue) -> IssueOut:
    return IssueOut(
        severity=i.severity.value,
        line=i.line,
        message=i.message,
        code=i.code,
        fix=i.fix,
        category=i.category,
    )


def _feature_to_out(f: Feature) -> FeatureOut:
    details = asdict(f)
    details.pop("icon", None)
    for key, value in details.items():
        if isinstance(value, tuple):
            details[key] = list(value)
    return FeatureOut(category=f.category.value, icon=feature_icon(f), **details)


def _suggestion_to_out(s: Suggestion) -> SuggestionOut:
    return SuggestionOut(
        title=s.title,
        icon=s.icon,
        priority=s.priority.value,
        description=s.description,
        reason=s.reason,
        example=s.example,
        impact=s.impact,
    )


def _result_to_out(r: ScanResult) -> FileResult:
    return FileResult(
        file_name=r.file_name,
        issues=[_issue_to_out(i) for i in r.issues],
        features=[_feature_to_out(f) for f in r.features],
        stats=FileStatsOut(**asdict(r.stats)),
        dependencies=DependenciesOut(
            variables=list(r.dependencies.variables),
            libraries=list(r.dependencies.libraries),
        ),
    )


def run_to_response(run: ScanRun) -> ScanResponse:
    stats = run.stats
    project = ProjectStatsOut(
        files=stats.files,
        total_lines=stats.total_lines,
        total_commands=stats.total_commands,
        total_events=stats.total_events,
        total_functions=stats.total_functions,
        categories={c.value: n for c, n in stats.category_counts.items()},
        issues={s.value: n for s, n in stats.issue_counts.items()},
        variables=sorted(stats.variables),
        libraries=sorted(stats.libraries),
    )
    suggestions: Optional[List[SuggestionOut]] = None
    if run.suggestions is not None:
        suggestions = [_suggestion_to_out(s) for s in run.suggestions]
    return ScanResponse(
        files=[_result_to_out(r) for r in run.results],
        project=project,
        suggestions=suggestions,
        failures=[FileFailureOut(file_name=f.file_name, error=f.error) for f in run.failures],
    )


class ScannerService:
    """Wraps SkriptScanner for use by the API."""

    def scan(
        self,
        files: Dict[str, str],
        scan_issues: bool = True,
        scan_features: bool = True,
        scan_suggestions: bool = True,
    ) -> ScanRun:
        """Run one scan over the given files. Each call gets its own aggregator."""
        options = ScanOptions(issues=scan_issues, features=scan_features, suggestions=scan_suggestions)
        return SkriptScanner(get_thresholds()).scan_files(files, options)

    def validate(self, file_name: str, content: str) -> ValidateResponse:
        """Pre-validation verdict for one file."""
        result = pre_validate(file_name, content)
        return ValidateResponse(
            is_skript=result.is_skript,
            valid=result.valid,
            language="Skript" if result.is_skript else detect_language(file_name),
            issues=[_issue_to_out(i) for i in result.issues],
            summary=format_issues(result.issues),
        )
