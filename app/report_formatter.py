"""Format scan results as a human-readable Markdown report."""

from deps import List, datetime

from .schemas import FeatureOut, FileResult, IssueOut, ScanResponse, SuggestionOut


def _issue_block_md(i: IssueOut) -> List[str]:
    """One issue as Markdown: Line N · Severity, then message, code and fix."""
    lines = [f"**Line {i.line} · {i.severity.upper()}** ({i.category.title()})", "", i.message, ""]
    if i.code:
        lines += ["- **Code:**", "```", i.code, "```", ""]
    if i.fix:
        lines += ["- **Suggested fix:**", "```", i.fix, "```", ""]
    return lines


def _feature_line_md(f: FeatureOut) -> str:
    details = []
    if f.arguments:
        details.append(f"args: {', '.join(f.arguments)}")
    if f.parameters:
        details.append(f"params: {', '.join(f.parameters)}")
    if f.has_permission is not None:
        details.append(f"{'✅' if f.has_permission else '❌'} permission")
    if f.has_cooldown is not None:
        details.append(f"{'✅' if f.has_cooldown else '❌'} cooldown")
    if f.complexity:
        details.append(f"complexity {f.complexity}")
    if f.value_type:
        details.append(f"{f.value_type} = {f.default_value}")
    if f.usage:
        details.append(f"used {f.usage}x")
    suffix = f" ({'; '.join(details)})" if details else ""
    return f"- {f.icon} **{f.name}**, line {f.line}{suffix}"


def _file_issues_md(result: FileResult) -> List[str]:
    lines = [f"### {result.file_name}", ""]
    for issue in result.issues:
        lines.extend(_issue_block_md(issue))
    return lines


def _suggestion_md(s: SuggestionOut) -> List[str]:
    return [
        f"### {s.icon} {s.title} ({s.priority.upper()})",
        "",
        s.description,
        "",
        f"- **Why:** {s.reason}",
        f"- **Impact:** {s.impact}",
        "",
        "```",
        s.example,
        "```",
        "",
    ]


def format_scan_report(scan: ScanResponse) -> str:
    """Format a whole scan run as Markdown."""
    p = scan.project
    lines = ["# Skript Scan Report", ""]
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")
    lines.append(
        f"**Files:** {p.files} | **Lines:** {p.total_lines} | **Commands:** {p.total_commands} | "
        f"**Events:** {p.total_events} | **Functions:** {p.total_functions}"
    )
    if p.libraries:
        lines.append(f"**Libraries:** {', '.join(p.libraries)}")
    lines.append("")

    total = sum(p.issues.values())
    counts = ", ".join(f"{n} {sev}" for sev, n in p.issues.items())
    lines.append("## Issues")
    lines.append("")
    lines.append(f"**{total}** issue(s) found ({counts}).")
    lines.append("")
    for result in scan.files:
        if result.issues:
            lines.extend(_file_issues_md(result))

    features = [(r.file_name, f) for r in scan.files for f in r.features]
    if features:
        lines.append("## Features")
        lines.append("")
        categories: List[str] = []
        for _, f in features:
            if f.category not in categories:
                categories.append(f.category)
        for category in categories:
            in_category = [(name, f) for name, f in features if f.category == category]
            lines.append(f"### {category} ({len(in_category)})")
            lines.append("")
            for name, f in in_category:
                lines.append(f"{_feature_line_md(f)} in `{name}`")
            lines.append("")

    if scan.suggestions:
        lines.append("## Suggestions")
        lines.append("")
        for s in scan.suggestions:
            lines.extend(_suggestion_md(s))

    if scan.failures:
        lines.append("## Failed files")
        lines.append("")
        for failure in scan.failures:
            lines.append(f"- `{failure.file_name}`: {failure.error}")
        lines.append("")

    return "\n".join(lines)
