"""
Suggestion engine: recommendation rules over the aggregated project stats.

Each rule pairs an activation check with fixed copy. ``reason`` returns the
interpolated reason when the rule applies and ``None`` otherwise. Active rules
are stable-sorted by priority, so equal priorities keep declaration order.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .aggregator import ProjectStats
from .feature import Category, CommandFeature
from .issue import Severity
from .results import ScanResult, Suggestion
from .thresholds import DEFAULT_THRESHOLDS, Thresholds


@dataclass(frozen=True)
class ProjectView:
    """What a rule can look at."""
    stats: ProjectStats
    results: Sequence[ScanResult]
    thresholds: Thresholds

    def commands(self) -> List[CommandFeature]:
        return [f for r in self.results for f in r.features if isinstance(f, CommandFeature)]

    def has_category(self, category: Category) -> bool:
        return any(f.category is category for r in self.results for f in r.features)

    @property
    def has_commands(self) -> bool:
        return self.stats.total_commands > 0

    @property
    def has_events(self) -> bool:
        return self.stats.total_events > 0


@dataclass(frozen=True)
class SuggestionRule:
    title: str
    icon: str
    priority: Severity
    description: str
    example: str
    impact: str
    reason: Callable[[ProjectView], Optional[str]]

    def evaluate(self, view: ProjectView) -> Optional[Suggestion]:
        reason = self.reason(view)
        if reason is None:
            return None
        return Suggestion(
            title=self.title,
            icon=self.icon,
            priority=self.priority,
            description=self.description,
            reason=reason,
            example=self.example,
            impact=self.impact,
        )


def _cooldown_reason(view: ProjectView) -> Optional[str]:
    if not view.has_commands:
        return None
    missing = view.stats.total_commands - sum(1 for c in view.commands() if c.has_cooldown)
    if missing <= 0:
        return None
    return f"{missing} command(s) without cooldown protection."


def _permission_reason(view: ProjectView) -> Optional[str]:
    if not view.has_commands:
        return None
    missing = view.stats.total_commands - sum(1 for c in view.commands() if c.has_permission)
    if missing <= 0:
        return None
    return f"{missing} command(s) accessible to everyone."


def _config_reason(view: ProjectView) -> Optional[str]:
    if view.has_category(Category.CONFIGURATION):
        return None
    if not (view.has_commands or view.has_events):
        return None
    return "Hardcoded values make plugin inflexible."


def _functions_reason(view: ProjectView) -> Optional[str]:
    stats, t = view.stats, view.thresholds
    if stats.total_commands > t.reuse_min_commands and stats.total_functions < t.reuse_max_functions:
        return f"{stats.total_commands} commands with only {stats.total_functions} functions."
    return None


def _error_handling_reason(view: ProjectView) -> Optional[str]:
    if view.has_commands or view.has_events:
        return "Many operations without error checks detected."
    return None


def _gui_reason(view: ProjectView) -> Optional[str]:
    if view.stats.total_commands > view.thresholds.gui_min_commands:
        return "Many commands could be simplified with GUI."
    return None


def _database_reason(view: ProjectView) -> Optional[str]:
    count = len(view.stats.variables)
    if count > view.thresholds.database_min_variables:
        return f"{count} variables detected."
    return None


def _update_checker_reason(view: ProjectView) -> Optional[str]:
    if view.has_commands or view.has_events:
        return "Users won't know about updates."
    return None


def _placeholder_reason(view: ProjectView) -> Optional[str]:
    if not view.has_events:
        return None
    # `%...%` is ordinary Skript interpolation, not a PlaceholderAPI marker
    if "PlaceholderAPI" in view.stats.libraries:
        return None
    return "Increases plugin compatibility."


def _performance_reason(view: ProjectView) -> Optional[str]:
    t = view.thresholds
    if view.stats.total_lines <= t.performance_min_lines:
        return None
    complex_files = [r for r in view.results if r.stats.complexity > t.performance_file_complexity]
    if not complex_files:
        return None
    return f"{len(complex_files)} file(s) with high complexity detected."


RULES = (
    SuggestionRule(
        title="Add Cooldown System",
        icon="⏱️",
        priority=Severity.HIGH,
        description="Prevent command spam by adding cooldowns to commands.",
        example="""command /daily:
    trigger:
        if difference between {cooldown::%player%} and now < 24 hours:
            send "Please wait %difference between 24 hours and difference between {cooldown::%player%} and now%"
            stop
        set {cooldown::%player%} to now
        # Your command logic""",
        impact="Prevents abuse and server lag",
        reason=_cooldown_reason,
    ),
    SuggestionRule(
        title="Add Permission Checks",
        icon="🔒",
        priority=Severity.CRITICAL,
        description="Secure your commands with permission checks.",
        example="""command /admin:
    permission: myplugin.admin
    permission message: &cYou don't have permission!
    trigger:
        # Your admin code""",
        impact="Essential for security",
        reason=_permission_reason,
    ),
    SuggestionRule(
        title="Add Configuration File",
        icon="⚙️",
        priority=Severity.HIGH,
        description="Make your plugin customizable with options.",
        example="""options:
    prefix: &7[&bMyPlugin&7]
    cooldown: 5 seconds
    max-uses: 3
    debug-mode: false

command /test:
    trigger:
        send "{@prefix} This uses config!\"""",
        impact="Easy customization without code changes",
        reason=_config_reason,
    ),
    SuggestionRule(
        title="Create Reusable Functions",
        icon="📦",
        priority=Severity.MEDIUM,
        description="Reduce code duplication with functions.",
        example="""function sendMessage(p: player, msg: text):
    send "{@prefix} %{_msg}%" to {_p}

command /test:
    trigger:
        sendMessage(player, "Hello World!")""",
        impact="Easier maintenance and updates",
        reason=_functions_reason,
    ),
    SuggestionRule(
        title="Add Error Handling",
        icon="🛡️",
        priority=Severity.MEDIUM,
        description="Prevent crashes with proper validation.",
        example="""command /teleport <player>:
    trigger:
        if arg-1 is set:
            if arg-1 is online:
                teleport player to arg-1
            else:
                send "&cPlayer is not online!"
        else:
            send "&cUsage: /teleport <player>\"""",
        impact="Better user experience and stability",
        reason=_error_handling_reason,
    ),
    SuggestionRule(
        title="Implement GUI Menu",
        icon="🎮",
        priority=Severity.LOW,
        description="Replace commands with intuitive GUI menus.",
        example="""command /menu:
    trigger:
        open chest with 3 rows named "&6Main Menu" to player
        wait 1 tick
        set slot 13 of player's current inventory to diamond named "&bSettings\"""",
        impact="Better user experience",
        reason=_gui_reason,
    ),
    SuggestionRule(
        title="Implement Database System",
        icon="💾",
        priority=Severity.MEDIUM,
        description="Store data efficiently in database.",
        example="""# Using Skript YAML addon
on load:
    if yaml "playerdata" doesn't exist:
        create yaml "playerdata"

function savePlayer(p: player):
    set yaml value "players.%uuid of {_p}%.name" to name of {_p}
    save yaml "playerdata\"""",
        impact="Better performance and data persistence",
        reason=_database_reason,
    ),
    SuggestionRule(
        title="Add Update Checker",
        icon="🔄",
        priority=Severity.LOW,
        description="Notify about new versions automatically.",
        example="""on join:
    if player is op:
        if {latest-version} is not set or difference between {last-check} and now > 1 day:
            # Check for updates using API
            send "&aNew version available!" to player""",
        impact="Keep users informed",
        reason=_update_checker_reason,
    ),
    SuggestionRule(
        title="Add PlaceholderAPI Support",
        icon="🏷️",
        priority=Severity.LOW,
        description="Allow other plugins to use your data.",
        example="""# Requires skript-placeholderapi
on placeholder request for "myplugin_balance":
    set result to "%{balance::%player%}%\"""",
        impact="Better ecosystem integration",
        reason=_placeholder_reason,
    ),
    SuggestionRule(
        title="Optimize Performance",
        icon="⚡",
        priority=Severity.HIGH,
        description="Reduce lag with optimization techniques.",
        example="""# Cache frequently accessed data
on load:
    set {cached::prefix} to colored "{@prefix}"

# Use local variables
command /test:
    trigger:
        set {_prefix} to {cached::prefix}
        send "%{_prefix}% Message" to player""",
        impact="Better server performance",
        reason=_performance_reason,
    ),
)


def generate_suggestions(
    stats: ProjectStats,
    results: Sequence[ScanResult],
    thresholds: Optional[Thresholds] = None,
) -> List[Suggestion]:
    """Active suggestions, most urgent first."""
    view = ProjectView(stats=stats, results=results, thresholds=thresholds or DEFAULT_THRESHOLDS)
    active = [s for s in (rule.evaluate(view) for rule in RULES) if s is not None]
    return sorted(active, key=lambda s: s.priority.rank)
