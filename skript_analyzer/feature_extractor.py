"""
Feature extraction: commands, events, functions, options and integrations.
"""

import re
from typing import Callable, List, Tuple

from .complexity import calculate_complexity
from .feature import (
    CommandFeature,
    ConfigFeature,
    EventFeature,
    Feature,
    FunctionFeature,
    IntegrationFeature,
)
from .patterns import (
    COMMAND_DECLARATION,
    COOLDOWN_MARKER,
    FUNCTION_DECLARATION,
    OPTION_ENTRY,
    OPTIONS_MARKER,
    PERMISSION_MARKER,
    RETURN_MARKER,
)
from .utils import ClassifiedLine, block_length, window

PERMISSION_WINDOW = 5
COOLDOWN_WINDOW = 10
CONDITION_WINDOW = 5
EVENT_COMPLEXITY_WINDOW = 20
RETURN_WINDOW = 20

EVENT_PATTERNS = (
    (re.compile(r"^on\s+join"), "Player Join", "👋"),
    (re.compile(r"^on\s+quit"), "Player Quit", "👋"),
    (re.compile(r"^on\s+death"), "Player Death", "💀"),
    (re.compile(r"^on\s+break"), "Block Break", "⛏️"),
    (re.compile(r"^on\s+place"), "Block Place", "🧱"),
    (re.compile(r"^on\s+damage"), "Player Damage", "❤️"),
    (re.compile(r"^on\s+chat"), "Player Chat", "💬"),
    (re.compile(r"^on\s+click"), "Player Click", "👆"),
    (re.compile(r"^on\s+inventory"), "Inventory Action", "🎒"),
)

INTEGRATION_PATTERNS = (
    (re.compile(r"balance|economy|money|vault", re.IGNORECASE), "Economy (Vault)", "💰"),
    (re.compile(r"placeholder|papi|%.*%", re.IGNORECASE), "PlaceholderAPI", "🏷️"),
    (re.compile(r"permission|perm|has permission", re.IGNORECASE), "Permissions", "🔒"),
    (re.compile(r"scoreboard|sidebar", re.IGNORECASE), "Scoreboard", "📊"),
    (re.compile(r"hologram", re.IGNORECASE), "Holograms", "👁️"),
    (re.compile(r"particle", re.IGNORECASE), "Particles", "✨"),
    (re.compile(r"nbt", re.IGNORECASE), "NBT Data", "🏷️"),
)

_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

# Checked in order; the first match names the type.
VALUE_TYPES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (lambda v: bool(_NUMBER.match(v)), "number"),
    (lambda v: v in ("true", "false"), "boolean"),
    (lambda v: v.startswith("&"), "text (colored)"),
)


def guess_type(value: str) -> str:
    for predicate, name in VALUE_TYPES:
        if predicate(value):
            return name
    return "text"


def _split_arguments(raw: str) -> Tuple[str, ...]:
    return tuple(re.sub(r"[<>]", "", a) for a in re.split(r">\s*<", raw))


def _split_parameters(raw: str) -> Tuple[str, ...]:
    return tuple(p.strip() for p in raw.split(",") if p.strip())


class FeatureExtractor:
    """Extracts categorized constructs from one file's classified lines."""

    def __init__(self):
        self.features: List[Feature] = []
        self.lines: List[ClassifiedLine] = []
        self.raw: List[str] = []

    def extract(self, lines: List[ClassifiedLine]) -> List[Feature]:
        """Features grouped by category, in source order within each category."""
        self.lines = lines
        self.raw = [line.text for line in lines]
        self.features = []
        self._extract_commands()
        self._extract_events()
        self._extract_functions()
        self._extract_options()
        self._extract_integrations()
        return self.features

    def _has_marker(self, start: int, size: int, marker: str) -> bool:
        return any(marker in l for l in window(self.raw, start, size))

    def _extract_commands(self):
        for i, line in enumerate(self.lines):
            if line.is_comment:
                continue
            m = COMMAND_DECLARATION.match(line.text)
            if not m:
                continue
            self.features.append(CommandFeature(
                name=f"/{m.group(1)}",
                line=line.number,
                arguments=_split_arguments(m.group(2)) if m.group(2) else (),
                has_permission=self._has_marker(i, PERMISSION_WINDOW, PERMISSION_MARKER),
                has_cooldown=self._has_marker(i, COOLDOWN_WINDOW, COOLDOWN_MARKER),
            ))

    def _extract_events(self):
        for i, line in enumerate(self.lines):
            if not line.is_code:
                continue
            for pattern, name, icon in EVENT_PATTERNS:
                if not pattern.match(line.stripped):
                    continue
                following = window(self.raw, i, CONDITION_WINDOW)
                self.features.append(EventFeature(
                    name=name,
                    line=line.number,
                    icon=icon,
                    has_condition=any(l.strip().startswith("if") for l in following),
                    complexity=calculate_complexity(window(self.raw, i, EVENT_COMPLEXITY_WINDOW)),
                ))
                break

    def _extract_functions(self):
        for i, line in enumerate(self.lines):
            if line.is_comment:
                continue
            m = FUNCTION_DECLARATION.match(line.text)
            if not m:
                continue
            self.features.append(FunctionFeature(
                name=f"{m.group(1)}()",
                line=line.number,
                parameters=_split_parameters(m.group(2)),
                returns=self._has_marker(i, RETURN_WINDOW, RETURN_MARKER),
                length=block_length(self.raw, i),
            ))

    def _extract_options(self):
        """Entries of the first `options:` block."""
        start = next((i for i, line in enumerate(self.lines) if line.stripped == OPTIONS_MARKER), None)
        if start is None:
            return
        end = start + block_length(self.raw, start)
        for line in self.lines[start + 1:end]:
            if line.is_comment:
                continue
            m = OPTION_ENTRY.match(line.text)
            if not m:
                continue
            value = m.group(2).strip()
            self.features.append(ConfigFeature(
                name=m.group(1),
                line=line.number,
                default_value=value,
                value_type=guess_type(value),
            ))

    def _extract_integrations(self):
        """Whole-content signatures; at most one feature per integration.

        Comment lines are blanked out first so line numbers still line up.
        """
        code = "\n".join(line.text if not line.is_comment else "" for line in self.lines)
        for pattern, name, icon in INTEGRATION_PATTERNS:
            matches = list(pattern.finditer(code))
            if not matches:
                continue
            first_line = code.count("\n", 0, matches[0].start()) + 1
            self.features.append(IntegrationFeature(
                name=name,
                line=first_line,
                icon=icon,
                usage=len(matches),
            ))
