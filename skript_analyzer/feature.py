"""
Feature data models: one frozen dataclass per category.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


class Category(Enum):
    """Fixed feature categories."""
    COMMANDS = "Commands"
    EVENTS = "Events"
    FUNCTIONS = "Functions"
    CONFIGURATION = "Configuration"
    INTEGRATIONS = "Integrations"


CATEGORY_ICONS = {
    Category.COMMANDS: "⚡",
    Category.EVENTS: "🎯",
    Category.FUNCTIONS: "📦",
    Category.CONFIGURATION: "⚙️",
    Category.INTEGRATIONS: "🔌",
}


@dataclass(frozen=True)
class CommandFeature:
    """A `command /name <args>:` declaration."""
    name: str
    line: int
    arguments: Tuple[str, ...] = ()
    has_permission: bool = False
    has_cooldown: bool = False
    icon: Optional[str] = None

    category: ClassVar[Category] = Category.COMMANDS


@dataclass(frozen=True)
class EventFeature:
    """An `on <event>:` handler."""
    name: str
    line: int
    has_condition: bool = False
    complexity: int = 0
    icon: Optional[str] = None

    category: ClassVar[Category] = Category.EVENTS


@dataclass(frozen=True)
class FunctionFeature:
    """A `function name(params):` declaration."""
    name: str
    line: int
    parameters: Tuple[str, ...] = ()
    returns: bool = False
    length: int = 1
    icon: Optional[str] = None

    category: ClassVar[Category] = Category.FUNCTIONS


@dataclass(frozen=True)
class ConfigFeature:
    """A `key: value` entry inside an `options:` block."""
    name: str
    line: int
    default_value: str = ""
    value_type: str = "text"
    icon: Optional[str] = None

    category: ClassVar[Category] = Category.CONFIGURATION


@dataclass(frozen=True)
class IntegrationFeature:
    """A third-party integration recognized from the whole file."""
    name: str
    line: int
    usage: int = 0
    icon: Optional[str] = None

    category: ClassVar[Category] = Category.INTEGRATIONS


Feature = Union[CommandFeature, EventFeature, FunctionFeature, ConfigFeature, IntegrationFeature]


def feature_icon(feature: Feature) -> str:
    """Feature's own icon, falling back to its category icon."""
    return feature.icon or CATEGORY_ICONS[feature.category]
