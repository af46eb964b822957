"""
Variable and addon-library dependency scanning.
"""

from .patterns import VARIABLE_REFERENCE
from .results import Dependencies

# Literal substring -> addon it implies.
LIBRARY_MARKERS = (
    ("skquery", "skQuery"),
    ("skellett", "Skellett"),
    ("skript-mirror", "skript-mirror"),
    ("reqn", "skript-reflect"),
    ("tuske", "TuSKe"),
)


def detect_dependencies(content: str) -> Dependencies:
    """Distinct `{...}` variables in first-seen order, plus recognized addons."""
    variables = dict.fromkeys(m.group(0) for m in VARIABLE_REFERENCE.finditer(content))
    libraries = dict.fromkeys(lib for marker, lib in LIBRARY_MARKERS if marker in content)
    return Dependencies(variables=tuple(variables), libraries=tuple(libraries))
