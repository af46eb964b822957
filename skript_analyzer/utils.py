"""
Utility functions for the Skript analyzer: line classification, dialect
detection and the indentation-delimited block boundary.
"""

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Sequence

COMMENT_CHAR = "#"
SKRIPT_EXTENSIONS = (".sk",)

LANGUAGE_MAP = {
    ".js": "JavaScript",
    ".jsx": "React JSX",
    ".ts": "TypeScript",
    ".tsx": "React TSX",
    ".py": "Python",
    ".java": "Java",
    ".sk": "Skript",
    ".json": "JSON",
    ".yml": "YAML",
    ".yaml": "YAML",
}

# Any one of these in the content marks the file as Skript.
DIALECT_MARKERS = (
    re.compile(r"^command\s+/", re.MULTILINE),
    re.compile(r"^on\s+[\w ]+:", re.MULTILINE),
    re.compile(r"^function\s+\w+\s*\(", re.MULTILINE),
    re.compile(r"^(?:options|variables):\s*$", re.MULTILINE),
    re.compile(r"^\s+trigger:\s*$", re.MULTILINE),
    re.compile(
        r"^\s*(?:set|send|broadcast|loop|wait|execute|cancel event|teleport|give|"
        r"if|else if|else)\b.*(?:\"|\{|:\s*$|\bto\b)",
        re.MULTILINE,
    ),
    re.compile(r"\{[_@-][^}]*\}"),
)

_INDENT = re.compile(r"^\s*")


@dataclass(frozen=True)
class ClassifiedLine:
    """One source line with its blank/comment classification."""
    text: str
    stripped: str
    is_blank: bool
    is_comment: bool
    number: int

    @property
    def is_code(self) -> bool:
        return not self.is_blank and not self.is_comment


def split_lines(content: str) -> List[str]:
    """Split on newlines; empty content has no lines."""
    if not content:
        return []
    return content.split("\n")


def classify_lines(content: str) -> List[ClassifiedLine]:
    """Classify every line of content as blank, comment or code."""
    classified = []
    for number, text in enumerate(split_lines(content), 1):
        stripped = text.strip()
        classified.append(ClassifiedLine(
            text=text,
            stripped=stripped,
            is_blank=stripped == "",
            is_comment=is_comment(stripped),
            number=number,
        ))
    return classified


def is_comment(line: str) -> bool:
    """Check if line is a Skript comment."""
    return line.strip().startswith(COMMENT_CHAR)


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lower()


def detect_language(file_name: str) -> str:
    """Human-readable language name from the file extension."""
    return LANGUAGE_MAP.get(file_extension(file_name), "Unknown")


def has_dialect_markers(content: str) -> bool:
    return any(pattern.search(content) for pattern in DIALECT_MARKERS)


def is_skript(file_name: str, content: str) -> bool:
    """True if the Skript ruleset applies to this file.

    Known non-Skript extensions never match; content markers only decide for
    extensions outside ``LANGUAGE_MAP``.
    """
    ext = file_extension(file_name)
    if ext in SKRIPT_EXTENSIONS:
        return True
    if ext in LANGUAGE_MAP:
        return False
    return has_dialect_markers(content)


def indentation(line: str) -> int:
    """Width of the leading whitespace run."""
    return len(_INDENT.match(line).group(0))


def block_length(lines: Sequence[str], start: int) -> int:
    """Length of the indented block declared at lines[start], declaration included.

    Scanning stops at the first non-blank line indented no deeper than the
    declaration.
    """
    length = 1
    indent = indentation(lines[start])
    for line in lines[start + 1:]:
        if line.strip() != "" and indentation(line) <= indent:
            break
        length += 1
    return length


def window(lines: Sequence[str], start: int, size: int) -> Sequence[str]:
    """Lines [start, start + size), the declaration line included."""
    return lines[start:start + size]


def position_inside_string_literal(line: str, pos: int) -> bool:
    """True if position pos in line is inside a double-quoted Skript string."""
    if pos < 0 or pos >= len(line):
        return False
    in_string = False
    for ch in line[:pos + 1]:
        if ch == '"':
            in_string = not in_string
    return in_string
