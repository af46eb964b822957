"""
Complexity scoring over a span of lines.
"""

from typing import Iterable

from .patterns import CONDITIONAL, FUNCTION_DECLARATION, ITERATION
from .utils import is_comment

CONDITIONAL_WEIGHT = 1
ITERATION_WEIGHT = 2
FUNCTION_WEIGHT = 1


def calculate_complexity(lines: Iterable[str]) -> int:
    """+1 per conditional, +2 per loop/while, +1 per function declaration. No nesting weight."""
    complexity = 0
    for line in lines:
        if is_comment(line):
            continue
        stripped = line.strip()
        if CONDITIONAL.match(stripped):
            complexity += CONDITIONAL_WEIGHT
        if ITERATION.match(stripped):
            complexity += ITERATION_WEIGHT
        if FUNCTION_DECLARATION.match(stripped):
            complexity += FUNCTION_WEIGHT
    return complexity
