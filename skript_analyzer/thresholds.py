"""
Tuning constants for file-level issue rules and suggestion activation.

The defaults are empirical; override any of them by building a new
``Thresholds`` (``app.config.get_thresholds`` reads them from the environment).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Thresholds:
    # File-level issues
    max_file_size: int = 50_000
    many_commands_per_file: int = 20

    # Suggestions
    reuse_min_commands: int = 5
    reuse_max_functions: int = 3
    gui_min_commands: int = 3
    database_min_variables: int = 20
    performance_min_lines: int = 500
    performance_file_complexity: int = 20


DEFAULT_THRESHOLDS = Thresholds()
