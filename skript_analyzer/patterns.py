"""
Declaration patterns shared by the checkers, the feature extractor and the
complexity scorer.
"""

import re

COMMAND_DECLARATION = re.compile(r"^command\s+/(\w+)(?:\s+<(.+)>)?")
FUNCTION_DECLARATION = re.compile(r"^function\s+(\w+)\s*\(([^)]*)\)")
OPTIONS_MARKER = "options:"
OPTION_ENTRY = re.compile(r"^\s+([\w-]+):\s*(.+)")

CONDITIONAL = re.compile(r"^(?:else\s+)?if\s")
ITERATION = re.compile(r"^(?:loop|while)\s")
VARIABLE_REFERENCE = re.compile(r"\{[^}]+\}")

PERMISSION_MARKER = "permission:"
COOLDOWN_MARKER = "cooldown"
RETURN_MARKER = "return"
