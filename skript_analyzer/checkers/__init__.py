"""
Checkers package for Skript issue rules.
"""

from .syntax_checker import SyntaxChecker
from .variable_checker import VariableChecker
from .command_checker import CommandChecker
from .validation_checker import ValidationChecker
from .file_checker import FileChecker

__all__ = [
    'SyntaxChecker',
    'VariableChecker',
    'CommandChecker',
    'ValidationChecker',
    'FileChecker',
]
