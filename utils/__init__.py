"""
Utils package - Shared utility functions.
"""

from utils.exceptions import SyntaxCheckError, ReadError, SpawnError, ConfigurationError
from utils.lint_parser import LintOutputParser
from utils.logger import setup_logging

__all__ = [
    'SyntaxCheckError',
    'ReadError',
    'SpawnError',
    'ConfigurationError',
    'LintOutputParser',
    'setup_logging',
]
