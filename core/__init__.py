"""
Core package - Contains main business logic.
"""

from core.registry import TargetRegistry, DEFAULT_TARGETS
from core.checker import SyntaxChecker, run_check, dump_file

__all__ = [
    'TargetRegistry',
    'DEFAULT_TARGETS',
    'SyntaxChecker',
    'run_check',
    'dump_file'
]
