"""
Handlers package - Contains all lint method implementations.
"""

from handlers.process_runner import ProcessRunner, CapturedOutput
from handlers.base_handler import BaseHandler
from handlers.php_lint_handler import PhpLintHandler
from handlers.cli_handler import CLIHandler

__all__ = [
    'ProcessRunner',
    'CapturedOutput',
    'BaseHandler',
    'PhpLintHandler',
    'CLIHandler'
]
