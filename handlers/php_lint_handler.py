"""
PHP lint handler - runs `php -l` against a file.
"""

from typing import Optional, Dict, Any, List

from .base_handler import BaseHandler
from .process_runner import ProcessRunner


class PhpLintHandler(BaseHandler):
    """Handler for the PHP interpreter's lint-only mode."""

    def __init__(self, config: Dict[str, Any] = None, runner: Optional[ProcessRunner] = None):
        super().__init__(config or {}, runner)

    def get_method_name(self) -> str:
        return "php"

    def build_command(self, path: str) -> List[str]:
        binary = self.config.get('binary', 'php')
        return [binary, '-l', path]
