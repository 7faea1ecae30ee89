"""
CLI handler for linters given as a configured command line.
Any syntax checker that takes the file as its last argument works,
e.g. `python -m py_compile` or `ruby -c`.
"""

import shlex
from typing import Optional, Dict, Any, List

from .base_handler import BaseHandler
from .process_runner import ProcessRunner
from utils.exceptions import ConfigurationError


class CLIHandler(BaseHandler):
    """Handler for an arbitrary lint command."""

    def __init__(self, config: Dict[str, Any], runner: Optional[ProcessRunner] = None):
        super().__init__(config, runner)
        self.command = self._split_command(config.get('command'))

    def get_method_name(self) -> str:
        return "command"

    def build_command(self, path: str) -> List[str]:
        return self.command + [path]

    @staticmethod
    def _split_command(command) -> List[str]:
        """Accept the command as a shell-style string or a list."""
        if isinstance(command, str):
            parts = shlex.split(command)
        elif isinstance(command, (list, tuple)):
            parts = [str(part) for part in command]
        else:
            parts = []

        if not parts:
            raise ConfigurationError("The 'command' lint method needs a non-empty 'command' setting")
        return parts
