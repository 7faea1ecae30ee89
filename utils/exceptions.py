"""
Exceptions raised by the syntax-check runner.
"""

from typing import Sequence


class SyntaxCheckError(Exception):
    """Base class for all syntax-check runner errors."""


class ReadError(SyntaxCheckError):
    """A checked file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class SpawnError(SyntaxCheckError):
    """The external lint process could not be started."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        self.reason = reason
        executable = self.command[0] if self.command else '<empty command>'
        super().__init__(f"Could not run {executable}: {reason}")


class ConfigurationError(SyntaxCheckError):
    """Settings name a lint method that does not exist."""
