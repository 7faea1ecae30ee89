"""
Process runner - spawns one external process and captures its output.
"""

import subprocess
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from utils.exceptions import SpawnError


@dataclass
class CapturedOutput:
    """Merged stdout/stderr of a finished process, as raw bytes."""

    args: List[str] = field(default_factory=list)
    raw: bytes = b""
    returncode: int = 0
    encoding: str = 'utf-8'

    @property
    def output(self) -> str:
        """Decoded output; line endings are left as the process wrote them."""
        return self.raw.decode(self.encoding, 'replace')


class ProcessRunner:
    """Runs a command to completion with stderr folded into stdout."""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, args: Sequence[str]) -> CapturedOutput:
        """
        Run a command and block until it exits.

        Args:
            args: Command and its arguments

        Returns:
            CapturedOutput with the combined output bytes and exit code

        Raises:
            SpawnError: if the process could not be started
        """
        args = [str(arg) for arg in args]
        if not args:
            raise SpawnError(args, "empty command")

        self.logger.info(f"Executing: {subprocess.list2cmdline(args)}")
        try:
            completed = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT
            )
        except OSError as e:
            raise SpawnError(args, e.strerror or str(e)) from e

        self.logger.debug(f"{args[0]} exited with code {completed.returncode}")
        return CapturedOutput(
            args=args,
            raw=completed.stdout or b"",
            returncode=completed.returncode,
            encoding=self.encoding
        )
