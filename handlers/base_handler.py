"""
Abstract base handler for all lint methods.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
import logging

from handlers.process_runner import ProcessRunner
from models.check_result import CheckResult
from utils.exceptions import SpawnError
from utils.lint_parser import LintOutputParser


class BaseHandler(ABC):
    """Abstract base class for all lint handlers."""

    def __init__(self, config: Dict[str, Any], runner: Optional[ProcessRunner] = None):
        """
        Initialize handler with linter configuration.

        Args:
            config: Linter configuration dictionary
            runner: Process runner used to spawn the linter
        """
        self.config = config
        self.runner = runner or ProcessRunner()
        self.parser = LintOutputParser()
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def build_command(self, path: str) -> List[str]:
        """
        Build the lint-only command line for a file.

        Args:
            path: File to check

        Returns:
            Command and arguments
        """
        pass

    @abstractmethod
    def get_method_name(self) -> str:
        """
        Get the name of the lint method.

        Returns:
            String identifier for this method
        """
        pass

    def lint(self, path: str) -> CheckResult:
        """
        Run the linter against a file.

        The path is passed through unvalidated; a missing file shows up as
        whatever the linter prints about it.

        Args:
            path: File to check

        Returns:
            CheckResult whose output is the linter's combined output
        """
        command = self.build_command(path)

        try:
            captured = self.runner.run(command)
        except SpawnError as e:
            self.handle_error(path, e)
            return CheckResult(
                path=path,
                method=self.get_method_name(),
                command=command,
                output=f"{e}\n",
                raw_output=f"{e}\n".encode('utf-8'),
                error=str(e)
            )

        result = CheckResult(
            path=path,
            method=self.get_method_name(),
            command=captured.args,
            output=captured.output,
            raw_output=captured.raw,
            returncode=captured.returncode,
            messages=self.parser.parse(captured.output)
        )

        if result.returncode != 0:
            self.logger.warning(f"Linter exited with code {result.returncode} for {path}")
        for message in result.messages:
            self.logger.info(f"{path}: {message}")

        return result

    def handle_error(self, path: str, exception: Exception) -> None:
        """
        Handle errors while spawning the linter.

        Args:
            path: File being checked
            exception: The exception that occurred
        """
        self.logger.error(
            f"Error checking {path}: "
            f"{type(exception).__name__}: {str(exception)}"
        )
