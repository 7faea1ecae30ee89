"""
Syntax Checker - Lints the target files and dumps their contents.
"""

import sys
import logging
from typing import Optional, List, IO

from core.registry import TargetRegistry
from handlers.base_handler import BaseHandler
from handlers.process_runner import ProcessRunner
from models.check_result import CheckResult
from models.report import SyntaxReport
from models.target import CheckTarget
from utils.exceptions import ReadError


class SyntaxChecker:
    """Runs the linter over each target, then dumps each target's contents."""

    def __init__(
        self,
        registry: TargetRegistry = None,
        runner: ProcessRunner = None,
        handler: BaseHandler = None
    ):
        """
        Initialize the checker.

        Args:
            registry: Target registry; a default one is created if omitted
            runner: Process runner injected into the lint handler
            handler: Lint handler; built from the registry settings if omitted
        """
        self.registry = registry or TargetRegistry()
        self.handler = handler or self.registry.get_handler(runner)
        self.logger = logging.getLogger('SyntaxChecker')

    def run_check(self, path: str) -> CheckResult:
        """
        Lint a single file.

        Args:
            path: File to check

        Returns:
            CheckResult; its raw_output is the linter output, verbatim
        """
        self.logger.info(f"Checking syntax: {path}")
        return self.handler.lint(path)

    def dump_file(self, path: str) -> bytes:
        """
        Read a file's full contents, unmodified.

        Args:
            path: File to read

        Returns:
            File contents as stored on disk

        Raises:
            ReadError: if the file is missing or unreadable
        """
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise ReadError(path, e.strerror or str(e)) from e

    def run(self, paths: Optional[List[str]] = None) -> SyntaxReport:
        """
        Check every target, then dump every target.

        Args:
            paths: Files to process; defaults to the registry targets

        Returns:
            SyntaxReport with check blocks followed by dump blocks
        """
        if paths is None:
            targets = self.registry.list_targets()
        else:
            targets = [CheckTarget(path=path) for path in paths]

        report = SyntaxReport()

        for target in targets:
            result = self.run_check(target.path)
            self.logger.info(
                f"Result for {target}: {result.status} "
                f"(checked {result.check_time:%Y-%m-%d %H:%M:%S})"
            )
            report.add_check(result)

        for target in targets:
            try:
                data = self.dump_file(target.path)
            except ReadError as e:
                self.logger.warning(f"Nothing to dump for {target}: {e}")
                data = b''
            report.add_dump(target.path, data)

        return report

    def print_report(self, stream: IO = None, paths: Optional[List[str]] = None) -> SyntaxReport:
        """
        Run the checks and write the report.

        Blocks are written as bytes, so the stream's text encoding never
        touches file contents or linter output.

        Args:
            stream: Output stream (default: sys.stdout); text streams are
                written through their binary buffer
            paths: Files to process; defaults to the registry targets

        Returns:
            The SyntaxReport that was written
        """
        if stream is None:
            stream = sys.stdout

        report = self.run(paths)

        # Anything already written through the text layer goes first
        stream.flush()
        binary = getattr(stream, 'buffer', stream)
        for block in report.blocks:
            binary.write(block.data)
        binary.flush()
        return report


def run_check(path: str) -> str:
    """
    Convenience function to lint a single file.

    Args:
        path: File to check

    Returns:
        Combined linter output
    """
    return SyntaxChecker().run_check(path).output


def dump_file(path: str) -> bytes:
    """
    Convenience function to read a file's contents.

    Args:
        path: File to read

    Returns:
        File contents as bytes
    """
    return SyntaxChecker().dump_file(path)
