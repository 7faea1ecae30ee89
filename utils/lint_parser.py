"""
Lint output parser for extracting error references from linter text.
"""

import re
from typing import Optional, List
import logging

from models.check_result import LintMessage


class LintOutputParser:
    """Utility class for finding line/column error references in linter output."""

    # Printed by `php -l` for a clean file
    NO_ERRORS_MARKER = "No syntax errors detected"

    # PHP: "PHP Parse error:  syntax error, unexpected end of file in x.php on line 12"
    PHP_PATTERN = re.compile(
        r'^(?:PHP )?(?P<severity>Parse error|Fatal error|Warning|Deprecated|Notice):\s+'
        r'(?P<message>.+?) in (?P<file>.+?) on line (?P<line>\d+)\s*$'
    )

    # Python: '  File "x.py", line 3' ... 'SyntaxError: invalid syntax'
    PYTHON_LOCATION_PATTERN = re.compile(r'^\s*File "(?P<file>[^"]+)", line (?P<line>\d+)')
    PYTHON_ERROR_PATTERN = re.compile(r'^(?:Sorry: )?(?P<severity>\w*Error): (?P<message>.*)$')

    # Compiler style: "x.c:3:14: error: expected ';'"
    GENERIC_PATTERN = re.compile(
        r'^(?P<file>[^:\s][^:]*):(?P<line>\d+):(?:(?P<column>\d+):)?\s*'
        r'(?:(?P<severity>error|warning|fatal error):\s*)?(?P<message>.+)$',
        re.IGNORECASE
    )

    def __init__(self):
        self.logger = logging.getLogger('LintOutputParser')

    def parse(self, output: str) -> List[LintMessage]:
        """
        Parse linter output into error references.

        Args:
            output: Combined stdout/stderr of the linter

        Returns:
            List of LintMessage, empty when nothing was flagged
        """
        if not output:
            return []

        messages = []
        lines = output.splitlines()
        pending = None

        for line in lines:
            stripped = line.rstrip()
            if not stripped or self.NO_ERRORS_MARKER in stripped:
                continue

            match = self.PHP_PATTERN.match(stripped)
            if match:
                messages.append(self._from_match(match))
                continue

            match = self.PYTHON_LOCATION_PATTERN.match(stripped)
            if match:
                pending = match
                continue

            match = self.PYTHON_ERROR_PATTERN.match(stripped)
            if match:
                messages.append(LintMessage(
                    severity=match.group('severity'),
                    message=match.group('message').strip(),
                    file=pending.group('file') if pending else None,
                    line=int(pending.group('line')) if pending else None,
                ))
                pending = None
                continue

            match = self.GENERIC_PATTERN.match(stripped)
            if match:
                messages.append(self._from_match(match))

        self.logger.debug(f"Parsed {len(messages)} message(s) from linter output")
        return messages

    def has_errors(self, output: str) -> bool:
        """Check whether the output flags any problem."""
        return bool(self.parse(output))

    def first_location(self, output: str) -> Optional[LintMessage]:
        """Get the first error reference, if any."""
        messages = self.parse(output)
        return messages[0] if messages else None

    def _from_match(self, match: re.Match) -> LintMessage:
        groups = match.groupdict()
        column = groups.get('column')
        return LintMessage(
            severity=groups.get('severity') or 'error',
            message=groups['message'].strip(),
            file=groups.get('file'),
            line=int(groups['line']),
            column=int(column) if column else None,
        )
