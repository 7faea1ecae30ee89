"""
Check Result model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List


@dataclass
class LintMessage:
    """A single error reference found in linter output."""

    severity: str
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        location = self.file or '<unknown>'
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{location}: {self.severity}: {self.message}"

    def to_dict(self) -> dict:
        return {
            'severity': self.severity,
            'message': self.message,
            'file': self.file,
            'line': self.line,
            'column': self.column,
        }


@dataclass
class CheckResult:
    """Represents the result of linting one file."""

    path: str
    method: Optional[str] = None
    command: List[str] = field(default_factory=list)
    output: str = ""
    raw_output: bytes = b""
    returncode: Optional[int] = None
    messages: List[LintMessage] = field(default_factory=list)
    error: Optional[str] = None
    check_time: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return self.output

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'path': self.path,
            'method': self.method,
            'command': list(self.command),
            'output': self.output,
            'returncode': self.returncode,
            'messages': [m.to_dict() for m in self.messages],
            'error': self.error,
            'status': self.status,
            'check_time': self.check_time.isoformat() if self.check_time else None,
        }

    @property
    def is_success(self) -> bool:
        """Check if the linter ran and reported no problems."""
        return self.error is None and self.returncode == 0 and not self.messages

    @property
    def has_syntax_errors(self) -> bool:
        """True when the linter ran and flagged the file."""
        if self.error is not None:
            return False
        return bool(self.messages) or self.returncode != 0

    @property
    def status(self) -> str:
        """Get status string."""
        if self.error:
            return 'error'
        return 'syntax_error' if self.has_syntax_errors else 'ok'
