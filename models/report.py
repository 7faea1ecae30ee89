"""
Syntax Report model - the ordered console output of one run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.check_result import CheckResult


@dataclass
class ReportBlock:
    """One printed section: either a check result or a file dump."""

    kind: str
    path: str
    data: bytes
    result: Optional[CheckResult] = None


@dataclass
class SyntaxReport:
    """Check blocks first, then dump blocks, each in target order."""

    checks: List[ReportBlock] = field(default_factory=list)
    dumps: List[ReportBlock] = field(default_factory=list)

    def add_check(self, result: CheckResult) -> None:
        self.checks.append(ReportBlock('check', result.path, result.raw_output, result))

    def add_dump(self, path: str, data: bytes) -> None:
        self.dumps.append(ReportBlock('dump', path, data))

    @property
    def blocks(self) -> List[ReportBlock]:
        return self.checks + self.dumps

    @property
    def results(self) -> List[CheckResult]:
        return [block.result for block in self.checks]

    @property
    def has_syntax_errors(self) -> bool:
        return any(r.has_syntax_errors for r in self.results)

    def render(self) -> bytes:
        """Concatenate every block verbatim."""
        return b''.join(block.data for block in self.blocks)
