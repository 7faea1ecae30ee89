"""
Check Target model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckTarget:
    """A source file whose syntax is checked and whose contents are dumped."""

    path: str
    label: str = ""

    def __str__(self) -> str:
        return self.label or self.path
