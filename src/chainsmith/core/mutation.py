"""
Outcome values returned by every mutation.

Mutations never print or exit; they describe what happened and leave
rendering to the reporting adapter (chainsmith.engine.report).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag, auto


class Issue(Flag):
    """Soft problems a mutation can run into."""
    NONE = 0
    SECTION_ABSENT = auto()  # Targeted runtime section missing, nothing changed
    KEY_MISMATCH = auto()    # Override key not present in the genesis


@dataclass
class MutationResult:
    """Result of applying one mutation to a document."""
    operation: str
    changed: bool = False
    messages: list[str] = field(default_factory=list)   # Success lines
    warnings: list[str] = field(default_factory=list)   # Soft problems
    issues: Issue = Issue.NONE
    details: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.issues == Issue.NONE

    def note(self, message: str):
        self.messages.append(message)

    def warn(self, issue: Issue, message: str):
        self.issues |= issue
        self.warnings.append(message)

    @classmethod
    def absent(cls, operation: str, section: str) -> "MutationResult":
        """A no-op result for a document lacking `section`."""
        result = cls(operation=operation)
        result.warn(Issue.SECTION_ABSENT, f"{section} not found in runtimeConfig")
        return result
