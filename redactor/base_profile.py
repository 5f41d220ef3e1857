"""
Base Pattern Profile - Compiled patterns and the abstract profile they come from.

A profile bundles an ordered set of CompiledPatterns. The engine only ever
sees the ordered list; profiles exist so that a named, described default set
can be swapped or extended without touching the compiler.

Each profile defines:
    - name: Unique identifier for the profile
    - description: Human-readable description
    - get_patterns(): Returns the ordered CompiledPatterns
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Pattern


@dataclass(frozen=True)
class CompiledPattern:
    """An executable pattern plus the display form used in diagnostics."""
    name: str  # e.g., "email", "ssn", "custom"
    pattern: Pattern[str]
    description: str = ""

    @property
    def display(self) -> str:
        """Canonical source of the pattern."""
        return self.pattern.pattern

    def __str__(self) -> str:
        return self.display


class PatternProfile(ABC):
    """
    Abstract base class for pattern profiles.

    Example:
        class HrProfile(PatternProfile):
            @property
            def name(self) -> str:
                return "hr"

            @property
            def description(self) -> str:
                return "Employee identifiers"

            def get_patterns(self) -> tuple[CompiledPattern, ...]:
                return (
                    CompiledPattern(
                        name="employee_id",
                        pattern=re.compile(r'EMP-\\d{6}'),
                        description="Internal employee number",
                    ),
                )
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this profile."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this profile covers."""
        pass

    @abstractmethod
    def get_patterns(self) -> tuple[CompiledPattern, ...]:
        """Return the patterns in the order they must be applied."""
        pass

    def __repr__(self) -> str:
        return f"<PatternProfile: {self.name}>"
