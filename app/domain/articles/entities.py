"""
Domain entities for the articles bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Article:
    """A published article and the names of its tags."""

    id: int
    title: str
    slug: str
    content: str
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a submitted form.

    Attributes:
        passed: True when the input satisfied every rule.
        errors: Field name mapped to its error messages, in the order
            the rules reported them. Always empty when passed is True.
    """

    passed: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.passed and self.errors:
            raise ValueError("A passing ValidationResult cannot carry errors")

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Return a passing result."""
        return cls(passed=True)

    @classmethod
    def failed(cls, errors: dict[str, list[str]]) -> "ValidationResult":
        """Return a failing result carrying the given error messages."""
        return cls(passed=False, errors=errors)
