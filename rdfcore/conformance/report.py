"""Results of evaluating conformance tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..model import NamedNode

__all__ = ["Outcome", "EvaluationResult"]


@dataclass(frozen=True)
class Outcome:
    """Whether a test passed, and the error message when it failed."""

    error: Optional[str] = None

    @classmethod
    def success(cls) -> "Outcome":
        """The outcome of a passed test."""
        return cls(None)

    @classmethod
    def failure(cls, error: str) -> "Outcome":
        """The outcome of a failed test with the given error message."""
        return cls(str(error))

    @property
    def passed(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.error is None:
            return "passed"
        return f"failed with error {self.error}"


@dataclass(frozen=True)
class EvaluationResult:
    """The outcome of one test, identified by its IRI."""

    test: NamedNode
    outcome: Outcome

    def __str__(self) -> str:
        return f"{self.test}: {self.outcome}"