"""Soft and strict expectations for tag behavior checks.

Strict expectations raise `AssertionError` on the first mismatch. Soft
expectations record the mismatch and let the caller continue; the caller
decides when to turn the recorded failures into a `SoftAssertionError`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ExpectationFailure:
    """A single mismatch between expected and actual values."""

    subject: str
    message: str
    expected: Optional[str] = None
    actual: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.subject}: {self.message}"
        if self.expected is not None or self.actual is not None:
            text += f" (expected {self.expected}, actual {self.actual})"
        return text


class SoftAssertionError(AssertionError):
    """Raised at completion when soft expectations recorded failures."""

    def __init__(self, failures: List[ExpectationFailure], context: str = "") -> None:
        self.failures = list(failures)
        self.context = context
        header = f"{len(self.failures)} soft assertion(s) failed"
        if context:
            header += f" for {context}"
        super().__init__("\n  - ".join([header + ":"] + [str(f) for f in self.failures]))


@dataclass
class Expectations:
    """Assertion sink that is either strict (raise now) or soft (record)."""

    strict: bool = False
    failures: List[ExpectationFailure] = field(default_factory=list)
    checks: int = 0

    def that(
        self,
        condition: bool,
        subject: str,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ) -> bool:
        """Evaluate one expectation; returns whether it held."""
        self.checks += 1
        if condition:
            return True

        failure = ExpectationFailure(
            subject=subject,
            message=message,
            expected=None if expected is None else str(expected),
            actual=None if actual is None else str(actual),
        )
        if self.strict:
            raise AssertionError(str(failure))

        logger.warning("Soft assertion failed: %s", failure)
        self.failures.append(failure)
        return False

    @property
    def passed(self) -> bool:
        return not self.failures

    def raise_for_failures(self, context: str = "") -> None:
        if self.failures:
            raise SoftAssertionError(self.failures, context)
