"""Domain exceptions: all public errors of criteria.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.

Filtering itself never raises: an empty result is a valid outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CriteriaError(Exception):
    """Base for all criteria error exceptions.

    Allows: except CriteriaError to catch all library errors.
    """


class InvalidPredicateError(CriteriaError, ValueError):
    """Predicate constructed with a nonsensical comparison value.

    Inherits ValueError for semantic correctness (bad argument value).

    Attributes:
        predicate: Predicate class name.
        reason: Why the value is invalid.
    """

    def __init__(self, predicate: str, reason: str) -> None:
        """Initialize with predicate name and reason."""
        self.predicate = predicate
        self.reason = reason
        super().__init__(f"{predicate}: {reason}")


class CatalogError(CriteriaError):
    """Product catalog could not be read or written.

    Attributes:
        path: Catalog file path.
        reason: Error description.
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ExpectationError(CriteriaError, AssertionError):
    """Query expectations not met.

    Raised by QueryAssertion.assert_check() when any expectation fails.
    Inherits AssertionError so pytest reports it as a test failure.

    Attributes:
        failures: Description of every failed expectation
    """

    def __init__(self, failures: tuple[str, ...]) -> None:
        if not failures:
            raise ValueError("ExpectationError requires at least one failure")

        self.failures = failures

        msg_parts = [f"{len(failures)} expectation(s) failed:"]
        msg_parts.extend(f"  - {failure}" for failure in failures)
        super().__init__("\n".join(msg_parts))
