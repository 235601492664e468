"""Exception types for the sandbox containers.

Most operations are total and never raise (clamped insertion, ignored
out-of-range removal, empty aggregates). These types cover the remaining
cases: input with no defined behavior, and post-state checks enabled via
``check_invariants``.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when an argument is outside the domain an operation defines."""


class InvariantViolation(Exception):
    """
    Raised by a container built with ``check_invariants=True`` when the state
    left by a mutation fails one or more registered checks.

    ``violations`` holds the failing invariant IDs in registry order.
    """

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
