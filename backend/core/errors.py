"""
AgriModel Errors

Failure tiers raised by the write path and the lifecycle hooks:
  - RecordValidationError    declarative field constraints, reported together
  - InvariantViolationError  an in-logic invariant (supply-chain quantities)
  - IdentifierCollisionError id generation ran out of attempts
"""

from __future__ import annotations

from typing import Any


class RecordValidationError(ValueError):
    """One or more field constraints failed; nothing was mutated."""

    def __init__(self, entity: str, errors: list[dict[str, Any]]) -> None:
        self.entity = entity
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in err.get("loc", ())) or "<record>" for err in errors)
        super().__init__(f"{entity} failed validation ({len(errors)} error(s)): {fields}")


class InvariantViolationError(ValueError):
    """A derived-field invariant cannot hold for the given inputs."""


class IdentifierCollisionError(RuntimeError):
    """Every generated identifier for a new record already existed."""

    def __init__(self, entity: str, attempts: int) -> None:
        self.entity = entity
        self.attempts = attempts
        super().__init__(f"Could not generate a unique identifier for {entity} after {attempts} attempt(s)")
