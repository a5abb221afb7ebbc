"""
Failure kinds raised by the partition pipeline.

Every error carries a ``kind`` tag and a ``context`` dict naming the check
that failed, so callers can report it without parsing the message.
"""
from __future__ import annotations

from typing import Any, Dict


class PartitionError(Exception):
    """Base class for all partition failures."""

    kind = "partition_error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in sorted(self.context.items()))
        return f"{self.message} ({details})"


class InvalidInput(PartitionError):
    """Too few points, non-finite coordinates, repeated vertices or zero area."""

    kind = "invalid_input"


class SelfIntersecting(PartitionError):
    """Two edges of the polygon cross or touch."""

    kind = "self_intersecting"


class TriangulationFailure(PartitionError):
    """No ear could be found on a polygon that passed validation.

    This means validation let through something it should not have; it is a
    bug report, not a user error.
    """

    kind = "triangulation_failure"
