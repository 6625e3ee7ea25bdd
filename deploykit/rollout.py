"""Rollout status values reported by deployment providers."""

from __future__ import annotations

from enum import Enum


class RolloutStatus(str, Enum):
    """State of a deployment rollout."""

    COMPLETE = "complete"
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    FAILED = "failed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value