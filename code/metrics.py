"""Helpers for collecting instrumentation data during dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class AttemptMetrics:
    """Outcome of a single allocate-place-count generation attempt."""

    attempt: int
    duration: float
    empty_cells: int
    rooms_placed: int
    accepted: bool

    def to_dict(self) -> Dict[str, float | int | bool]:
        return {
            "attempt": self.attempt,
            "duration": self.duration,
            "empty_cells": self.empty_cells,
            "rooms_placed": self.rooms_placed,
            "accepted": self.accepted,
        }


@dataclass
class GenerationMetrics:
    """Container for attempt and sampling metrics recorded during a generation run."""

    attempts: List[AttemptMetrics] = field(default_factory=list)
    variants_sampled: int = 0
    variants_rejected: int = 0

    def record_attempt(
        self,
        duration: float,
        empty_cells: int,
        rooms_placed: int,
        accepted: bool,
    ) -> None:
        self.attempts.append(
            AttemptMetrics(
                attempt=len(self.attempts) + 1,
                duration=duration,
                empty_cells=empty_cells,
                rooms_placed=rooms_placed,
                accepted=accepted,
            )
        )

    def record_sample(self, accepted: bool) -> None:
        self.variants_sampled += 1
        if not accepted:
            self.variants_rejected += 1

    @property
    def total_time(self) -> float:
        return sum(attempt.duration for attempt in self.attempts)

    @property
    def rejected_attempts(self) -> int:
        return sum(1 for attempt in self.attempts if not attempt.accepted)

    def snapshot(self) -> Dict[str, object]:
        rejection_rate = (
            self.variants_rejected / self.variants_sampled if self.variants_sampled else 0.0
        )
        return {
            "num_attempts": len(self.attempts),
            "rejected_attempts": self.rejected_attempts,
            "total_time": self.total_time,
            "variants_sampled": self.variants_sampled,
            "variants_rejected": self.variants_rejected,
            "variant_rejection_rate": rejection_rate,
            "attempts": [attempt.to_dict() for attempt in self.attempts],
        }
