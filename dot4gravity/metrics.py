"""Prometheus metrics for the dot4gravity adapter.

Counters are recorded by the turn-based adapter only; the engine itself
stays free of side effects.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter


GAMES_CREATED: Final[Counter] = Counter(
    "dot4gravity_games_created_total",
    "Total number of games initialised through the adapter.",
)

TURNS_PLAYED: Final[Counter] = Counter(
    "dot4gravity_turns_total",
    "Total number of turns submitted, labeled by move_type and outcome.",
    labelnames=("move_type", "outcome"),
)

GAMES_FINISHED: Final[Counter] = Counter(
    "dot4gravity_games_finished_total",
    "Total number of finished games, labeled by reason (victory or abort).",
    labelnames=("reason",),
)


def observe_turn(move_type: str, accepted: bool) -> None:
    """Record one submitted turn."""
    TURNS_PLAYED.labels(
        move_type=move_type,
        outcome="accepted" if accepted else "rejected",
    ).inc()
