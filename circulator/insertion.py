"""Insertion of a new participant into one circle."""

from __future__ import annotations

import logging

import numpy as np

from .logging_utils import apply_debug_logging
from .participant import Participant

logger = logging.getLogger(__name__)


class InsertionError(RuntimeError):
    """Raised when no gap of a circle admits the participant."""

    def __init__(self, participant: Participant, circle: int, circle_size: int) -> None:
        self.participant = participant
        self.circle = circle
        self.circle_size = circle_size
        super().__init__(
            f"no fitting position for {participant.to_abbrev()} "
            f"in circle {circle} of size {circle_size}"
        )


def random_start(
    starter: Participant, circle: int, circle_size: int, rng: np.random.Generator
) -> Participant:
    """Pick a uniformly random current member of ``circle``."""
    return starter.advance(circle, int(rng.integers(circle_size)))


def insert(
    participant: Participant,
    circle: int,
    circle_size: int,
    starter: Participant,
    rng: np.random.Generator,
) -> Participant:
    """Insert ``participant`` into ``circle`` and return its new hunter.

    ``circle_size`` is the size of the circle before the insertion. The
    search starts at a random member and walks one lap; a lap covers every
    gap, so failing it means the circle has no room for the participant.
    """

    if participant.in_circle(circle):
        raise ValueError(f"{participant.to_abbrev()} is already part of circle {circle}")
    start = random_start(starter, circle, circle_size, rng)
    if not start.insert_after_first_fit(circle, participant):
        raise InsertionError(participant, circle, circle_size)
    hunter = participant.pred[circle]
    logger.debug(
        "circle %d: %s -> %s -> %s",
        circle,
        hunter.to_abbrev(),  # type: ignore[union-attr]
        participant.to_abbrev(),
        participant.succ[circle].to_abbrev(),  # type: ignore[union-attr]
    )
    return hunter  # type: ignore[return-value]


apply_debug_logging(globals(), logger=logger)
