"""The fixed five participant core graph."""

from __future__ import annotations

import logging
from typing import Sequence

from .participant import Participant

logger = logging.getLogger(__name__)

SEED_SIZE = 5

# Successor offset per circle. Pairwise distinct non-zero residues mod 5,
# so no two circles share a directed edge.
SEED_OFFSETS = (1, -1, 2)


def build_seed_graph(participants: Sequence[Participant]) -> None:
    """Link the first ``SEED_SIZE`` participants into three disjoint circles.

    Five nodes are the minimum for three edge-disjoint Hamilton circles in
    a complete graph. Group constraints are not checked here; use
    :func:`circulator.consistency.check_circles` to find violations.
    """

    if len(participants) < SEED_SIZE:
        raise ValueError(
            f"seed graph needs {SEED_SIZE} participants, got {len(participants)}"
        )
    core = participants[:SEED_SIZE]
    for idx, participant in enumerate(core):
        for circle, offset in enumerate(SEED_OFFSETS):
            participant.link(circle, core[(idx + offset) % SEED_SIZE])
    logger.info("Seeded circles with %s", ", ".join(p.to_abbrev() for p in core))
