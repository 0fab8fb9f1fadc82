"""Random participant lists for trying out the circle construction."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from .participant import Participant

logger = logging.getLogger(__name__)

GroupSpec = Union[None, int, Sequence[int]]


def generate_participants(
    n: int,
    groups: GroupSpec = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Participant]:
    """Generate players ``P1``, ``P2``, ...

    ``groups`` of ``None`` gives players without a group. An ``int`` assigns
    each of the ``n`` players to one of that many groups ``g0``, ``g1``, ...
    at random. A sequence of ints is read as explicit group sizes; names then
    restart at ``P1`` in every group, and if the sizes do not add up to
    ``n`` a warning is logged and ``n`` is ignored.
    """

    if groups is None:
        return [Participant(f"P{i}") for i in range(1, n + 1)]

    if isinstance(groups, (int, np.integer)):
        if groups < 1:
            raise ValueError(f"number of groups must be positive, got {groups}")
        rng = rng if rng is not None else np.random.default_rng()
        labels = rng.integers(int(groups), size=n)
        return [Participant(f"P{i}", f"g{label}") for i, label in enumerate(labels, start=1)]

    sizes = [int(size) for size in groups]
    total = sum(sizes)
    if total != n:
        logger.warning("Wrong n: %d != %d", n, total)
    return [
        Participant(f"P{i}", f"g{j}")
        for j, size in enumerate(sizes)
        for i in range(1, size + 1)
    ]
