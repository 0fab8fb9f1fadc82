"""Reordering of participants for maximal group variety up front."""

from __future__ import annotations

import logging
from itertools import zip_longest
from typing import Dict, List, Optional, Sequence

from .participant import Participant

logger = logging.getLogger(__name__)


def group_buckets(participants: Sequence[Participant]) -> List[List[Participant]]:
    """Bucket participants by group, largest bucket first.

    Participants without a group share one bucket. Buckets of equal size
    keep the order in which their group first appears.
    """

    buckets: Dict[Optional[str], List[Participant]] = {}
    for participant in participants:
        buckets.setdefault(participant.group, []).append(participant)
    return sorted(buckets.values(), key=len, reverse=True)


def order_by_group_variety(participants: Sequence[Participant]) -> List[Participant]:
    """Interleave the group buckets round robin.

    The earliest participants form the skeleton every later one has to fit
    around, so they should come from as many different groups as possible.
    """

    buckets = group_buckets(participants)
    ordered = [
        participant
        for row in zip_longest(*buckets)
        for participant in row
        if participant is not None
    ]
    logger.info(
        "Ordered %d participant(s) from %d group bucket(s)", len(ordered), len(buckets)
    )
    return ordered
