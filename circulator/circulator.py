"""Staging of three simultaneous hunting circles."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import CirculatorOptions, get_default_options
from .generate import GroupSpec, generate_participants
from .insertion import InsertionError, insert
from .ordering import order_by_group_variety
from .parser import parse_participants
from .participant import CIRCLE_COUNT, Participant
from .printer import format_circle, format_participants
from .seed import SEED_SIZE, build_seed_graph
from .validate import validate

logger = logging.getLogger(__name__)


class Circulator:
    """Build three circles over ``participants`` in which every player has
    exactly one prey and one hunter.

    No hunter has the same prey in two circles, and grouped players never
    hunt or get hunted by a member of their own group. ``participants``
    may be :class:`Participant` objects or ``name/group`` strings.

    Construction runs in two phases. The first ``SEED_SIZE`` participants
    (after reordering for group variety) form a fixed core graph, then every
    other participant is inserted into circles 0, 1 and 2 in turn at a
    randomly chosen fitting gap. :class:`~circulator.insertion.InsertionError`
    is raised when some participant fits nowhere in a circle.
    """

    def __init__(
        self,
        participants: Sequence[Union[Participant, str]],
        options: Optional[CirculatorOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.options = options if options is not None else get_default_options()
        self.rng = rng if rng is not None else self.options.make_rng()

        if participants and not isinstance(participants[0], Participant):
            participants = parse_participants(participants)  # type: ignore[arg-type]
        validate(participants)

        self.participants: List[Participant] = order_by_group_variety(participants)  # type: ignore[arg-type]
        # every circle is traversed from here
        self.starter: Participant = self.participants[0]

        try:
            build_seed_graph(self.participants)
            self._grow()
        except InsertionError:
            # leave the players reusable for another attempt
            for participant in self.participants:
                participant.unlink_all()
            raise

    @classmethod
    def generate(
        cls,
        n: int,
        groups: GroupSpec = None,
        options: Optional[CirculatorOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Circulator":
        """Stage circles for randomly generated players, see :func:`generate_participants`."""
        options = options if options is not None else get_default_options()
        rng = rng if rng is not None else options.make_rng()
        return cls(generate_participants(n, groups, rng), options=options, rng=rng)

    def _grow(self) -> None:
        for size, participant in enumerate(self.participants[SEED_SIZE:], start=SEED_SIZE):
            for circle in range(CIRCLE_COUNT):
                insert(participant, circle, size, self.starter, self.rng)
        logger.info(
            "Staged %d circle(s) over %d participant(s)", CIRCLE_COUNT, len(self.participants)
        )

    def get_circle(self, circle: int) -> List[Participant]:
        """Return the members of ``circle`` in hunting order, starting at the starter."""
        members = [self.starter]
        current = self.starter.succ[circle]
        while current is not self.starter:
            if current is None or len(members) > len(self.participants):
                raise RuntimeError(f"circle {circle} is not closed")
            members.append(current)
            current = current.succ[circle]
        return members

    def circles(self) -> List[List[Participant]]:
        return [self.get_circle(circle) for circle in range(CIRCLE_COUNT)]

    def circle_to_s(self, circle: int) -> str:
        return format_circle(self.get_circle(circle))

    def __repr__(self) -> str:
        return f"<Circulator participants=[{format_participants(self.participants)}]>"
