from __future__ import annotations

from typing import List, Optional

CIRCLE_COUNT = 3


class Participant:
    """A player in the game.

    Every participant is hunter and prey at the same time: for each of the
    ``CIRCLE_COUNT`` circles it keeps its prey (``succ``) and its hunter
    (``pred``). ``pred`` is only ever written by :meth:`link` and is the
    inverse of ``succ``.

    A participant without a group is exempt from all group constraints.
    Equality is identity; names are not required to be unique.
    """

    __slots__ = ("name", "group", "succ", "pred")

    def __init__(self, name: str, group: Optional[str] = None) -> None:
        self.name = name
        self.group = group
        self.succ: List[Optional[Participant]] = [None] * CIRCLE_COUNT
        self.pred: List[Optional[Participant]] = [None] * CIRCLE_COUNT

    def has_successor(self, other: "Participant") -> bool:
        """Is ``other`` the prey of this participant in any circle?"""
        return any(p is other for p in self.succ)

    def has_predecessor(self, other: "Participant") -> bool:
        """Is ``other`` the hunter of this participant in any circle?"""
        return any(p is other for p in self.pred)

    def in_circle(self, circle: int) -> bool:
        return self.succ[circle] is not None

    def link(self, circle: int, other: "Participant") -> None:
        """Make ``other`` the prey of this participant in ``circle``."""
        self.succ[circle] = other
        other.pred[circle] = self

    def unlink_all(self) -> None:
        """Drop this participant from every circle."""
        self.succ = [None] * CIRCLE_COUNT
        self.pred = [None] * CIRCLE_COUNT

    def advance(self, circle: int, hops: int) -> "Participant":
        """Return the participant ``hops`` successors further along ``circle``."""
        if hops < 0:
            raise ValueError(f"hops must be non-negative, got {hops}")
        current = self
        for _ in range(hops):
            nxt = current.succ[circle]
            if nxt is None:
                raise ValueError(f"{current.to_abbrev()} is not part of circle {circle}")
            current = nxt
        return current

    def fits_after(self, circle: int, other: "Participant") -> bool:
        """Can ``other`` go between this participant and its prey in ``circle``?

        Neither of the two new edges may repeat an edge of another circle,
        and a grouped ``other`` may not border a member of its own group.
        """
        nxt = self.succ[circle]
        if nxt is None:
            raise ValueError(f"{self.to_abbrev()} is not part of circle {circle}")
        if self.has_successor(other) or nxt.has_predecessor(other):
            return False
        if other.group is None:
            return True
        return self.group != other.group and nxt.group != other.group

    def insert_after_first_fit(self, circle: int, other: "Participant") -> bool:
        """Splice ``other`` into ``circle`` at the first fitting gap.

        The walk starts at this participant and stops after one lap.
        Returns False when no gap fits; the circle is then left untouched.
        """
        current = self
        while True:
            if current.fits_after(circle, other):
                other.link(circle, current.succ[circle])  # type: ignore[arg-type]
                current.link(circle, other)
                return True
            current = current.succ[circle]  # type: ignore[assignment]
            if current is self:
                return False

    def to_abbrev(self) -> str:
        return f"{self.name}/{self.group if self.group is not None else ''}"

    def _links_str(self, links: List[Optional["Participant"]]) -> str:
        return ",".join(p.to_abbrev() if p is not None else "_" for p in links)

    def __repr__(self) -> str:
        return (
            f"<Participant name={self.name} group={self.group} "
            f"succ={self._links_str(self.succ)} pred={self._links_str(self.pred)}>"
        )

    def __str__(self) -> str:
        return self.to_abbrev()
