from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .participant import CIRCLE_COUNT, Participant


@dataclass
class CircleWarning:
    circle: Optional[int]
    kind: str  # 'link', 'cycle', 'repeat' or 'group'
    message: str
    participants: List[Participant] = field(default_factory=list)

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def _members(participants: Sequence[Participant], circle: int) -> List[Participant]:
    return [p for p in participants if p.succ[circle] is not None]


def _check_links(members: List[Participant], circle: int) -> List[CircleWarning]:
    warnings: List[CircleWarning] = []
    member_ids = {id(p) for p in members}
    for p in members:
        q = p.succ[circle]
        if id(q) not in member_ids:
            warnings.append(CircleWarning(
                circle, 'link',
                f'[circle {circle}] prey of {p.to_abbrev()} ({q.to_abbrev()}) has no prey itself',
                [p, q],
            ))
        elif q.pred[circle] is not p:
            warnings.append(CircleWarning(
                circle, 'link',
                f'[circle {circle}] {p.to_abbrev()} hunts {q.to_abbrev()} '
                f'but the back link points elsewhere',
                [p, q],
            ))
    return warnings


def _check_cycle(members: List[Participant], circle: int) -> List[CircleWarning]:
    if not members:
        return []
    start = members[0]
    seen = {id(start)}
    current = start.succ[circle]
    steps = 1
    while current is not None and current is not start and steps <= len(members):
        seen.add(id(current))
        current = current.succ[circle]
        steps += 1
    if current is start and steps == len(members) and len(seen) == len(members):
        return []
    return [CircleWarning(
        circle, 'cycle',
        f'[circle {circle}] starting at {start.to_abbrev()} the circle does not '
        f'visit all {len(members)} members exactly once',
        [start],
    )]


def _check_repeats(p: Participant) -> List[CircleWarning]:
    warnings: List[CircleWarning] = []
    for c1 in range(CIRCLE_COUNT):
        for c2 in range(c1 + 1, CIRCLE_COUNT):
            q = p.succ[c1]
            if q is not None and q is p.succ[c2]:
                warnings.append(CircleWarning(
                    None, 'repeat',
                    f'{p.to_abbrev()} hunts {q.to_abbrev()} in circles {c1} and {c2}',
                    [p, q],
                ))
    return warnings


def _check_groups(members: List[Participant], circle: int) -> List[CircleWarning]:
    warnings: List[CircleWarning] = []
    for p in members:
        q = p.succ[circle]
        if p.group is not None and q is not None and p.group == q.group:
            warnings.append(CircleWarning(
                circle, 'group',
                f'[circle {circle}] {p.to_abbrev()} hunts {q.to_abbrev()} of the same group',
                [p, q],
            ))
    return warnings


def check_circles(participants: Sequence[Participant]) -> List[CircleWarning]:
    """Check every circle for broken links, sub-cycles, repeated pairs and group clashes."""
    warnings: List[CircleWarning] = []
    for circle in range(CIRCLE_COUNT):
        members = _members(participants, circle)
        link_warnings = _check_links(members, circle)
        warnings.extend(link_warnings)
        if not link_warnings:
            warnings.extend(_check_cycle(members, circle))
        warnings.extend(_check_groups(members, circle))
    for p in participants:
        warnings.extend(_check_repeats(p))
    return warnings
