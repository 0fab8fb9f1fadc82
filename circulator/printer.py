from typing import Iterable, List

from .participant import Participant


def format_participants(participants: Iterable[Participant]) -> str:
    return ",".join(p.to_abbrev() for p in participants)


def format_circle(members: List[Participant]) -> str:
    """Render one circle as ``name/group`` labels in hunting order."""
    return format_participants(members)


def format_circles(circles: List[List[Participant]]) -> str:
    return "\n".join(format_circle(members) for members in circles)
