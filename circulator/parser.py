from typing import Iterable, List

from .participant import Participant


class ParseError(ValueError):
    pass


def parse_participant(token: str) -> Participant:
    """Parse ``name/group`` or ``name``; an empty group means no group."""
    s = token.strip()
    if not s:
        raise ParseError('empty participant token')
    parts = s.split('/')
    if len(parts) > 2:
        raise ParseError(f'participant token {token!r} has more than one "/"')
    name = parts[0].strip()
    if not name:
        raise ParseError(f'participant token {token!r} has an empty name')
    group = parts[1].strip() if len(parts) == 2 else ''
    return Participant(name, group or None)


def parse_participants(tokens: Iterable[str]) -> List[Participant]:
    out: List[Participant] = []
    for token in tokens:
        # "A/x,B/y" and "A/x B/y" are both accepted
        for piece in token.replace(',', ' ').split():
            out.append(parse_participant(piece))
    return out
