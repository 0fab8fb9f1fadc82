from typing import Sequence

from .participant import Participant
from .seed import SEED_SIZE


class ValidationError(Exception):
    pass


def validate(participants: Sequence[object]) -> None:
    if len(participants) < SEED_SIZE:
        raise ValidationError(
            f'need at least {SEED_SIZE} participants, got {len(participants)}'
        )
    for idx, p in enumerate(participants):
        if not isinstance(p, Participant):
            raise ValidationError(f'entry {idx} is not a Participant: {p!r}')
        if p.group is not None and not isinstance(p.group, str):
            raise ValidationError(f'participant {p.name!r} has a non-string group {p.group!r}')
    if len({id(p) for p in participants}) != len(participants):
        raise ValidationError('the same Participant object is listed twice')
    for p in participants:
        if any(link is not None for link in p.succ):
            raise ValidationError(f'participant {p.to_abbrev()} is already linked')
