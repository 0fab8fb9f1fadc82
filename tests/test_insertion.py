import numpy as np
import pytest

from circulator.insertion import InsertionError, insert
from circulator.participant import Participant
from circulator.seed import build_seed_graph


class FixedOffset:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        return self.value


def seeded(groups=None):
    groups = groups or [None] * 5
    ps = [Participant(f'P{i}', g) for i, g in enumerate(groups)]
    build_seed_graph(ps)
    return ps


def test_insert_after_random_start():
    ps = seeded()
    p = Participant('N')
    rng = FixedOffset(2)
    hunter = insert(p, 0, 5, ps[0], rng)
    assert rng.calls == [5]
    assert hunter is ps[2]
    assert ps[2].succ[0] is p
    assert p.succ[0] is ps[3]
    assert ps[3].pred[0] is p


def test_insert_walks_on_when_start_does_not_fit():
    ps = seeded()
    p = Participant('N')
    insert(p, 0, 5, ps[0], FixedOffset(0))  # P0 -> N -> P1
    # in circle 1 the gaps P0 -> P4 (P0 already hunts N) and
    # P2 -> P1 (N already hunts P1) are closed
    hunter = insert(p, 1, 5, ps[0], FixedOffset(0))
    assert hunter is ps[4]
    assert p.succ[1] is ps[3]


def test_insert_is_reproducible_with_seeded_generator():
    placements = []
    for _ in range(2):
        ps = seeded()
        p = Participant('N')
        rng = np.random.default_rng(42)
        placements.append([ps.index(insert(p, c, 5, ps[0], rng)) for c in range(3)])
    assert placements[0] == placements[1]


def test_insert_raises_when_nothing_fits():
    ps = seeded(['x'] * 5)
    p = Participant('N', 'x')
    with pytest.raises(InsertionError) as excinfo:
        insert(p, 0, 5, ps[0], np.random.default_rng(0))
    assert 'no fitting position for N/x in circle 0' in str(excinfo.value)
    assert excinfo.value.participant is p
    assert excinfo.value.circle == 0
    assert excinfo.value.circle_size == 5
    assert p.succ == [None, None, None]
    assert [q.succ[0] for q in ps] == [ps[1], ps[2], ps[3], ps[4], ps[0]]


def test_insert_rejects_existing_member():
    ps = seeded()
    with pytest.raises(ValueError):
        insert(ps[1], 0, 5, ps[0], np.random.default_rng(0))
