import pytest

from circulator.participant import Participant


def ring(names, circle=0, groups=None):
    groups = groups or [None] * len(names)
    ps = [Participant(n, g) for n, g in zip(names, groups)]
    for i, p in enumerate(ps):
        p.link(circle, ps[(i + 1) % len(ps)])
    return ps


def test_link_sets_back_link():
    a, b = Participant('A'), Participant('B')
    a.link(1, b)
    assert a.succ == [None, b, None]
    assert b.pred == [None, a, None]


def test_has_successor_checks_all_circles():
    a, b, c = Participant('A'), Participant('B'), Participant('C')
    a.link(2, b)
    assert a.has_successor(b)
    assert b.has_predecessor(a)
    assert not a.has_successor(c)
    assert not b.has_predecessor(c)


def test_membership_is_identity_not_name():
    a, b, twin = Participant('A'), Participant('B'), Participant('B')
    a.link(0, b)
    assert not a.has_successor(twin)


def test_advance_walks_successors():
    a, b, c = ring('ABC')
    assert a.advance(0, 0) is a
    assert a.advance(0, 2) is c
    assert a.advance(0, 4) is b
    with pytest.raises(ValueError):
        a.advance(0, -1)
    with pytest.raises(ValueError):
        a.advance(1, 1)


def test_fits_after_rejects_repeated_edges():
    a, b, c = ring('ABC')
    p = Participant('P')
    assert a.fits_after(0, p)

    a.link(1, p)
    assert not a.fits_after(0, p)
    assert c.fits_after(0, p)

    p.link(2, c)  # p already hunts C elsewhere, so the gap B -> C is closed
    assert not b.fits_after(0, p)


def test_fits_after_respects_groups():
    a, b, c = ring('ABC', groups=['x', 'y', 'z'])
    assert not a.fits_after(0, Participant('P', 'x'))
    assert not c.fits_after(0, Participant('P', 'x'))
    assert b.fits_after(0, Participant('P', 'x'))
    # a player without group fits next to anybody
    assert a.fits_after(0, Participant('P'))


def test_fits_after_requires_membership():
    with pytest.raises(ValueError):
        Participant('A').fits_after(0, Participant('P'))


def test_insert_after_first_fit_splices_at_first_gap():
    a, b, c = ring('ABC', groups=['x', 'y', 'z'])
    p = Participant('P', 'y')
    assert a.insert_after_first_fit(0, p)
    # A -> B and B -> C both border group y, so P lands between C and A
    assert c.succ[0] is p
    assert p.succ[0] is a
    assert a.pred[0] is p
    assert p.pred[0] is c


def test_insert_after_first_fit_gives_up_after_one_lap():
    a, b, c = ring('ABC', groups=['x', 'x', 'x'])
    p = Participant('P', 'x')
    assert not b.insert_after_first_fit(0, p)
    assert [q.succ[0] for q in (a, b, c)] == [b, c, a]
    assert p.succ == [None, None, None]


def test_abbrev_and_repr():
    a = Participant('A', 'x')
    b = Participant('B')
    a.link(0, b)
    assert a.to_abbrev() == 'A/x'
    assert b.to_abbrev() == 'B/'
    assert str(a) == 'A/x'
    assert repr(a) == '<Participant name=A group=x succ=B/,_,_ pred=_,_,_>'


def test_unlink_all_clears_every_circle():
    a, b, c = ring('ABC')
    a.link(2, c)
    a.unlink_all()
    assert a.succ == [None, None, None]
    assert a.pred == [None, None, None]
    assert not a.has_successor(b)
