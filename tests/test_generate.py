import logging

import numpy as np

from circulator.generate import generate_participants


def test_players_without_groups():
    ps = generate_participants(4)
    assert [p.to_abbrev() for p in ps] == ['P1/', 'P2/', 'P3/', 'P4/']


def test_random_groups_are_reproducible():
    a = generate_participants(20, 9, np.random.default_rng(5))
    b = generate_participants(20, 9, np.random.default_rng(5))
    assert [p.to_abbrev() for p in a] == [p.to_abbrev() for p in b]
    assert [p.name for p in a] == [f'P{i}' for i in range(1, 21)]
    assert {p.group for p in a} <= {f'g{i}' for i in range(9)}


def test_group_sizes_matching_n_do_not_warn(caplog):
    sizes = [10, 8, 5, 4, 3, 2, 1, 1]
    with caplog.at_level(logging.WARNING, logger='circulator.generate'):
        ps = generate_participants(34, sizes)
    assert caplog.records == []
    assert len(ps) == 34
    assert [p.to_abbrev() for p in ps[:2]] == ['P1/g0', 'P2/g0']
    assert ps[10].to_abbrev() == 'P1/g1'
    assert ps[-1].to_abbrev() == 'P1/g7'


def test_group_sizes_win_over_n(caplog):
    with caplog.at_level(logging.WARNING, logger='circulator.generate'):
        ps = generate_participants(30, [10, 8, 5, 4, 3, 2, 1, 1])
    assert len(ps) == 34
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage() == 'Wrong n: 30 != 34'
