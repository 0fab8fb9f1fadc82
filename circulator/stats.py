"""How likely is a random circle to be edge-disjoint from a given one?

Players are numbered ``1..n`` and the given circle is ``1 -> 2 -> ... -> n
-> 1``. A second circle is written starting at ``1`` (w.l.o.g.), so there
are ``(n-1)!`` of them.
"""

from __future__ import annotations

from fractions import Fraction
from itertools import permutations
from math import factorial


def count_disjoint_circles(n: int) -> int:
    """Count circles over ``1..n`` sharing no directed edge with ``1 -> 2 -> ... -> n -> 1``.

    Brute force over ``(n-1)!`` orderings, so keep ``n`` small. Only the
    qualifying circles are counted, with no extra 1 added on top.
    """
    if n < 2:
        raise ValueError(f"need at least 2 players, got {n}")
    count = 0
    for tail in permutations(range(2, n + 1)):
        if tail[0] == 2 or tail[-1] == n:
            continue
        if any(u + 1 == v for u, v in zip(tail, tail[1:])):
            continue
        count += 1
    return count


def disjoint_ratio(n: int) -> Fraction:
    return Fraction(count_disjoint_circles(n), factorial(n - 1))
